import numbers

from .collision import COLLISION_MODES
from .config import PipelineOptions
from .geometry import Rect
from .sampling import SAMPLING_MODES


class ValidationError(ValueError):
    pass


def _ensure_count(value: object, name: str, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f'{name} must be an integer (got {value!r})')
    if value < minimum:
        raise ValidationError(f'{name} must be >= {minimum} (got {value})')


def validate_options(options: PipelineOptions) -> None:
    _ensure_count(options.point_count, 'point_count', 0)
    _ensure_count(options.max_redraws, 'max_redraws', 1)
    if options.seed is not None:
        _ensure_count(options.seed, 'seed', 0)
    if not isinstance(options.bounds, Rect):
        raise ValidationError(f'bounds must be a Rect (got {type(options.bounds).__name__})')
    if options.sampling not in SAMPLING_MODES:
        raise ValidationError(f'sampling must be one of {"|".join(SAMPLING_MODES)} (got {options.sampling!r})')
    if options.collision not in COLLISION_MODES:
        raise ValidationError(f'collision must be one of {"|".join(COLLISION_MODES)} (got {options.collision!r})')
