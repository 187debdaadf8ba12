from .geometry import COORD_MAX, COORD_MIN, GeometryError, Line, Point, Polygon, Rect, to_coord
from .sampling import (
    BaseSampler,
    Log2Sampler,
    RectSampler,
    SamplingError,
    make_sampler,
    sample_points,
)
from .lines import midpoint_lines, midpoints, pair_lines
from .collision import (
    COLLISION_MODES,
    collides,
    collision_mask,
    cross_signum,
    legacy_collides,
    lines_to_array,
    segments_cross,
)
from .prune import prune_lines
from .config import PipelineOptions, get_default_options, set_default_options
from .validate import ValidationError, validate_options
from .printer import format_line, format_lines
from .pipeline import VoronoiResult, build_voronoi

__all__ = [
    'COORD_MAX',
    'COORD_MIN',
    'GeometryError',
    'Line',
    'Point',
    'Polygon',
    'Rect',
    'to_coord',
    'BaseSampler',
    'Log2Sampler',
    'RectSampler',
    'SamplingError',
    'make_sampler',
    'sample_points',
    'midpoint_lines',
    'midpoints',
    'pair_lines',
    'COLLISION_MODES',
    'collides',
    'collision_mask',
    'cross_signum',
    'legacy_collides',
    'lines_to_array',
    'segments_cross',
    'prune_lines',
    'PipelineOptions',
    'get_default_options',
    'set_default_options',
    'ValidationError',
    'validate_options',
    'format_line',
    'format_lines',
    'VoronoiResult',
    'build_voronoi',
]
