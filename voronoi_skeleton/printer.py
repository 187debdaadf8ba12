from typing import Iterable

from .geometry import Line


def format_line(line: Line) -> str:
    return f"{line.a.x} {line.a.y} {line.b.x} {line.b.y}"


def format_lines(lines: Iterable[Line]) -> str:
    """One ``a.x a.y b.x b.y`` row per line, newline terminated when non-empty."""

    rows = [format_line(line) for line in lines]
    if not rows:
        return ""
    return "\n".join(rows) + "\n"
