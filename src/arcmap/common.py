"""Central module containing type definitions shared by curves, arcs, splines and paths."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional, Sequence, Tuple, Union

###############################################################################
# Types
###############################################################################

# Plain 2D point (x, y)
Point = Tuple[float, float]

# Point of a spline (x, y, is_segment_end) - a 2-tuple counts as not flagged
SplinePoint = Union[Tuple[float, float, bool], Tuple[float, float]]

# Elliptic arc chained to the previous segment:
# (radius_x, radius_y, start_angle, end_angle, tilt) - angles in radians
ArcSpec = Tuple[float, float, float, float, float]

# Element of a mixed path: either a curve point or an arc spec
PathPoint = Union[SplinePoint, ArcSpec]

# Color channels (r, g, b, a) with r, g, b in [0, 255] and a in [0, 1]
Rgba = Tuple[float, float, float, float]


###############################################################################
# Enums
###############################################################################


class ColorFormat(Enum):
    """Enum to define the recognized color string formats."""

    HEX = auto()
    RGB = auto()
    RGBA = auto()
    INVALID = auto()


###############################################################################
# Functions
###############################################################################


def is_arc_spec(point: Sequence) -> bool:
    """Return True if the given path element is an arc spec and not a curve point.

    Arc specs and curve points are told apart by their length only.
    """
    return len(point) > 3


def is_segment_end(point: Sequence) -> bool:
    """Return True if the given curve point carries the segment end flag.

    Only the boolean True counts as flag; other truthy values such as 1 do not.
    """
    return len(point) > 2 and point[2] is True


def coerce_number(value: Optional[Union[int, float, str]], default: float = 0.0) -> float:
    """Convert value to float, falling back to default for anything non-numeric or NaN."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    if number != number:  # NaN
        return default
    return number


def main() -> None:
    """Display the color format enum values."""
    for color_format in ColorFormat:
        print(color_format, color_format.value)


if __name__ == "__main__":
    main()
