"""Arc-length parameterization of paths mixing Bezier curves and elliptic arcs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from arcmap.bezier import BezierCurve
from arcmap.common import PathPoint, Point, coerce_number, is_arc_spec, is_segment_end
from arcmap.consts import DEFAULT_STEP
from arcmap.ellipse import EllipticArc
from arcmap.length_map import SegmentLengthMap

logger = logging.getLogger(__name__)


###############################################################################
# Segments
###############################################################################


@dataclass(frozen=True)
class CurveSegment:
    """Bezier segment of a path.

    Attributes:
        points: Control points (x, y). The first one may be the end point of a
            preceding arc.
    """

    points: Tuple[Point, ...]

    @property
    def end_point(self) -> Point:
        """Tuple[float, float]: Last control point."""
        return self.points[-1]

    def length(self, step: Optional[float] = DEFAULT_STEP) -> float:
        """Estimated length of the curve."""
        return BezierCurve.curve_length(self.points, step)

    def point_at(self, shift: float) -> Point:
        """Point on the curve at _shift_ percent."""
        return BezierCurve.point_on_curve(shift, self.points)


@dataclass(frozen=True)
class ArcSegment:
    """Elliptic arc segment of a path, anchored to the end of the previous segment.

    Attributes:
        radius_x: Radius along the untilted x-axis
        radius_y: Radius along the untilted y-axis
        start_radian: Angle where the arc starts
        end_radian: Angle where the arc ends
        tilt: Rotation of the ellipse in radians
        center: Center of the ellipse, reconstructed from the start point
    """

    radius_x: float
    radius_y: float
    start_radian: float
    end_radian: float
    tilt: float
    center: Point

    @classmethod
    def from_spec(cls, spec: Sequence[float], start_point: Optional[Point]) -> ArcSegment:
        """Create the arc for a (radius_x, radius_y, start, end, tilt) spec starting at start_point.

        A missing or non-numeric tilt counts as 0.
        """
        radius_x, radius_y, start_radian, end_radian = (float(value) for value in spec[:4])
        tilt = coerce_number(spec[4]) if len(spec) > 4 else 0.0
        center = EllipticArc.arc_center(radius_x, radius_y, start_radian, tilt, start_point)
        return cls(radius_x, radius_y, start_radian, end_radian, tilt, center)

    @property
    def end_point(self) -> Point:
        """Tuple[float, float]: Point where the arc ends."""
        return EllipticArc.arc_end(self.radius_x, self.radius_y, self.end_radian, self.tilt, self.center)

    def length(self, step: Optional[float] = DEFAULT_STEP) -> float:
        """Estimated length of the arc."""
        return EllipticArc.arc_length(self.radius_x, self.radius_y, self.start_radian, self.end_radian, step)

    def point_at(self, shift: float) -> Point:
        """Point on the arc at _shift_ percent of its angle range."""
        return EllipticArc.point_on_arc(
            self.radius_x, self.radius_y, self.start_radian, self.end_radian, self.tilt, self.center, shift
        )


PathSegment = Union[CurveSegment, ArcSegment]


###############################################################################
# PathMapper
###############################################################################


class PathMapper:
    """Utility class for walking a mixed curve/arc path by travelled distance.

    A path is a flat sequence of curve points (x, y, is_segment_end) and arc specs
    (radius_x, radius_y, start_angle, end_angle, tilt). A curve segment ends at a
    flagged point (unless it is the last one) or right before an arc spec. Every
    arc spec is a segment of its own which starts where the previous segment ended
    (the origin if nothing precedes it); its end point starts the next segment.
    """

    @staticmethod
    def split_path(points: Sequence[PathPoint]) -> List[PathSegment]:
        """Split the path into curve and arc segments with all anchors resolved.

        Args:
            points: Curve points and arc specs

        Returns:
            List of CurveSegment and ArcSegment in path order

        Raises:
            ValueError: If points is empty
        """
        if len(points) == 0:
            raise ValueError("Path needs at least one point")

        last_index = len(points) - 1
        segments: List[PathSegment] = []
        current: List[Point] = []
        anchor: Optional[Point] = None

        for index, point in enumerate(points):
            if is_arc_spec(point):
                arc = ArcSegment.from_spec(point, anchor)
                segments.append(arc)
                anchor = arc.end_point
                current = [anchor]
                continue

            xy = (float(point[0]), float(point[1]))
            current.append(xy)
            next_is_arc = index < last_index and is_arc_spec(points[index + 1])
            if next_is_arc or (is_segment_end(point) and index != last_index):
                segments.append(CurveSegment(tuple(current)))
                current = [xy]
            anchor = xy

        if not is_arc_spec(points[last_index]):
            segments.append(CurveSegment(tuple(current)))
        return segments

    @classmethod
    def build_map(cls, points: Sequence[PathPoint], step: Optional[float] = DEFAULT_STEP) -> SegmentLengthMap:
        """Estimate the length of every curve and arc segment of the path.

        Args:
            points: Curve points and arc specs
            step: Sampling step in percent used for each segment

        Returns:
            SegmentLengthMap with one entry per segment
        """
        segments = cls.split_path(points)
        length_map = SegmentLengthMap([segment.length(step) for segment in segments], step)
        logger.debug(
            "Built path map: %d segments (%d arcs), length %.6f",
            len(length_map),
            sum(1 for segment in segments if isinstance(segment, ArcSegment)),
            length_map.length,
        )
        return length_map

    @classmethod
    def point_on_path(cls, shift: float, points: Sequence[PathPoint], length_map: SegmentLengthMap) -> Point:
        """Point reached after _shift_ percent of the total path length.

        Args:
            shift: Position in percent of the travelled distance (0..100)
            points: Curve points and arc specs, the same the map was built from
            length_map: Map returned by build_map for these points

        Returns:
            Tuple[float, float]: the point on the path

        Raises:
            ValueError: If the map does not match the points
        """
        segments = cls.split_path(points)
        length_map.validate_against(len(segments))
        index, local_shift = length_map.locate(shift)
        return segments[index].point_at(local_shift)
