"""Arc-length parameterization of splines made of chained Bezier curves."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from arcmap.bezier import BezierCurve
from arcmap.common import Point, SplinePoint, is_segment_end
from arcmap.consts import DEFAULT_STEP
from arcmap.length_map import SegmentLengthMap

logger = logging.getLogger(__name__)


class SplineMapper:
    """Utility class for walking a spline by travelled distance.

    A spline is a flat sequence of points (x, y, is_segment_end). A flagged point
    ends the current Bezier segment and starts the next one, so neighbouring
    segments share their boundary point. A flag on the very last point has no effect.

    Usage:
        length_map = SplineMapper.build_map(points)
        point = SplineMapper.point_on_spline(25, points, length_map)
    """

    @staticmethod
    def split_spline(points: Sequence[SplinePoint]) -> List[Tuple[int, int]]:
        """Split the spline into segments.

        Args:
            points: Spline points (x, y, is_segment_end)

        Returns:
            List of half-open index ranges (start, end) into _points_, one per segment.
            The end point of one range is the start point of the next one.

        Raises:
            ValueError: If points is empty
        """
        if len(points) == 0:
            raise ValueError("Spline needs at least one point")

        last_index = len(points) - 1
        ranges: List[Tuple[int, int]] = []
        start = 0
        for index, point in enumerate(points):
            if is_segment_end(point) and index != last_index:
                ranges.append((start, index + 1))
                start = index
        ranges.append((start, len(points)))
        return ranges

    @staticmethod
    def segment_points(points: Sequence[SplinePoint], index_range: Tuple[int, int]) -> List[Point]:
        """Control points (x, y) of the segment covering the given index range."""
        start, end = index_range
        return [(point[0], point[1]) for point in points[start:end]]

    @classmethod
    def build_map(cls, points: Sequence[SplinePoint], step: Optional[float] = DEFAULT_STEP) -> SegmentLengthMap:
        """Estimate the length of every segment of the spline.

        Args:
            points: Spline points (x, y, is_segment_end)
            step: Sampling step in percent used for each segment

        Returns:
            SegmentLengthMap with one entry per segment
        """
        lengths = [
            BezierCurve.curve_length(cls.segment_points(points, index_range), step)
            for index_range in cls.split_spline(points)
        ]
        length_map = SegmentLengthMap(lengths, step)
        logger.debug("Built spline map: %d segments, length %.6f", len(length_map), length_map.length)
        return length_map

    @classmethod
    def point_on_spline(cls, shift: float, points: Sequence[SplinePoint], length_map: SegmentLengthMap) -> Point:
        """Point reached after _shift_ percent of the total spline length.

        Args:
            shift: Position in percent of the travelled distance (0..100)
            points: Spline points, the same the map was built from
            length_map: Map returned by build_map for these points

        Returns:
            Tuple[float, float]: the point on the spline

        Raises:
            ValueError: If the map does not match the points
        """
        ranges = cls.split_spline(points)
        length_map.validate_against(len(ranges))
        index, local_shift = length_map.locate(shift)
        return BezierCurve.point_on_curve(local_shift, cls.segment_points(points, ranges[index]))
