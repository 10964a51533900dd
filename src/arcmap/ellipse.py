"""Elliptic arc evaluation and length estimation."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from arcmap.bezier import BezierCurve, polyline_length
from arcmap.common import Point
from arcmap.consts import DEFAULT_STEP, PERCENT_FULL
from arcmap.geom import GeomMath


class EllipticArc:
    """Class to evaluate arcs on (tilted) ellipses.

    An arc is given by its radii, a start and an end angle (radians) and a tilt.
    Positions on the arc are addressed by a _shift_ in percent which is mapped
    linearly onto the angle range start..end.
    """

    @staticmethod
    def points_on_ellipse(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        radius_x: float,
        radius_y: float,
        radians: Union[Sequence[float], NDArray[np.float64]],
        tilt: float = 0.0,
        center_x: float = 0.0,
        center_y: float = 0.0,
    ) -> NDArray[np.float64]:
        """Vectorized GeomMath.point_on_ellipse, returns shape (len(radians), 2)."""
        angles = np.asarray(radians, dtype=np.float64)
        rotation = -tilt
        x1 = radius_x * np.cos(angles)
        y1 = radius_y * np.sin(angles)
        x2 = x1 * math.cos(rotation) + y1 * math.sin(rotation)
        y2 = -x1 * math.sin(rotation) + y1 * math.cos(rotation)
        return np.column_stack([x2 + center_x, y2 + center_y])

    @staticmethod
    def radian_at(start_radian: float, end_radian: float, shift: float) -> float:
        """Angle reached after _shift_ percent of the way from start to end."""
        return start_radian + (end_radian - start_radian) / PERCENT_FULL * shift

    @classmethod
    def arc_length(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        radius_x: float,
        radius_y: float,
        start_radian: float,
        end_radian: float,
        step: Optional[float] = DEFAULT_STEP,
    ) -> float:
        """
        Estimate the length of an elliptic arc by summing up the sampled polyline.

        The angle range is sampled at the positions of BezierCurve.sample_percents(step).
        Tilt and center do not change the length and are therefore not needed.

        Args:
            radius_x: Radius along the x-axis
            radius_y: Radius along the y-axis
            start_radian: Start angle
            end_radian: End angle
            step: Sampling step in percent

        Returns:
            float: the estimated length, 0 if start and end angle are equal
        """
        radian_percent = (end_radian - start_radian) / PERCENT_FULL
        radians = [start_radian + radian_percent * shift for shift in BezierCurve.sample_percents(step)]
        samples = cls.points_on_ellipse(radius_x, radius_y, [start_radian] + radians)
        return polyline_length(samples)

    @staticmethod
    def arc_center(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        radius_x: float,
        radius_y: float,
        start_radian: float,
        tilt: float,
        start_point: Optional[Sequence[float]],
    ) -> Point:
        """
        Reconstruct the center of an ellipse from the rim point at start_radian.

        The point opposite to start_radian, measured from the rim point, is the center.
        A missing start point is taken as the origin.
        """
        anchor_x, anchor_y = (start_point[0], start_point[1]) if start_point else (0.0, 0.0)
        return GeomMath.point_on_ellipse(radius_x, radius_y, start_radian + math.pi, tilt, anchor_x, anchor_y)

    @staticmethod
    def arc_end(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        radius_x: float,
        radius_y: float,
        end_radian: float,
        tilt: float,
        center: Sequence[float],
    ) -> Point:
        """Rim point at end_radian, the anchor for whatever follows the arc."""
        return GeomMath.point_on_ellipse(radius_x, radius_y, end_radian, tilt, center[0], center[1])

    @classmethod
    def point_on_arc(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        radius_x: float,
        radius_y: float,
        start_radian: float,
        end_radian: float,
        tilt: float,
        center: Sequence[float],
        shift: float,
    ) -> Point:
        """Point reached after _shift_ percent of the arc around the given center."""
        radian = cls.radian_at(start_radian, end_radian, shift)
        return GeomMath.point_on_ellipse(radius_x, radius_y, radian, tilt, center[0], center[1])


def main():
    """Main"""
    print("quarter circle length:", EllipticArc.arc_length(10.0, 10.0, 0.0, math.pi / 2))
    center = EllipticArc.arc_center(10.0, 10.0, 0.0, 0.0, (10.0, 0.0))
    print("center:", center)
    print("half way:", EllipticArc.point_on_arc(10.0, 10.0, 0.0, math.pi / 2, 0.0, center, 50))


if __name__ == "__main__":
    main()
