"""Handling points on circles, ellipses and polygons"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from arcmap.common import Point, coerce_number


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to point and vector handling."""

    @staticmethod
    def point_on_circle(
        radian: float, radius: float, center_x: Optional[float] = 0.0, center_y: Optional[float] = 0.0
    ) -> Point:
        """
        Compute the point on a circle at the given angle.

        Non-numeric center coordinates are treated as 0.

        Args:
            radian (float): Angle in radians, counted from the positive x-axis
            radius (float): Radius of the circle
            center_x (float): x-coordinate of the center
            center_y (float): y-coordinate of the center

        Returns:
            Tuple[float, float]: the point (x, y)
        """
        cx = coerce_number(center_x)
        cy = coerce_number(center_y)
        return (cx + radius * math.cos(radian), cy + radius * math.sin(radian))

    @staticmethod
    def point_on_ellipse(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        radius_x: float,
        radius_y: float,
        radian: float,
        tilt: Optional[float] = 0.0,
        center_x: Optional[float] = 0.0,
        center_y: Optional[float] = 0.0,
    ) -> Point:
        """
        Compute the point on a tilted ellipse at the given angle.

        The untilted point (radius_x * cos, radius_y * sin) is rotated using -tilt in the
        transposed rotation matrix and then translated by the center. A positive tilt
        turns the ellipse counterclockwise in a y-up system (clockwise on a y-down screen).

        Args:
            radius_x (float): Radius along the (untilted) x-axis
            radius_y (float): Radius along the (untilted) y-axis
            radian (float): Angle in radians
            tilt (float): Rotation of the ellipse axes in radians
            center_x (float): x-coordinate of the center
            center_y (float): y-coordinate of the center

        Returns:
            Tuple[float, float]: the point (x, y)
        """
        rotation = -coerce_number(tilt)
        cx = coerce_number(center_x)
        cy = coerce_number(center_y)

        x1 = radius_x * math.cos(radian)
        y1 = radius_y * math.sin(radian)
        x2 = x1 * math.cos(rotation) + y1 * math.sin(rotation)
        y2 = -x1 * math.sin(rotation) + y1 * math.cos(rotation)
        return (x2 + cx, y2 + cy)

    @staticmethod
    def points_on_polygon(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        sides_count: int,
        radian: float,
        radius: float,
        center_x: Optional[float] = 0.0,
        center_y: Optional[float] = 0.0,
    ) -> List[Point]:
        """
        Compute the vertices of a regular polygon inscribed in a circle.

        The vertex at _radian_ is emitted first and then all _sides_count_ vertices
        are listed starting at _radian_ again, so the result holds sides_count + 1
        points and the first two are equal.

        Args:
            sides_count (int): Number of polygon sides
            radian (float): Angle of the first vertex in radians
            radius (float): Radius of the circumscribed circle
            center_x (float): x-coordinate of the center
            center_y (float): y-coordinate of the center

        Returns:
            List[Tuple[float, float]]: the vertices
        """
        coords = [GeomMath.point_on_circle(radian, radius, center_x, center_y)]
        for i in range(sides_count):
            angle = math.pi * 2 / sides_count * i + radian
            coords.append(GeomMath.point_on_circle(angle, radius, center_x, center_y))
        return coords

    @staticmethod
    def distance(vector: Sequence[float]) -> float:
        """Euclidean length of the given vector (x, y)."""
        return math.hypot(vector[0], vector[1])

    @staticmethod
    def distance_between(point_a: Sequence[float], point_b: Sequence[float]) -> float:
        """Euclidean distance between two points."""
        return math.hypot(point_b[0] - point_a[0], point_b[1] - point_a[1])

    @staticmethod
    def angle_of_vector(point: Optional[Sequence[float]], center: Optional[Sequence[float]] = None) -> float:
        """
        Angle of the vector from _center_ to _point_.

        The angle is derived from asin(dy / r) and mirrored to pi - asin(dy / r) if
        acos(dx / r) exceeds pi / 2. Only the upper half-plane maps onto [0, pi];
        points below the x-axis yield angles in (-pi / 2, 0) for dx >= 0 and
        (pi, 3 * pi / 2) for dx < 0. A point on top of the center yields 0.

        Args:
            point (Tuple[float, float]): the point, (0, 0) if None
            center (Tuple[float, float]): the center, (0, 0) if None

        Returns:
            float: the angle in radians
        """
        center = center or (0.0, 0.0)
        point = point or (0.0, 0.0)
        dx = point[0] - center[0]
        dy = point[1] - center[1]
        radius = GeomMath.distance((dx, dy))
        if radius == 0:
            return 0.0

        angle = math.asin(max(-1.0, min(1.0, dy / radius)))
        acos = math.acos(max(-1.0, min(1.0, dx / radius)))
        if acos > math.pi / 2:
            return math.pi - angle
        return angle


def main():
    """Main"""
    print(GeomMath.point_on_circle(math.pi / 2, 10.0))
    print(GeomMath.angle_of_vector((-1.0, 1.0)))


if __name__ == "__main__":
    main()
