#!/usr/bin/env python3
"""
Walk a path made of a cubic curve, a half circle and a line with uniform speed.
"""

import math

from arcmap.path import PathMapper
from arcmap.spline import SplineMapper


def demo_spline():
    """Sample a two segment spline at equal distances."""

    print("=== Spline ===\n")

    points = [
        (0.0, 0.0, False),
        (0.0, 50.0, False),
        (100.0, 50.0, False),
        (100.0, 0.0, True),
        (200.0, 0.0, False),
    ]
    length_map = SplineMapper.build_map(points)
    print(f"segments: {len(length_map)}, length: {length_map.length:.3f}")

    for shift in range(0, 101, 10):
        x, y = SplineMapper.point_on_spline(shift, points, length_map)
        print(f"  {shift:3d}%: ({x:8.3f}, {y:8.3f})")


def demo_path():
    """Sample a curve followed by a half circle and a line."""

    print("\n=== Path ===\n")

    points = [
        (0.0, 0.0, False),
        (50.0, 50.0, False),
        (100.0, 0.0, False),
        (50.0, 50.0, math.pi, 0.0, 0.0),
        (300.0, 0.0, False),
    ]
    length_map = PathMapper.build_map(points)
    print(f"segments: {len(length_map)}, lengths: {[round(length, 3) for length in length_map.lengths]}")

    for shift in range(0, 101, 10):
        x, y = PathMapper.point_on_path(shift, points, length_map)
        print(f"  {shift:3d}%: ({x:8.3f}, {y:8.3f})")


def main():
    """Main"""
    demo_spline()
    demo_path()


if __name__ == "__main__":
    main()
