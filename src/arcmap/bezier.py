"""Bezier curve evaluation and length estimation for arbitrary-degree curves."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray
from scipy.special import comb

from arcmap.common import Point
from arcmap.consts import DEFAULT_STEP, PERCENT_FULL


class BezierCurve:
    """Class to evaluate Bezier curves of any degree given by their control points.

    Positions on a curve are addressed by a _shift_ in percent (0..100) which maps
    linearly onto the curve parameter t = shift / 100.
    """

    @staticmethod
    def sample_percents(step: Optional[float] = DEFAULT_STEP) -> List[float]:
        """
        Sampling positions used for length estimation: 0, step, 2*step, ... while <= 100.

        The positions are accumulated by repeated addition, so for steps that do not
        divide 100 evenly (or carry rounding errors) the sequence stops at the last
        value not exceeding 100 as produced by that accumulation.

        Args:
            step: Sampling step in percent. 0 or None falls back to DEFAULT_STEP.

        Returns:
            List of shifts in percent

        Raises:
            ValueError: If step is negative
        """
        step = step or DEFAULT_STEP
        if step < 0:
            raise ValueError(f"Sampling step must not be negative, got {step}")

        percents = []
        shift = 0.0
        while shift <= PERCENT_FULL:
            percents.append(shift)
            shift += step
        return percents

    @staticmethod
    def bernstein_weights(t: NDArray[np.float64], degree: int) -> NDArray[np.float64]:
        """
        Bernstein basis polynomials of the given degree evaluated at all parameters t.

        weight[k, i] = C(degree, i) * t[k]^i * (1 - t[k])^(degree - i)

        Args:
            t: Curve parameters, shape (k,)
            degree: Degree of the curve (number of control points - 1)

        Returns:
            NDArray of shape (k, degree + 1)
        """
        indices = np.arange(degree + 1, dtype=np.float64)
        binomials = comb(degree, indices)
        t_col = t[:, np.newaxis]
        return binomials * np.power(t_col, indices) * np.power(1.0 - t_col, degree - indices)

    @classmethod
    def points_on_curve(
        cls,
        shifts: Union[Sequence[float], NDArray[np.float64]],
        points: Union[Sequence[Sequence[float]], NDArray[np.float64]],
    ) -> NDArray[np.float64]:
        """
        Evaluate the Bezier curve defined by _points_ at several shifts at once.

        Args:
            shifts: Positions in percent (0..100)
            points: Control points, at least one; the degree is len(points) - 1

        Returns:
            NDArray[np.float64] of shape (len(shifts), 2)
        """
        control = np.asarray(points, dtype=np.float64)[:, :2]
        t = np.asarray(shifts, dtype=np.float64) / PERCENT_FULL
        weights = cls.bernstein_weights(t, len(control) - 1)
        return weights @ control

    @classmethod
    def point_on_curve(cls, shift: float, points: Union[Sequence[Sequence[float]], NDArray[np.float64]]) -> Point:
        """
        Evaluate the Bezier curve defined by _points_ at the given shift.

        Works for any degree: 2 points give a line, 3 a quadratic, 4 a cubic curve, ...

        Args:
            shift: Position in percent (0..100)
            points: Control points

        Returns:
            Tuple[float, float]: the point on the curve
        """
        x, y = cls.points_on_curve([shift], points)[0]
        return (float(x), float(y))

    @staticmethod
    def point_on_line(shift: float, points: Sequence[Sequence[float]]) -> Point:
        """Linear interpolation between points[0] and points[1] at shift percent."""
        (x0, y0), (x1, y1) = points[0][:2], points[1][:2]
        return ((x1 - x0) * (shift / PERCENT_FULL) + x0, (y1 - y0) * (shift / PERCENT_FULL) + y0)

    @classmethod
    def polygonize_curve(
        cls, points: Union[Sequence[Sequence[float]], NDArray[np.float64]], step: Optional[float] = DEFAULT_STEP
    ) -> NDArray[np.float64]:
        """
        Sample the curve at the positions given by sample_percents(step).

        Returns:
            NDArray[np.float64] of shape (n_samples, 2)
        """
        return cls.points_on_curve(cls.sample_percents(step), points)

    @classmethod
    def curve_length(
        cls, points: Union[Sequence[Sequence[float]], NDArray[np.float64]], step: Optional[float] = DEFAULT_STEP
    ) -> float:
        """
        Estimate the length of the curve by summing up the sampled polyline.

        The polyline starts at the first control point and visits the samples of
        polygonize_curve(points, step). Larger steps give coarser estimates.

        Args:
            points: Control points
            step: Sampling step in percent

        Returns:
            float: the estimated length
        """
        samples = cls.polygonize_curve(points, step)
        start = np.asarray(points[0], dtype=np.float64)[:2]
        return polyline_length(np.vstack([start, samples]))


def polyline_length(points: NDArray[np.float64]) -> float:
    """Sum of the distances between consecutive points of a polyline."""
    if len(points) < 2:
        return 0.0
    deltas = np.diff(points, axis=0)
    return float(np.sum(np.hypot(deltas[:, 0], deltas[:, 1])))


def main():
    """Main"""
    points: List[Tuple[float, float]] = [(0.0, 0.0), (50.0, 200.0), (150.0, -100.0), (200.0, 0.0)]
    print("point at 50%:", BezierCurve.point_on_curve(50, points))
    print("length:      ", BezierCurve.curve_length(points))


if __name__ == "__main__":
    main()
