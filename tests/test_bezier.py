"""Test module for BezierCurve in arcmap.bezier

The tests are run using pytest.
These tests ensure that curve evaluation and length estimation
remain working correctly after changes and refactoring.
"""

import math

import numpy as np
import pytest

from arcmap.bezier import BezierCurve, polyline_length

###############################################################################
# Sampling Tests
###############################################################################


class TestSamplePercents:
    """Test class for BezierCurve.sample_percents."""

    def test_sample_percents_default(self):
        """Test that the default step gives 101 samples from 0 to 100."""
        percents = BezierCurve.sample_percents()

        assert len(percents) == 101
        assert percents[0] == 0.0
        assert percents[-1] == 100.0

    def test_sample_percents_step_not_dividing_100(self):
        """Test that sampling stops at the last value not exceeding 100."""
        assert BezierCurve.sample_percents(30) == [0.0, 30.0, 60.0, 90.0]
        assert BezierCurve.sample_percents(7)[-1] == 98.0

    def test_sample_percents_zero_and_none_fall_back(self):
        """Test that a step of 0 or None uses the default step."""
        assert BezierCurve.sample_percents(0) == BezierCurve.sample_percents(1)
        assert BezierCurve.sample_percents(None) == BezierCurve.sample_percents(1)

    def test_sample_percents_step_larger_than_range(self):
        """Test that a step beyond 100 only samples the start."""
        assert BezierCurve.sample_percents(150) == [0.0]

    def test_sample_percents_negative_step(self):
        """Test that a negative step is rejected."""
        with pytest.raises(ValueError, match="must not be negative"):
            BezierCurve.sample_percents(-1)


###############################################################################
# Evaluation Tests
###############################################################################


class TestPointOnCurve:
    """Test class for curve evaluation."""

    @pytest.mark.parametrize(
        "points",
        [
            [(0.0, 0.0), (10.0, 5.0)],
            [(0.0, 0.0), (10.0, 20.0), (20.0, 0.0)],
            [(1.0, 2.0), (5.0, 20.0), (15.0, -20.0), (20.0, 3.0)],
            [(0.0, 0.0), (1.0, 4.0), (2.0, -4.0), (3.0, 4.0), (4.0, -4.0), (5.0, 0.0)],
        ],
    )
    def test_point_on_curve_end_points(self, points):
        """Test that shift 0 and 100 give the first and the last control point."""
        assert BezierCurve.point_on_curve(0, points) == pytest.approx(points[0])
        assert BezierCurve.point_on_curve(100, points) == pytest.approx(points[-1])

    def test_point_on_curve_quadratic_midpoint(self):
        """Test the midpoint of a quadratic curve."""
        points = [(0.0, 0.0), (50.0, 100.0), (100.0, 0.0)]

        assert BezierCurve.point_on_curve(50, points) == pytest.approx((50.0, 50.0))

    def test_point_on_curve_cubic_matches_formula(self):
        """Test a cubic curve against the explicit cubic Bernstein formula."""
        points = [(0.0, 0.0), (50.0, 200.0), (150.0, -100.0), (200.0, 0.0)]
        t = 0.3
        omt = 1.0 - t
        expected = tuple(
            omt**3 * points[0][k] + 3 * omt**2 * t * points[1][k] + 3 * omt * t**2 * points[2][k] + t**3 * points[3][k]
            for k in range(2)
        )

        assert BezierCurve.point_on_curve(30, points) == pytest.approx(expected)

    def test_point_on_curve_returns_float_tuple(self):
        """Test that the result is a tuple of Python floats."""
        result = BezierCurve.point_on_curve(25, [(0, 0), (4, 8)])

        assert isinstance(result, tuple)
        assert isinstance(result[0], float)
        assert isinstance(result[1], float)

    def test_point_on_curve_ignores_flag_column(self):
        """Test that a third column (segment end flag) is ignored."""
        result = BezierCurve.point_on_curve(50, [(0.0, 0.0, False), (10.0, 10.0, True)])

        assert result == pytest.approx((5.0, 5.0))

    def test_point_on_line(self):
        """Test linear interpolation."""
        assert BezierCurve.point_on_line(50, [(2.0, 4.0), (6.0, 10.0)]) == (4.0, 7.0)
        assert BezierCurve.point_on_line(25, [(0.0, 0.0), (4.0, 8.0)]) == (1.0, 2.0)

    def test_point_on_line_matches_linear_curve(self):
        """Test that point_on_line equals point_on_curve for two points."""
        points = [(-3.0, 7.0), (11.0, -2.0)]
        for shift in [0, 13, 50, 87.5, 100]:
            assert BezierCurve.point_on_line(shift, points) == pytest.approx(BezierCurve.point_on_curve(shift, points))

    def test_points_on_curve_shape(self):
        """Test the vectorized evaluation."""
        points = [(0.0, 0.0), (10.0, 20.0), (20.0, 0.0)]
        result = BezierCurve.points_on_curve([0, 25, 50, 100], points)

        assert result.shape == (4, 2)
        assert result.dtype == np.float64
        np.testing.assert_allclose(result[2], [10.0, 10.0])

    def test_bernstein_weights_partition_of_unity(self):
        """Test that the Bernstein weights sum up to 1 for every parameter."""
        t = np.linspace(0.0, 1.0, 11)
        for degree in range(1, 7):
            weights = BezierCurve.bernstein_weights(t, degree)
            assert weights.shape == (11, degree + 1)
            np.testing.assert_allclose(weights.sum(axis=1), 1.0)


###############################################################################
# Length Tests
###############################################################################


class TestCurveLength:
    """Test class for curve length estimation."""

    def test_curve_length_straight_line(self):
        """Test the length of a straight line."""
        assert BezierCurve.curve_length([(0.0, 0.0), (3.0, 4.0)]) == pytest.approx(5.0)

    def test_curve_length_collinear_quadratic(self):
        """Test a quadratic curve lying on a line."""
        assert BezierCurve.curve_length([(0.0, 0.0), (5.0, 0.0), (10.0, 0.0)]) == pytest.approx(10.0)

    def test_curve_length_step_not_dividing_100(self):
        """Test that the sampling does not extend to 100 if the step does not divide it."""
        line = [(0.0, 0.0), (100.0, 0.0)]

        assert BezierCurve.curve_length(line, 30) == pytest.approx(90.0)
        assert BezierCurve.curve_length(line, 40) == pytest.approx(80.0)

    def test_curve_length_coarse_step_is_shorter(self):
        """Test that a coarser sampling never gives a longer polyline."""
        points = [(0.0, 0.0), (0.0, 55.0), (45.0, 100.0), (100.0, 100.0)]

        fine = BezierCurve.curve_length(points, 1)
        coarse = BezierCurve.curve_length(points, 10)

        assert coarse <= fine
        assert fine > math.hypot(100.0, 100.0)

    def test_curve_length_quarter_circle_approximation(self):
        """Test the cubic approximation of a quarter circle."""
        kappa = 0.5522847498
        points = [(1.0, 0.0), (1.0, kappa), (kappa, 1.0), (0.0, 1.0)]

        assert BezierCurve.curve_length(points) == pytest.approx(math.pi / 2, rel=1e-3)

    def test_curve_length_single_sample(self):
        """Test that a step beyond 100 gives length 0."""
        assert BezierCurve.curve_length([(0.0, 0.0), (100.0, 0.0)], 150) == 0.0

    def test_polyline_length(self):
        """Test the polyline helper."""
        assert polyline_length(np.array([[0.0, 0.0], [3.0, 4.0], [3.0, 0.0]])) == 9.0
        assert polyline_length(np.array([[1.0, 1.0]])) == 0.0
