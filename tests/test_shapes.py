import math

import pytest
import numpy as np

from bcurve import shapes, InvalidDegree, InsufficientControlPoints


class TestCircle:

    def test_unit_circle_axes(self):
        circle = shapes.unit_circle()
        assert circle.degree == 2
        assert len(circle.control_points()) == 9
        assert np.allclose(circle.de_boor(0.0), [1.0, 0.0])
        assert np.allclose(circle.de_boor(0.25), [0.0, 1.0])
        assert np.allclose(circle.de_boor(0.5), [-1.0, 0.0])
        assert circle.de_boor(0.5)[0] == -1.0
        assert np.allclose(circle.de_boor(0.75), [0.0, -1.0])
        assert np.allclose(circle.de_boor(1.0), [1.0, 0.0])

    def test_unit_circle_radius(self):
        circle = shapes.unit_circle()
        u_points, points = circle.sample(64)
        assert np.allclose(np.linalg.norm(points, axis=1), 1.0)
        # counterclockwise
        angles = np.unwrap(np.arctan2(points[:, 1], points[:, 0]))
        assert np.all(np.diff(angles) > 0)

    def test_circle(self):
        circle = shapes.circle(130.0)
        assert np.allclose(circle.de_boor(0.25), [0.0, 130.0])
        for u in np.linspace(0.0, 1.0, 33):
            assert np.isclose(np.linalg.norm(circle.de_boor(u)), 130.0)


class TestBezier:

    def test_cubic(self):
        poles = [[80.0, 20.0], [280.0, 280.0], [20.0, 280.0], [220.0, 20.0]]
        curve = shapes.bezier(poles)
        assert curve.degree == 3
        assert list(curve.knots()) == [0.0] * 4 + [1.0] * 4
        assert np.allclose(curve.de_boor(0.0), poles[0])
        assert np.allclose(curve.de_boor(0.5), [150.0, 215.0])
        assert np.allclose(curve.de_boor(1.0), poles[-1])

    def test_rational_quarter(self):
        r = math.sqrt(2.0) / 2.0
        curve = shapes.bezier([[1.0, 0.0], [1.0, 1.0], [0.0, 1.0]], weights=[1.0, r, 1.0])
        mid = curve.de_boor(0.5)
        assert np.allclose(mid, [r, r])

    def test_too_short(self):
        with pytest.raises(InvalidDegree):
            shapes.bezier([[0.0, 0.0]])


class TestUniformBSpline:

    def test_knots(self):
        poles = np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 0.0], [3.0, 1.0], [4.0, 0.0]])
        curve = shapes.uniform_bspline(2, poles, knot_range=(0.0, 3.0))
        assert list(curve.knots()) == [0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 3.0, 3.0]
        assert np.allclose(curve.de_boor(0.0), poles[0])
        assert np.allclose(curve.de_boor(3.0), poles[-1])
        # knot 1.0: average of poles 1 and 2
        assert np.allclose(curve.de_boor(1.0), [1.5, 0.5])

    def test_insufficient(self):
        with pytest.raises(InsufficientControlPoints):
            shapes.uniform_bspline(3, [[0.0, 0.0], [1.0, 1.0]])
