"""
Constructors of common curves.
"""
import math

import numpy as np

from .curve import Curve
from .knotvec import KnotVec


def unit_circle():
    """
    Unit circle centered at the origin as a degree 2 rational curve with nine control points
    (four quarter arcs). Parameter 0, 0.25, 0.5, 0.75, 1 maps to the points on the axes,
    starting at (1, 0) and going counterclockwise.
    """
    r = math.sqrt(2.0) / 2.0
    control_points = np.array([
        [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [-1.0, 1.0], [-1.0, 0.0],
        [-1.0, -1.0], [0.0, -1.0], [1.0, -1.0], [1.0, 0.0]])
    weights = [1.0, r, 1.0, r, 1.0, r, 1.0, r, 1.0]
    knots = KnotVec([0.0, 0.0, 0.0, 0.25, 0.25, 0.5, 0.5, 0.75, 0.75, 1.0, 1.0, 1.0])
    return Curve(2, control_points, weights, knots)


def circle(radius):
    curve = unit_circle()
    curve.uniform_scale(radius)
    return curve


def bezier(control_points, weights=None):
    """
    Single span Bezier curve of degree len(control_points) - 1 on the parameter range [0, 1].
    :param control_points: at least two points
    :param weights: optional weights for rational Bezier curve
    """
    n = len(control_points)
    if weights is None:
        weights = [1.0] * n
    knots = [0.0] * n + [1.0] * n
    return Curve(n - 1, control_points, weights, knots)


def uniform_bspline(degree, control_points, weights=None, knot_range=(0.0, 1.0)):
    """
    Clamped B-spline curve with equidistant inner knots.
    :param degree: positive int
    :param control_points: at least degree + 1 points
    :param weights: optional weights for rational curve
    :param knot_range: (min_u, max_u)
    """
    n = len(control_points)
    if weights is None:
        weights = [1.0] * n
    knots = KnotVec.make_equidistant(degree, max(n - degree, 1), knot_range)
    return Curve(degree, control_points, weights, knots)
