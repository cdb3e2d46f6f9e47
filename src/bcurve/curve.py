"""
NURBS curve evaluated by the de Boor algorithm in homogeneous coordinates.
Dimension of the curve is given by the type of its control points, e.g.
np.array of length 2 or 3.
"""
from typing import *

import numpy as np

from .algebra import S, V, as_vector, lerp
from .knotvec import KnotVec
from .core.config import default_config
from .core.report import report
from .errors import (InvalidDegree, InsufficientControlPoints, MismatchedWeightsAndControlPoints,
                     InvalidKnotCount, KnotVectorNotClamped)


class Curve(Generic[S, V]):
    """
    Rational B-spline curve given by its degree, control points, weights
    and a clamped knot vector. The curve interpolates its first and last control point.
    """

    @classmethod
    def make_raw(cls, degree, poles, knots, rational=False):
        """
        Construct a curve from raw data.
        :param degree: Positive int.
        :param poles: List of poles (X, Y, Z) or weighted points (X, Y, Z, w) for rational curve.
        :param knots: List of knot values including multiplicities or
            list of tuples (knot, multiplicity).
        :param rational: True if the last coordinate of the poles is the weight.
        """
        if len(knots) > 0 and isinstance(knots[0], tuple):
            knots = KnotVec.make_from_packed_knots(knots)
        poles = np.array(poles, dtype=float)
        if rational:
            control_points, weights = poles[:, :-1], poles[:, -1]
        else:
            control_points, weights = poles, np.ones(len(poles))
        return cls(degree, control_points, list(weights), knots)

    def __init__(self, degree: int, control_points: Sequence[V], weights: Sequence[S],
                 knots: Union[KnotVec[S], Sequence[S]]):
        """
        :param degree: Positive int.
        :param control_points: L >= degree + 1 points, np.arrays, lists or scalars.
        :param weights: L weights, one per control point.
        :param knots: KnotVec or sequence of (degree + L + 1) knots, clamped at both ends.
        :raise CurveError: the first violated condition in the order of parameters.
        """
        n_points = len(control_points)
        if degree <= 0:
            raise InvalidDegree(degree)
        if n_points <= degree:
            raise InsufficientControlPoints(degree, n_points)
        if len(weights) != n_points:
            raise MismatchedWeightsAndControlPoints(len(weights), n_points)
        required_knot_len = degree + n_points + 1
        if len(knots) != required_knot_len:
            raise InvalidKnotCount(required_knot_len, len(knots))
        if not isinstance(knots, KnotVec):
            knots = KnotVec(knots)
        if not knots.is_clamped(degree):
            raise KnotVectorNotClamped(degree)

        self._degree = degree
        self._control_points = [as_vector(cp) for cp in control_points]
        self._weights = tuple(weights)
        self._knots = knots

    @property
    def degree(self) -> int:
        return self._degree

    def control_points(self) -> Tuple[V, ...]:
        return tuple(self._control_points)

    def weights(self) -> Tuple[S, ...]:
        return self._weights

    def knots(self) -> KnotVec[S]:
        return self._knots

    def min_u(self) -> S:
        return self._knots.min_u()

    def max_u(self) -> S:
        return self._knots.max_u()

    def __repr__(self):
        return (f"Curve(degree={self._degree}, control_points={self._control_points}, "
                f"weights={list(self._weights)}, knots={self._knots!r})")

    def uniform_scale(self, factor: S):
        """
        Scale all control points by 'factor' in place. Weights and knots are not changed.
        """
        for i, cp in enumerate(self._control_points):
            self._control_points[i] = cp * factor

    def de_boor(self, u: S) -> V:
        """
        Evaluate the curve at parameter 'u'.
        Parameters out of [min_u, max_u] are clamped to the nearest end of the range.
        :param u: parameter value
        :return: point of the curve, same type as the control points
        """
        p = self._degree
        knots = self._knots
        uu = knots.clamp(u)
        k = knots.find_span(uu)

        # homogeneous points and their weights
        d = []
        dw = []
        for j in range(p + 1):
            i = j + k - p
            w = self._weights[i]
            d.append(self._control_points[i] * w)
            dw.append(w)

        # The span k is not empty, so every denominator is at least knots[k+1] - knots[k] > 0.
        for r in range(1, p + 1):
            # descending, d[j-1] is still needed from the previous level
            for j in range(p, r - 1, -1):
                kp = knots[j + k - p]
                alpha = (uu - kp) / (knots[j + 1 + k - r] - kp)
                d[j] = lerp(d[j - 1], d[j], alpha)
                dw[j] = lerp(dw[j - 1], dw[j], alpha)

        return d[p] * (1 / dw[p])

    @report
    def eval_array(self, u_points):
        """
        Evaluate the curve for a sequence of parameters.
        :param u_points: 1D array-like of parameter values
        :return: np.array, one row per parameter
        """
        return np.array([self.de_boor(u) for u in u_points])

    @report
    def sample(self, n_divisions=None, cfg=None):
        """
        Evaluate the curve in n_divisions + 1 equidistant parameters including both ends.
        :param n_divisions: number of subintervals, default cfg.sampling.n_divisions
        :param cfg: configuration dotdict, see core.config.default_config
        :return: (u_points, curve_points)
        """
        if n_divisions is None:
            if cfg is None:
                cfg = default_config()
            n_divisions = cfg.sampling.n_divisions
        min_u, max_u = self._knots.domain
        u_range = max_u - min_u
        u_points = [min_u + i * u_range / n_divisions for i in range(n_divisions)]
        # exact end of the range
        u_points.append(max_u)
        return np.array(u_points), np.array([self.de_boor(u) for u in u_points])
