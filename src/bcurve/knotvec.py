"""
Knot vector of a B-spline or NURBS curve.
"""
from typing import *

from .algebra import S
from .errors import InvalidKnotVector


class KnotVec(Generic[S]):
    """
    Non-decreasing sequence of knots with a non-zero parameter range.
    Knot values partition the parameter range of a curve into spans over which
    a single polynomial piece is active. The knots are checked once in the constructor
    and never change afterwards.
    """

    @classmethod
    def make_equidistant(cls, degree, n_intervals, knot_range=(0.0, 1.0)):
        """
        Returns clamped knot vector with 'n_intervals' equally sized spans.
        :param degree: degree of the spline basis
        :param n_intervals: number of non-empty spans, >= 1
        :param knot_range: (min_u, max_u)
        :return: KnotVec
        """
        n = n_intervals + 2 * degree + 1
        knots = [knot_range[0]] * n
        diff = (knot_range[1] - knot_range[0]) / n_intervals
        for i in range(degree + 1, n - degree - 1):
            knots[i] = (i - degree) * diff + knot_range[0]
        knots[n - degree - 1:] = [knot_range[1]] * (degree + 1)
        return cls(knots)

    @classmethod
    def make_from_packed_knots(cls, packed):
        """
        :param packed: List of tuples (knot, multiplicity).
        """
        return cls([q for q, mult in packed for i in range(mult)])

    def __init__(self, knots: Iterable[S]):
        """
        :param knots: Knot values including multiplicities, in non-decreasing order.
        :raise InvalidKnotVector: less than two knots, decreasing order or min_u == max_u
        """
        knots = tuple(knots)
        if not (len(knots) >= 2
                and all(a <= b for a, b in zip(knots[:-1], knots[1:]))
                and knots[0] != knots[-1]):
            raise InvalidKnotVector()
        self._knots = knots

    def __len__(self):
        return len(self._knots)

    def length(self) -> int:
        return len(self._knots)

    def is_empty(self):
        # Valid instance has at least two knots.
        return False

    def __getitem__(self, i):
        return self._knots[i]

    def __iter__(self):
        return iter(self._knots)

    def __eq__(self, other):
        if not isinstance(other, KnotVec):
            return NotImplemented
        return self._knots == other._knots

    def __hash__(self):
        return hash(self._knots)

    def __repr__(self):
        return f"KnotVec({list(self._knots)})"

    def min_u(self) -> S:
        return self._knots[0]

    def max_u(self) -> S:
        return self._knots[-1]

    @property
    def domain(self):
        return self.min_u(), self.max_u()

    def pack_knots(self):
        """
        Inverse of make_from_packed_knots.
        :return: List of tuples (knot, multiplicity).
        """
        last, mult = self._knots[0], 0
        packed_knots = []
        for q in self._knots:
            if q == last:
                mult += 1
            else:
                packed_knots.append((last, mult))
                last, mult = q, 1
        packed_knots.append((last, mult))
        return packed_knots

    def multiplicity(self, u: S) -> int:
        return sum(1 for q in self._knots if q == u)

    def is_clamped(self, degree: int) -> bool:
        """
        Clamped knot vector repeats both the first and the last knot 'degree + 1' times.
        :param degree: degree of the curve
        """
        n = len(self._knots)
        if n < 2 * (degree + 1):
            return False
        start, end = self._knots[0], self._knots[-1]
        # knots[0] and knots[-1] are part of the runs trivially
        return (all(q == start for q in self._knots[1:degree + 1])
                and all(q == end for q in self._knots[n - degree - 1:n - 1]))

    def clamp(self, u: S) -> S:
        """
        Clamp parameter value 'u' to the range [min_u, max_u].
        """
        if u < self.min_u():
            return self.min_u()
        elif u > self.max_u():
            return self.max_u()
        return u

    def find_span(self, u: S) -> int:
        """
        Find index 'i' of the knot span containing the parameter value 'u', i.e.:

            knots[i] <= u < knots[i+1],   for u < max_u
            knots[i] < u == knots[i+1],   for u == max_u

        The returned span is never empty. Spans between repeated knots are skipped.

        :param u: parameter, min_u <= u <= max_u; checked only by assertions.
        :return: i
        """
        assert u >= self.min_u(), \
            f"parameter u={u} is below the required range {self.min_u()} <= u <= {self.max_u()}"
        assert u <= self.max_u(), \
            f"parameter u={u} is above the required range {self.min_u()} <= u <= {self.max_u()}"

        knots = self._knots
        if u == self.max_u():
            # The last knot is repeated, look backward for the last non-empty span.
            return next(i for i in range(len(knots) - 1, -1, -1) if knots[i] < u)

        # binary search
        low = 0
        high = len(knots) - 1
        mid = (low + high) // 2
        while u < knots[mid] or u >= knots[mid + 1]:
            if u < knots[mid]:
                high = mid
            else:
                low = mid
            mid = (low + high) // 2
        return mid
