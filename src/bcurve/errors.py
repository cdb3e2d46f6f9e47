"""
Exceptions raised by the knot vector and curve constructors.
"""


class ParamError(Exception):
    pass


class InvalidKnotVector(Exception):
    """
    A knot vector must have at least two knots, be non-decreasing and span
    a non-zero parameter range. The violated condition is not reported.
    """
    def __init__(self):
        super().__init__("Invalid knot vector; need >= 2 non-decreasing knots with min_u < max_u.")


class CurveError(Exception):
    pass


class InvalidDegree(CurveError):
    def __init__(self, degree):
        self.degree = degree
        super().__init__(f"Invalid degree {degree}; must be > 0.")


class InsufficientControlPoints(CurveError):
    def __init__(self, degree, number_supplied):
        self.degree = degree
        self.number_supplied = number_supplied
        super().__init__(f"Insufficient control points (N={number_supplied}) for a curve of degree {degree}; "
                         f"at least {degree + 1} are required.")


class MismatchedWeightsAndControlPoints(CurveError):
    def __init__(self, n_weights, n_control_points):
        self.n_weights = n_weights
        self.n_control_points = n_control_points
        super().__init__(f"Got {n_weights} weights for {n_control_points} control points.")


class InvalidKnotCount(CurveError):
    def __init__(self, required, received):
        self.required = required
        self.received = received
        super().__init__(f"Expected {required} knot values, but received {received}.")


class KnotVectorNotClamped(CurveError):
    def __init__(self, degree):
        self.degree = degree
        super().__init__(f"Knot vector is not clamped for degree {degree}; "
                         f"the end knots must have multiplicity {degree + 1}.")
