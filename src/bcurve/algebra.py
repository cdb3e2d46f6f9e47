"""
Numeric capabilities the knot vector and the curve are written against.

Scalar: knot values, weights, parameters. Any type with ordering and the field
operations, e.g. float, np.float32, fractions.Fraction.
Vector: control points and curve points. Any type with addition and
multiplication by its scalar, e.g. np.ndarray of any length, or a plain
float for a 1D curve.
"""
import copy
from typing import *

import numpy as np

from .errors import ParamError


scalar_types = (int, float, np.integer, np.floating)


@runtime_checkable
class Scalar(Protocol):
    def __add__(self, other): ...
    def __sub__(self, other): ...
    def __mul__(self, other): ...
    def __truediv__(self, other): ...
    def __lt__(self, other): ...
    def __le__(self, other): ...


@runtime_checkable
class Vector(Protocol):
    def __add__(self, other): ...
    def __mul__(self, other): ...


S = TypeVar('S', bound=Scalar)
V = TypeVar('V', bound=Vector)


def as_vector(value):
    """
    Make an owned Vector value from a single control point.
    :param value: np.ndarray (copied), list or tuple of numbers (converted to float np.array),
        a scalar (1D curve, kept), or any other object supporting + and * (shallow copied).
    :return: Vector
    """
    if isinstance(value, np.ndarray):
        return value.copy()
    if isinstance(value, scalar_types):
        return value
    if isinstance(value, (list, tuple)):
        try:
            return np.array(value, dtype=float)
        except (TypeError, ValueError) as e:
            raise ParamError(f"Control point {value} is not a numeric vector: {e}")
    if isinstance(value, (str, bytes)) or not isinstance(value, Vector):
        raise ParamError(f"Control point of type {type(value)} does not support + and scalar *.")
    return copy.copy(value)


def lerp(a, b, t):
    """
    Convex combination a*(1-t) + b*t.
    """
    return a * (1 - t) + b * t
