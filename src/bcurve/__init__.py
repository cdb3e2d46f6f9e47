"""
Evaluation of NURBS curves by the de Boor algorithm.
"""
from .errors import (ParamError, InvalidKnotVector, CurveError, InvalidDegree, InsufficientControlPoints,
                     MismatchedWeightsAndControlPoints, InvalidKnotCount, KnotVectorNotClamped)
from .algebra import Scalar, Vector, scalar_types, as_vector, lerp
from .knotvec import KnotVec
from .curve import Curve
from . import shapes

__version__ = '0.1.0'
