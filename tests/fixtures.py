"""
Common code for tests.
"""
import os
from pathlib import Path

import numpy as np

from bcurve import KnotVec


def sandbox_fname(base_name, ext):
    work_dir = "sandbox"
    Path(work_dir).mkdir(parents=True, exist_ok=True)
    return os.path.join(work_dir, f"{base_name}.{ext}")


def random_knotvec(rng, n_knots, knot_range=(-100.0, 100.0)):
    """
    Random sorted knots rounded to one decimal place, so that multiple knots are frequent.
    A degenerate vector gets one more knot at the end.
    """
    knots = np.sort(np.round(rng.uniform(*knot_range, size=n_knots), 1))
    if knots[0] == knots[-1]:
        knots = np.append(knots, knots[-1] + 1.0)
    return KnotVec(knots)


def random_clamped_knots(rng, degree, n_points):
    """
    Clamped knot vector on [0, 1] with random inner knots, multiplicity of inner knots <= degree.
    """
    n_inner = n_points - degree - 1
    inner = []
    while len(inner) < n_inner:
        q = round(rng.uniform(0.05, 0.95), 2)
        if inner.count(q) < degree:
            inner.append(q)
    return [0.0] * (degree + 1) + sorted(inner) + [1.0] * (degree + 1)
