# MIT License (see LICENSE)
"""
Multiprecision scalars and 2D vector helpers.

All simulation arithmetic runs in a private mpmath context fixed at
PRECISION_DIGITS decimal digits, so importing this package never changes the
global mpmath.mp precision of the caller. Vectors are numpy arrays of shape (2,)
with dtype=object whose elements are mpf values of that context; numpy supplies
the elementwise arithmetic, mpmath supplies the precision.
"""
from __future__ import annotations

import numpy as np
from mpmath.ctx_mp import MPContext

from .constants import PRECISION_DIGITS

mp = MPContext()
mp.dps = PRECISION_DIGITS

ZERO = mp.zero


def real(x) -> "mp.mpf":
    """
    Convert a number or decimal string to a working-precision real.

    Strings are parsed directly at full precision, so real("0.01") is the
    decimal 0.01 rounded once, unlike real(0.01) which first goes through the
    nearest binary double.
    """
    return mp.mpf(x)


def vec(x) -> np.ndarray:
    """
    Convert any 2-element array-like to a working-precision vector.

    Used for positions, velocities and accelerations so that tuple/list inputs
    are accepted everywhere a vector is expected.
    """
    if len(x) != 2:
        raise ValueError(f"Expected a 2D vector, got {len(x)} components")
    return np.array([real(x[0]), real(x[1])], dtype=object)


def zeros() -> np.ndarray:
    """Zero vector at working precision."""
    return np.array([ZERO, ZERO], dtype=object)


def norm2(v: np.ndarray):
    """Squared magnitude of a 2D vector. Avoids sqrt for exactness."""
    return v[0] * v[0] + v[1] * v[1]


def norm(v: np.ndarray):
    """Magnitude (length) of a 2D vector."""
    return mp.sqrt(norm2(v))


def heading_deg(v: np.ndarray):
    """
    Direction of a 2D vector in degrees, counter-clockwise from +x.

    Range (-180, 180]. The zero vector has heading 0.
    """
    return mp.atan2(v[1], v[0]) * 180 / mp.pi
