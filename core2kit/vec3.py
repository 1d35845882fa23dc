"""Three-component vector helpers working on plain tuples."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

Vec3 = Tuple[float, float, float]

FLT_EPSILON = 1.1920928955078125e-07


def _signf(value: float) -> float:
    if value > 0.0:
        return 1.0
    if value < 0.0:
        return -1.0
    return 0.0


def add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Component-wise sum."""
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Component-wise difference a - b."""
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(v: Sequence[float], s: float) -> Vec3:
    """Multiply every component by a scalar."""
    return (v[0] * s, v[1] * s, v[2] * s)


def negate(v: Sequence[float]) -> Vec3:
    """Flip the sign of every component."""
    return (-v[0], -v[1], -v[2])


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Cross product a x b."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def norm(v: Sequence[float]) -> float:
    """Euclidean length of the first three components."""
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def normalize(v: Sequence[float]) -> Vec3:
    """Unit vector in the direction of v; the zero vector stays zero."""
    length = norm(v)
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    return scale(v, 1.0 / length)


def mulv(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Component-wise product."""
    return (a[0] * b[0], a[1] * b[1], a[2] * b[2])


def broadcast(val: float) -> Vec3:
    """Vector with every component set to val."""
    return (val, val, val)


def eq(v: Sequence[float], val: float) -> bool:
    """True if every component equals val exactly."""
    return v[0] == val and v[0] == v[1] and v[0] == v[2]


def eq_eps(v: Sequence[float], val: float) -> bool:
    """True if every component is within FLT_EPSILON of val."""
    return all(abs(c - val) <= FLT_EPSILON for c in v[:3])


def eq_all(v: Sequence[float]) -> bool:
    """True if all components are equal exactly."""
    return v[0] == v[1] and v[0] == v[2]


def eqv(v1: Sequence[float], v2: Sequence[float]) -> bool:
    """True if both vectors are equal exactly."""
    return v1[0] == v2[0] and v1[1] == v2[1] and v1[2] == v2[2]


def eqv_eps(v1: Sequence[float], v2: Sequence[float]) -> bool:
    """True if both vectors are equal within FLT_EPSILON."""
    return all(abs(a - b) <= FLT_EPSILON for a, b in zip(v1[:3], v2[:3]))


def max_value(v: Sequence[float]) -> float:
    """Largest component."""
    result = v[0]
    if v[1] > result:
        result = v[1]
    if v[2] > result:
        result = v[2]
    return result


def min_value(v: Sequence[float]) -> float:
    """Smallest component."""
    result = v[0]
    if v[1] < result:
        result = v[1]
    if v[2] < result:
        result = v[2]
    return result


def isnan(v: Sequence[float]) -> bool:
    """True if any component is NaN."""
    return any(math.isnan(c) for c in v[:3])


def isinf(v: Sequence[float]) -> bool:
    """True if any component is infinite."""
    return any(math.isinf(c) for c in v[:3])


def isvalid(v: Sequence[float]) -> bool:
    """True if no component is NaN or infinite."""
    return not isnan(v) and not isinf(v)


def sign(v: Sequence[float]) -> Vec3:
    """Sign of each component as +1, -1 or 0 (0 for zero and NaN)."""
    return (_signf(v[0]), _signf(v[1]), _signf(v[2]))


def sqrt(v: Sequence[float]) -> Vec3:
    """Square root of each component; negative inputs give NaN."""
    return tuple(math.sqrt(c) if c >= 0.0 else math.nan for c in v[:3])  # type: ignore[return-value]