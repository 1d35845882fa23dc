"""Four-component vector helpers working on plain tuples."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from core2kit import vec3
from core2kit.vec3 import FLT_EPSILON

Vec4 = Tuple[float, float, float, float]


def _fdiv(a: float, b: float) -> float:
    """IEEE-style division: a zero divisor yields an infinity or NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        negative = (a < 0.0) != (math.copysign(1.0, b) < 0.0)
        return -math.inf if negative else math.inf
    return a / b


def _clamp(val: float, min_val: float, max_val: float) -> float:
    val = val if val > min_val else min_val
    return val if val < max_val else max_val


def vec4(v3: Sequence[float], last: float) -> Vec4:
    """Build a vec4 from a vec3 and a last component."""
    return (v3[0], v3[1], v3[2], last)


def copy3(v: Sequence[float]) -> Tuple[float, float, float]:
    """First three components of v."""
    return (v[0], v[1], v[2])


def zero() -> Vec4:
    """The zero vector."""
    return (0.0, 0.0, 0.0, 0.0)


def one() -> Vec4:
    """The vector of ones."""
    return (1.0, 1.0, 1.0, 1.0)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2] + a[3] * b[3]


def norm2(v: Sequence[float]) -> float:
    """Squared length."""
    return dot(v, v)


def norm(v: Sequence[float]) -> float:
    """Euclidean length."""
    return math.sqrt(norm2(v))


def add(a: Sequence[float], b: Sequence[float]) -> Vec4:
    """Component-wise sum."""
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2], a[3] + b[3])


def adds(v: Sequence[float], s: float) -> Vec4:
    """Add a scalar to every component."""
    return (v[0] + s, v[1] + s, v[2] + s, v[3] + s)


def sub(a: Sequence[float], b: Sequence[float]) -> Vec4:
    """Component-wise difference a - b."""
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2], a[3] - b[3])


def subs(v: Sequence[float], s: float) -> Vec4:
    """Subtract a scalar from every component."""
    return (v[0] - s, v[1] - s, v[2] - s, v[3] - s)


def mul(a: Sequence[float], b: Sequence[float]) -> Vec4:
    """Component-wise product."""
    return (a[0] * b[0], a[1] * b[1], a[2] * b[2], a[3] * b[3])


def mulv(a: Sequence[float], b: Sequence[float]) -> Vec4:
    """Component-wise product (older name of mul)."""
    return mul(a, b)


def scale(v: Sequence[float], s: float) -> Vec4:
    """Multiply every component by a scalar."""
    return (v[0] * s, v[1] * s, v[2] * s, v[3] * s)


def scale_as(v: Sequence[float], s: float) -> Vec4:
    """Vector in the direction of v with length s; zero stays zero."""
    length = norm(v)
    if length == 0.0:
        return zero()
    return scale(v, s / length)


def div(a: Sequence[float], b: Sequence[float]) -> Vec4:
    """Component-wise quotient a / b."""
    return tuple(_fdiv(x, y) for x, y in zip(a[:4], b[:4]))  # type: ignore[return-value]


def divs(v: Sequence[float], s: float) -> Vec4:
    """Divide every component by a scalar."""
    return tuple(_fdiv(x, s) for x in v[:4])  # type: ignore[return-value]


def addadd(a: Sequence[float], b: Sequence[float], dest: Sequence[float]) -> Vec4:
    """dest + (a + b)."""
    return add(dest, add(a, b))


def subadd(a: Sequence[float], b: Sequence[float], dest: Sequence[float]) -> Vec4:
    """dest + (a - b)."""
    return add(dest, sub(a, b))


def muladd(a: Sequence[float], b: Sequence[float], dest: Sequence[float]) -> Vec4:
    """dest + (a * b)."""
    return add(dest, mul(a, b))


def muladds(a: Sequence[float], s: float, dest: Sequence[float]) -> Vec4:
    """dest + (a * s)."""
    return add(dest, scale(a, s))


def flipsign(v: Sequence[float]) -> Vec4:
    """Flip the sign of every component."""
    return (-v[0], -v[1], -v[2], -v[3])


def inv(v: Sequence[float]) -> Vec4:
    """Opposite vector."""
    return flipsign(v)


def normalize(v: Sequence[float]) -> Vec4:
    """Unit vector in the direction of v; the zero vector stays zero."""
    length = norm(v)
    if length == 0.0:
        return zero()
    return scale(v, 1.0 / length)


def distance(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(sum((b - a) ** 2 for a, b in zip(v1[:4], v2[:4])))


def maxv(v1: Sequence[float], v2: Sequence[float]) -> Vec4:
    """Component-wise maximum."""
    return tuple(a if a > b else b for a, b in zip(v1[:4], v2[:4]))  # type: ignore[return-value]


def minv(v1: Sequence[float], v2: Sequence[float]) -> Vec4:
    """Component-wise minimum."""
    return tuple(a if a < b else b for a, b in zip(v1[:4], v2[:4]))  # type: ignore[return-value]


def clamp(v: Sequence[float], min_val: float, max_val: float) -> Vec4:
    """Clamp every component into [min_val, max_val]."""
    return tuple(_clamp(c, min_val, max_val) for c in v[:4])  # type: ignore[return-value]


def lerp(start: Sequence[float], end: Sequence[float], t: float) -> Vec4:
    """Linear interpolation start + t * (end - start), t clamped to [0, 1]."""
    s = broadcast(_clamp(t, 0.0, 1.0))
    return add(start, mul(s, sub(end, start)))


def broadcast(val: float) -> Vec4:
    """Vector with every component set to val."""
    return (val, val, val, val)


def eq(v: Sequence[float], val: float) -> bool:
    """True if every component equals val exactly."""
    return v[0] == val and v[0] == v[1] and v[0] == v[2] and v[0] == v[3]


def eq_eps(v: Sequence[float], val: float) -> bool:
    """True if every component is within FLT_EPSILON of val."""
    return all(abs(c - val) <= FLT_EPSILON for c in v[:4])


def eq_all(v: Sequence[float]) -> bool:
    """True if all components are equal exactly."""
    return v[0] == v[1] and v[0] == v[2] and v[0] == v[3]


def eqv(v1: Sequence[float], v2: Sequence[float]) -> bool:
    """True if both vectors are equal exactly."""
    return all(a == b for a, b in zip(v1[:4], v2[:4]))


def eqv_eps(v1: Sequence[float], v2: Sequence[float]) -> bool:
    """True if both vectors are equal within FLT_EPSILON."""
    return all(abs(a - b) <= FLT_EPSILON for a, b in zip(v1[:4], v2[:4]))


def max_value(v: Sequence[float]) -> float:
    """Largest component."""
    result = vec3.max_value(v)
    return v[3] if v[3] > result else result


def min_value(v: Sequence[float]) -> float:
    """Smallest component."""
    result = vec3.min_value(v)
    return v[3] if v[3] < result else result


def isnan(v: Sequence[float]) -> bool:
    """True if any component is NaN."""
    return any(math.isnan(c) for c in v[:4])


def isinf(v: Sequence[float]) -> bool:
    """True if any component is infinite."""
    return any(math.isinf(c) for c in v[:4])


def isvalid(v: Sequence[float]) -> bool:
    """True if no component is NaN or infinite."""
    return not isnan(v) and not isinf(v)


def sign(v: Sequence[float]) -> Vec4:
    """Sign of each component as +1, -1 or 0 (0 for zero and NaN)."""
    return tuple(1.0 if c > 0.0 else -1.0 if c < 0.0 else 0.0 for c in v[:4])  # type: ignore[return-value]


def sqrt(v: Sequence[float]) -> Vec4:
    """Square root of each component; negative inputs give NaN."""
    return tuple(math.sqrt(c) if c >= 0.0 else math.nan for c in v[:4])  # type: ignore[return-value]


def plane_normalize(plane: Sequence[float]) -> Vec4:
    """Scale plane [A, B, C, D] so that its normal (A, B, C) has unit length."""
    return scale(plane, _fdiv(1.0, vec3.norm(plane)))