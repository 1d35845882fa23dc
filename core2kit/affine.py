"""Affine transforms on 4x4 matrices stored as column tuples (``m[column][row]``)."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from core2kit import vec3, vec4

Vec4 = Tuple[float, float, float, float]
Mat4 = Tuple[Vec4, Vec4, Vec4, Vec4]


def _mat(cols) -> Mat4:
    return tuple(tuple(float(c) for c in col) for col in cols)  # type: ignore[return-value]


def identity() -> Mat4:
    """The 4x4 identity matrix."""
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def mat4_mulv(m: Sequence[Sequence[float]], v: Sequence[float]) -> Vec4:
    """Matrix times column vector."""
    return tuple(  # type: ignore[return-value]
        sum(c * x for c, x in zip(row, v[:4])) for row in zip(*m)
    )


def mat4_mul(m1: Sequence[Sequence[float]], m2: Sequence[Sequence[float]]) -> Mat4:
    """Matrix product m1 * m2."""
    return tuple(mat4_mulv(m1, col) for col in m2)  # type: ignore[return-value]


def mul_rot(m1: Sequence[Sequence[float]], m2: Sequence[Sequence[float]]) -> Mat4:
    """Product m1 * m2 where m2 is a pure rotation; m1's translation is kept."""
    cols = [mat4_mulv(m1, (col[0], col[1], col[2], 0.0)) for col in m2[:3]]
    cols.append(tuple(m1[3]))
    return _mat(cols)


def mat4_inv(m: Sequence[Sequence[float]]) -> Mat4:
    """Inverse of a 4x4 matrix; raises ValueError when it is singular."""
    # Inverting the transposed storage yields the transposed storage of the inverse.
    work: List[List[float]] = [[float(x) for x in col] for col in m]
    result: List[List[float]] = [list(col) for col in identity()]

    for c in range(4):
        pivot = max(range(c, 4), key=lambda r: abs(work[r][c]))
        if work[pivot][c] == 0.0:
            raise ValueError("matrix is singular")
        work[c], work[pivot] = work[pivot], work[c]
        result[c], result[pivot] = result[pivot], result[c]

        factor = work[c][c]
        work[c] = [x / factor for x in work[c]]
        result[c] = [x / factor for x in result[c]]

        for r in range(4):
            if r == c:
                continue
            f = work[r][c]
            if f != 0.0:
                work[r] = [a - f * b for a, b in zip(work[r], work[c])]
                result[r] = [a - f * b for a, b in zip(result[r], result[c])]

    return _mat(result)


def translate(m: Sequence[Sequence[float]], v: Sequence[float]) -> Mat4:
    """Translate an existing transform by v = [x, y, z]."""
    t = vec4.add(
        vec4.add(vec4.scale(m[0], v[0]), vec4.scale(m[1], v[1])),
        vec4.add(vec4.scale(m[2], v[2]), m[3]),
    )
    return _mat((m[0], m[1], m[2], t))


def translate_x(m: Sequence[Sequence[float]], x: float) -> Mat4:
    """Translate an existing transform along its x axis."""
    return _mat((m[0], m[1], m[2], vec4.add(vec4.scale(m[0], x), m[3])))


def translate_y(m: Sequence[Sequence[float]], y: float) -> Mat4:
    """Translate an existing transform along its y axis."""
    return _mat((m[0], m[1], m[2], vec4.add(vec4.scale(m[1], y), m[3])))


def translate_z(m: Sequence[Sequence[float]], z: float) -> Mat4:
    """Translate an existing transform along its z axis."""
    return _mat((m[0], m[1], m[2], vec4.add(vec4.scale(m[2], z), m[3])))


def translate_make(v: Sequence[float]) -> Mat4:
    """New translation matrix for v = [x, y, z]."""
    i = identity()
    return _mat((i[0], i[1], i[2], (v[0], v[1], v[2], 1.0)))


def scale(m: Sequence[Sequence[float]], v: Sequence[float]) -> Mat4:
    """Scale an existing transform by v = [x, y, z]."""
    return _mat(
        (
            vec4.scale(m[0], v[0]),
            vec4.scale(m[1], v[1]),
            vec4.scale(m[2], v[2]),
            m[3],
        )
    )


def scale_make(v: Sequence[float]) -> Mat4:
    """New scale matrix for v = [x, y, z]."""
    return (
        (float(v[0]), 0.0, 0.0, 0.0),
        (0.0, float(v[1]), 0.0, 0.0),
        (0.0, 0.0, float(v[2]), 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def scale_uni(m: Sequence[Sequence[float]], s: float) -> Mat4:
    """Scale an existing transform uniformly by s."""
    return scale(m, (s, s, s))


def rotate_x(m: Sequence[Sequence[float]], angle: float) -> Mat4:
    """Rotate an existing transform around the X axis (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    t = (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, c, s, 0.0),
        (0.0, -s, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    return mul_rot(m, t)


def rotate_y(m: Sequence[Sequence[float]], angle: float) -> Mat4:
    """Rotate an existing transform around the Y axis (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    t = (
        (c, 0.0, -s, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (s, 0.0, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    return mul_rot(m, t)


def rotate_z(m: Sequence[Sequence[float]], angle: float) -> Mat4:
    """Rotate an existing transform around the Z axis (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    t = (
        (c, s, 0.0, 0.0),
        (-s, c, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    return mul_rot(m, t)


def rotate_make(angle: float, axis: Sequence[float]) -> Mat4:
    """New rotation matrix of angle (radians) around axis; the axis is normalized."""
    c = math.cos(angle)
    axisn = vec3.normalize(axis)
    v = vec3.scale(axisn, 1.0 - c)
    vs = vec3.scale(axisn, math.sin(angle))

    m0 = list(vec3.scale(axisn, v[0]))
    m1 = list(vec3.scale(axisn, v[1]))
    m2 = list(vec3.scale(axisn, v[2]))

    m0[0] += c
    m1[0] -= vs[2]
    m2[0] += vs[1]
    m0[1] += vs[2]
    m1[1] += c
    m2[1] -= vs[0]
    m0[2] -= vs[1]
    m1[2] += vs[0]
    m2[2] += c

    return _mat((m0 + [0.0], m1 + [0.0], m2 + [0.0], (0.0, 0.0, 0.0, 1.0)))


def rotate(m: Sequence[Sequence[float]], angle: float, axis: Sequence[float]) -> Mat4:
    """Rotate an existing transform around axis by angle (radians)."""
    return mul_rot(m, rotate_make(angle, axis))


def rotate_at(
    m: Sequence[Sequence[float]],
    pivot: Sequence[float],
    angle: float,
    axis: Sequence[float],
) -> Mat4:
    """Rotate an existing transform around axis through the pivot point."""
    result = translate(m, pivot)
    result = rotate(result, angle, axis)
    return translate(result, vec3.negate(pivot))


def rotate_atm(pivot: Sequence[float], angle: float, axis: Sequence[float]) -> Mat4:
    """New rotation matrix around axis through the pivot point."""
    result = translate_make(pivot)
    result = rotate(result, angle, axis)
    return translate(result, vec3.negate(pivot))


def decompose_scalev(m: Sequence[Sequence[float]]) -> Tuple[float, float, float]:
    """Scale factors [Sx, Sy, Sz] of an affine transform."""
    return (vec3.norm(m[0]), vec3.norm(m[1]), vec3.norm(m[2]))


def uniscaled(m: Sequence[Sequence[float]]) -> bool:
    """True if the transform is scaled equally along all axes."""
    return vec3.eq_all(decompose_scalev(m))


def decompose_rs(m: Sequence[Sequence[float]]) -> Tuple[Mat4, Tuple[float, float, float]]:
    """Split an affine (non-projective) transform into rotation matrix and scale vector."""
    s = list(decompose_scalev(m))
    r = [vec4.scale(m[i], 1.0 / s[i]) for i in range(3)]

    # A negative determinant means a flipped coordinate system.
    if vec3.dot(vec3.cross(m[0], m[1]), m[2]) < 0.0:
        r = [vec4.flipsign(col) for col in r]
        s = [-x for x in s]

    r.append((0.0, 0.0, 0.0, 1.0))
    return _mat(r), (s[0], s[1], s[2])


def decompose(
    m: Sequence[Sequence[float]],
) -> Tuple[Vec4, Mat4, Tuple[float, float, float]]:
    """Split an affine transform into translation, rotation and scale."""
    t = tuple(float(x) for x in m[3])
    r, s = decompose_rs(m)
    return t, r, s  # type: ignore[return-value]