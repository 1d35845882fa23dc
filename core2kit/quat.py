"""Quaternion helpers; quaternions are stored as (x, y, z, w) tuples."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from core2kit import affine, vec3, vec4

Quat = Tuple[float, float, float, float]
Vec3 = Tuple[float, float, float]
Mat3 = Tuple[Vec3, Vec3, Vec3]
Mat4 = affine.Mat4


def identity() -> Quat:
    """The identity quaternion (0, 0, 0, 1)."""
    return (0.0, 0.0, 0.0, 1.0)


def identity_array(count: int) -> List[Quat]:
    """A list of count identity quaternions."""
    return [identity() for _ in range(count)]


def quatv(angle: float, axis: Sequence[float]) -> Quat:
    """Quaternion rotating by angle (radians) around axis; the axis is normalized."""
    half = angle * 0.5
    c, s = math.cos(half), math.sin(half)
    k = vec3.normalize(axis)
    return (s * k[0], s * k[1], s * k[2], c)


def quat(angle: float, x: float, y: float, z: float) -> Quat:
    """Quaternion rotating by angle (radians) around the axis (x, y, z)."""
    return quatv(angle, (x, y, z))


def norm(q: Sequence[float]) -> float:
    """Magnitude of the quaternion."""
    return vec4.norm(q)


def normalize(q: Sequence[float]) -> Quat:
    """Unit quaternion; a zero quaternion becomes the identity."""
    dot_value = vec4.norm2(q)
    if dot_value <= 0.0:
        return identity()
    return vec4.scale(q, 1.0 / math.sqrt(dot_value))


def dot(p: Sequence[float], q: Sequence[float]) -> float:
    """Dot product of two quaternions."""
    return vec4.dot(p, q)


def conjugate(q: Sequence[float]) -> Quat:
    """Conjugate: imaginary part negated, real part kept."""
    return (-q[0], -q[1], -q[2], q[3])


def inv(q: Sequence[float]) -> Quat:
    """Inverse of a non-zero quaternion."""
    return vec4.scale(conjugate(q), 1.0 / vec4.norm2(q))


def add(p: Sequence[float], q: Sequence[float]) -> Quat:
    """Component-wise sum."""
    return vec4.add(p, q)


def sub(p: Sequence[float], q: Sequence[float]) -> Quat:
    """Component-wise difference p - q."""
    return vec4.sub(p, q)


def real(q: Sequence[float]) -> float:
    """Real part w."""
    return q[3]


def imag(q: Sequence[float]) -> Vec3:
    """Imaginary part (x, y, z)."""
    return (q[0], q[1], q[2])


def imagn(q: Sequence[float]) -> Vec3:
    """Normalized imaginary part."""
    return vec3.normalize(q)


def imaglen(q: Sequence[float]) -> float:
    """Length of the imaginary part."""
    return vec3.norm(q)


def angle(q: Sequence[float]) -> float:
    """Rotation angle in radians."""
    return 2.0 * math.atan2(imaglen(q), real(q))


def axis(q: Sequence[float]) -> Vec3:
    """Rotation axis."""
    return imagn(q)


def mul(p: Sequence[float], q: Sequence[float]) -> Quat:
    """Hamilton product p * q: rotation q followed by rotation p."""
    return (
        p[3] * q[0] + p[0] * q[3] + p[1] * q[2] - p[2] * q[1],
        p[3] * q[1] - p[0] * q[2] + p[1] * q[3] + p[2] * q[0],
        p[3] * q[2] + p[0] * q[1] - p[1] * q[0] + p[2] * q[3],
        p[3] * q[3] - p[0] * q[0] - p[1] * q[1] - p[2] * q[2],
    )


def _mat3_columns(q: Sequence[float], transposed: bool) -> Mat3:
    n = norm(q)
    s = 2.0 / n if n > 0.0 else 0.0
    x, y, z, w = q[0], q[1], q[2], q[3]

    xx, xy, wx = s * x * x, s * x * y, s * w * x
    yy, yz, wy = s * y * y, s * y * z, s * w * y
    zz, xz, wz = s * z * z, s * x * z, s * w * z

    cols = [
        [1.0 - yy - zz, xy + wz, xz - wy],
        [xy - wz, 1.0 - xx - zz, yz + wx],
        [xz + wy, yz - wx, 1.0 - xx - yy],
    ]
    if transposed:
        cols = [list(row) for row in zip(*cols)]
    return tuple(tuple(col) for col in cols)  # type: ignore[return-value]


def _mat4_from3(m3: Mat3) -> Mat4:
    return (
        (m3[0][0], m3[0][1], m3[0][2], 0.0),
        (m3[1][0], m3[1][1], m3[1][2], 0.0),
        (m3[2][0], m3[2][1], m3[2][2], 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def to_mat4(q: Sequence[float]) -> Mat4:
    """Rotation matrix (4x4) of the quaternion."""
    return _mat4_from3(_mat3_columns(q, False))


def to_mat4t(q: Sequence[float]) -> Mat4:
    """Transposed rotation matrix (4x4) of the quaternion."""
    return _mat4_from3(_mat3_columns(q, True))


def to_mat3(q: Sequence[float]) -> Mat3:
    """Rotation matrix (3x3) of the quaternion."""
    return _mat3_columns(q, False)


def to_mat3t(q: Sequence[float]) -> Mat3:
    """Transposed rotation matrix (3x3) of the quaternion."""
    return _mat3_columns(q, True)


def lerp(start: Sequence[float], end: Sequence[float], t: float) -> Quat:
    """Linear interpolation with t clamped to [0, 1]."""
    return vec4.lerp(start, end, t)


def slerp(start: Sequence[float], end: Sequence[float], t: float) -> Quat:
    """Spherical linear interpolation."""
    cos_theta = dot(start, end)
    q1 = tuple(start)

    if abs(cos_theta) >= 1.0:
        return q1  # type: ignore[return-value]

    if cos_theta < 0.0:
        q1 = vec4.flipsign(q1)
        cos_theta = -cos_theta

    sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

    # Fall back to LERP to avoid dividing by a tiny sine.
    if abs(sin_theta) < 0.001:
        return lerp(start, end, t)

    theta = math.acos(cos_theta)
    q1 = vec4.scale(q1, math.sin((1.0 - t) * theta))
    q2 = vec4.scale(end, math.sin(t * theta))
    return vec4.scale(vec4.add(q1, q2), 1.0 / sin_theta)


def look(eye: Sequence[float], ori: Sequence[float]) -> Mat4:
    """View matrix for a camera at eye with orientation ori."""
    rot = to_mat4t(ori)
    moved = affine.mat4_mulv(rot, vec4.vec4(eye, 1.0))
    translation = (-moved[0], -moved[1], -moved[2], rot[3][3])
    return (rot[0], rot[1], rot[2], translation)


def for_direction(
    direction: Sequence[float], fwd: Sequence[float], up: Sequence[float]
) -> Quat:
    """Rotation that turns the forward vector towards direction."""
    d = vec3.dot(direction, fwd)
    if abs(d + 1.0) < 0.000001:
        return (up[0], up[1], up[2], math.pi)
    if abs(d - 1.0) < 0.000001:
        return identity()

    theta = math.acos(d)
    rot_axis = vec3.normalize(vec3.cross(fwd, direction))
    return quatv(theta, rot_axis)


def for_points(
    start: Sequence[float],
    end: Sequence[float],
    fwd: Sequence[float],
    up: Sequence[float],
) -> Quat:
    """Rotation that turns the forward vector towards the point end seen from start."""
    return for_direction(vec3.sub(end, start), fwd, up)


def rotatev(q: Sequence[float], v: Sequence[float]) -> Vec3:
    """Rotate a vector by the (normalized) quaternion."""
    p = normalize(q)
    u = imag(p)
    s = real(p)

    v1 = vec3.scale(u, 2.0 * vec3.dot(u, v))
    v2 = vec3.scale(v, s * s - vec3.dot(u, u))
    v1 = vec3.add(v1, v2)

    v2 = vec3.scale(vec3.cross(u, v), 2.0 * s)
    return vec3.add(v1, v2)


def rotate(m: Sequence[Sequence[float]], q: Sequence[float]) -> Mat4:
    """Rotate an existing transform by the quaternion."""
    return affine.mul_rot(m, to_mat4(q))


def rotate_at(
    m: Sequence[Sequence[float]], q: Sequence[float], pivot: Sequence[float]
) -> Mat4:
    """Rotate an existing transform by the quaternion around a pivot point."""
    result = affine.translate(m, pivot)
    result = rotate(result, q)
    return affine.translate(result, vec3.negate(pivot))


def rotate_atm(q: Sequence[float], pivot: Sequence[float]) -> Mat4:
    """New transform rotating by the quaternion around a pivot point."""
    result = affine.translate_make(pivot)
    result = rotate(result, q)
    return affine.translate(result, vec3.negate(pivot))