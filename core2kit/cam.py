"""Projection and view matrices, and decomposition of perspective projections.

Matrices are 4x4, stored as four column tuples: ``m[column][row]``.
"""

from __future__ import annotations

import math
from typing import List, NamedTuple, Sequence, Tuple

from core2kit import vec3
from core2kit.affine import Mat4


class Frustum(NamedTuple):
    """Frustum planes recovered from a perspective projection."""

    near: float
    far: float
    top: float
    bottom: float
    left: float
    right: float


def _zeros() -> List[List[float]]:
    return [[0.0] * 4 for _ in range(4)]


def _freeze(cols: Sequence[Sequence[float]]) -> Mat4:
    return tuple(tuple(float(c) for c in col) for col in cols)  # type: ignore[return-value]


def frustum(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4:
    """Perspective projection matrix for the given viewport and clip planes."""
    rl = 1.0 / (right - left)
    tb = 1.0 / (top - bottom)
    fn = -1.0 / (far - near)
    nv = 2.0 * near

    dest = _zeros()
    dest[0][0] = nv * rl
    dest[1][1] = nv * tb
    dest[2][0] = (right + left) * rl
    dest[2][1] = (top + bottom) * tb
    dest[2][2] = (far + near) * fn
    dest[2][3] = -1.0
    dest[3][2] = far * nv * fn
    return _freeze(dest)


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4:
    """Orthographic projection matrix for the given viewport and clip planes."""
    rl = 1.0 / (right - left)
    tb = 1.0 / (top - bottom)
    fn = -1.0 / (far - near)

    dest = _zeros()
    dest[0][0] = 2.0 * rl
    dest[1][1] = 2.0 * tb
    dest[2][2] = 2.0 * fn
    dest[3][0] = -(right + left) * rl
    dest[3][1] = -(top + bottom) * tb
    dest[3][2] = (far + near) * fn
    dest[3][3] = 1.0
    return _freeze(dest)


def ortho_aabb(box: Sequence[Sequence[float]]) -> Mat4:
    """Orthographic projection enclosing a view-space bounding box (min, max)."""
    lo, hi = box[0], box[1]
    return ortho(lo[0], hi[0], lo[1], hi[1], -hi[2], -lo[2])


def ortho_aabb_p(box: Sequence[Sequence[float]], padding: float) -> Mat4:
    """Orthographic projection enclosing a bounding box grown by padding on all sides."""
    lo, hi = box[0], box[1]
    return ortho(
        lo[0] - padding,
        hi[0] + padding,
        lo[1] - padding,
        hi[1] + padding,
        -(hi[2] + padding),
        -(lo[2] - padding),
    )


def ortho_aabb_pz(box: Sequence[Sequence[float]], padding: float) -> Mat4:
    """Orthographic projection enclosing a bounding box padded in depth only."""
    lo, hi = box[0], box[1]
    return ortho(lo[0], hi[0], lo[1], hi[1], -(hi[2] + padding), -(lo[2] - padding))


def ortho_default(aspect: float) -> Mat4:
    """Unit orthographic projection for the aspect ratio (width / height)."""
    if aspect >= 1.0:
        return ortho(-aspect, aspect, -1.0, 1.0, -100.0, 100.0)
    return ortho(-1.0, 1.0, -1.0 / aspect, 1.0 / aspect, -100.0, 100.0)


def ortho_default_s(aspect: float, size: float) -> Mat4:
    """Orthographic projection of a cube of the given size."""
    if aspect >= 1.0:
        return ortho(
            -size * aspect, size * aspect, -size, size, -size - 100.0, size + 100.0
        )
    return ortho(
        -size, size, -size / aspect, size / aspect, -size - 100.0, size + 100.0
    )


def perspective(fovy: float, aspect: float, near: float, far: float) -> Mat4:
    """Perspective projection from a vertical field of view (radians)."""
    f = 1.0 / math.tan(fovy * 0.5)
    fn = 1.0 / (near - far)

    dest = _zeros()
    dest[0][0] = f / aspect
    dest[1][1] = f
    dest[2][2] = (near + far) * fn
    dest[2][3] = -1.0
    dest[3][2] = 2.0 * near * far * fn
    return _freeze(dest)


def perspective_default(aspect: float) -> Mat4:
    """Perspective projection with a 45 degree field of view, near 0.01 and far 100."""
    return perspective(math.pi / 4, aspect, 0.01, 100.0)


def perspective_resize(aspect: float, proj: Sequence[Sequence[float]]) -> Mat4:
    """The projection adjusted to a new aspect ratio; a zero m00 is left as is."""
    cols = [list(col) for col in proj]
    if cols[0][0] == 0.0:
        return _freeze(cols)
    cols[0][0] = cols[1][1] / aspect
    return _freeze(cols)


def lookat(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> Mat4:
    """View matrix looking from eye at center; up must not be parallel to the sight line."""
    f = vec3.normalize(vec3.sub(center, eye))
    s = vec3.normalize(vec3.cross(f, up))
    u = vec3.cross(s, f)

    return _freeze(
        (
            (s[0], u[0], -f[0], 0.0),
            (s[1], u[1], -f[1], 0.0),
            (s[2], u[2], -f[2], 0.0),
            (-vec3.dot(s, eye), -vec3.dot(u, eye), vec3.dot(f, eye), 1.0),
        )
    )


def look(eye: Sequence[float], direction: Sequence[float], up: Sequence[float]) -> Mat4:
    """View matrix looking from eye along direction."""
    return lookat(eye, vec3.add(eye, direction), up)


def persp_decomp(proj: Sequence[Sequence[float]]) -> Frustum:
    """Frustum planes of a perspective projection."""
    m00 = proj[0][0]
    m11 = proj[1][1]
    m20 = proj[2][0]
    m21 = proj[2][1]
    m22 = proj[2][2]
    m32 = proj[3][2]

    n = m32 / (m22 - 1.0)
    f = m32 / (m22 + 1.0)
    n_m11 = n / m11
    n_m00 = n / m00

    return Frustum(
        near=n,
        far=f,
        top=n_m11 * (m21 + 1.0),
        bottom=n_m11 * (m21 - 1.0),
        left=n_m00 * (m20 - 1.0),
        right=n_m00 * (m20 + 1.0),
    )


def persp_decompv(proj: Sequence[Sequence[float]]) -> Tuple[float, ...]:
    """Frustum planes as (near, far, top, bottom, left, right)."""
    return tuple(persp_decomp(proj))


def persp_decomp_x(proj: Sequence[Sequence[float]]) -> Tuple[float, float]:
    """Left and right values of a perspective projection."""
    m00 = proj[0][0]
    m20 = proj[2][0]
    near = proj[3][2] / (proj[3][3] - 1.0)
    return (near * (m20 - 1.0) / m00, near * (m20 + 1.0) / m00)


def persp_decomp_y(proj: Sequence[Sequence[float]]) -> Tuple[float, float]:
    """Top and bottom values of a perspective projection."""
    m21 = proj[2][1]
    m11 = proj[1][1]
    near = proj[3][2] / (proj[3][3] - 1.0)
    return (near * (m21 + 1.0) / m11, near * (m21 - 1.0) / m11)


def persp_decomp_z(proj: Sequence[Sequence[float]]) -> Tuple[float, float]:
    """Near and far values of a perspective projection."""
    m32 = proj[3][2]
    m22 = proj[2][2]
    return (m32 / (m22 - 1.0), m32 / (m22 + 1.0))


def persp_decomp_far(proj: Sequence[Sequence[float]]) -> float:
    """Far value of a perspective projection."""
    return proj[3][2] / (proj[2][2] + 1.0)


def persp_decomp_near(proj: Sequence[Sequence[float]]) -> float:
    """Near value of a perspective projection."""
    return proj[3][2] / (proj[2][2] - 1.0)


def persp_fovy(proj: Sequence[Sequence[float]]) -> float:
    """Vertical field of view in radians."""
    return 2.0 * math.atan(1.0 / proj[1][1])


def persp_aspect(proj: Sequence[Sequence[float]]) -> float:
    """Aspect ratio (width / height) of a perspective projection."""
    return proj[1][1] / proj[0][0]


def persp_sizes(proj: Sequence[Sequence[float]], fovy: float) -> Tuple[float, float, float, float]:
    """Near and far plane sizes as (Wnear, Hnear, Wfar, Hfar)."""
    t = 2.0 * math.tan(fovy * 0.5)
    a = persp_aspect(proj)
    near, far = persp_decomp_z(proj)
    h_near = t * near
    h_far = t * far
    return (a * h_near, h_near, a * h_far, h_far)