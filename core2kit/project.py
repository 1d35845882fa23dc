"""Mapping between object space and viewport (window) coordinates."""

from __future__ import annotations

from typing import Sequence, Tuple

from core2kit import vec4
from core2kit.affine import mat4_inv, mat4_mulv

Vec3 = Tuple[float, float, float]


def unprojecti(
    pos: Sequence[float], inv_mat: Sequence[Sequence[float]], vp: Sequence[float]
) -> Vec3:
    """Map viewport coordinates back through an already inverted matrix.

    vp is the viewport as [x, y, width, height].
    """
    v = (
        2.0 * (pos[0] - vp[0]) / vp[2] - 1.0,
        2.0 * (pos[1] - vp[1]) / vp[3] - 1.0,
        2.0 * pos[2] - 1.0,
        1.0,
    )
    v = mat4_mulv(inv_mat, v)
    v = vec4.scale(v, 1.0 / v[3])
    return vec4.copy3(v)


def unproject(pos: Sequence[float], m: Sequence[Sequence[float]], vp: Sequence[float]) -> Vec3:
    """Map viewport coordinates into the space that m projects from."""
    return unprojecti(pos, mat4_inv(m), vp)


def project(pos: Sequence[float], m: Sequence[Sequence[float]], vp: Sequence[float]) -> Vec3:
    """Map object coordinates to window coordinates using an MVP matrix."""
    pos4 = mat4_mulv(m, vec4.vec4(pos, 1.0))
    pos4 = vec4.scale(pos4, 1.0 / pos4[3])
    pos4 = vec4.scale(vec4.add(pos4, vec4.one()), 0.5)
    return (
        pos4[0] * vp[2] + vp[0],
        pos4[1] * vp[3] + vp[1],
        pos4[2],
    )