"""Rotation matrices built from and decomposed into Euler angles.

Angles are always given in [x, y, z] order, whatever the rotation order.
Matrices are 4x4, stored as four column tuples: ``m[column][row]``.
"""

from __future__ import annotations

import enum
import math
from typing import Sequence, Tuple

Mat4 = Tuple[
    Tuple[float, float, float, float],
    Tuple[float, float, float, float],
    Tuple[float, float, float, float],
    Tuple[float, float, float, float],
]


class EulerOrder(enum.IntEnum):
    """Axis order; each axis index is packed in two bits."""

    XYZ = 0 << 0 | 1 << 2 | 2 << 4
    XZY = 0 << 0 | 2 << 2 | 1 << 4
    YZX = 1 << 0 | 2 << 2 | 0 << 4
    YXZ = 1 << 0 | 0 << 2 | 2 << 4
    ZXY = 2 << 0 | 0 << 2 | 1 << 4
    ZYX = 2 << 0 | 1 << 2 | 0 << 4


def euler_order(order: Sequence[int]) -> EulerOrder:
    """Pack an axis index sequence such as [0, 1, 2] into an EulerOrder."""
    return EulerOrder(order[0] << 0 | order[1] << 2 | order[2] << 4)


def _sincos(angles: Sequence[float]):
    sx, cx = math.sin(angles[0]), math.cos(angles[0])
    sy, cy = math.sin(angles[1]), math.cos(angles[1])
    sz, cz = math.sin(angles[2]), math.cos(angles[2])
    return sx, cx, sy, cy, sz, cz


def _rotation(c0, c1, c2) -> Mat4:
    return (
        (c0[0], c0[1], c0[2], 0.0),
        (c1[0], c1[1], c1[2], 0.0),
        (c2[0], c2[1], c2[2], 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def euler_angles(m: Sequence[Sequence[float]]) -> Tuple[float, float, float]:
    """Extract [x, y, z] angles (radians) from a matrix built in XYZ order."""
    m00, m01 = m[0][0], m[0][1]
    m10, m11 = m[1][0], m[1][1]
    m20, m21, m22 = m[2][0], m[2][1], m[2][2]

    if m20 < 1.0:
        if m20 > -1.0:
            theta_y = math.asin(m20)
            theta_x = math.atan2(-m21, m22)
            theta_z = math.atan2(-m10, m00)
        else:
            theta_y = -math.pi / 2
            theta_x = -math.atan2(m01, m11)
            theta_z = 0.0
    else:
        theta_y = math.pi / 2
        theta_x = math.atan2(m01, m11)
        theta_z = 0.0

    return (theta_x, theta_y, theta_z)


def euler_xyz(angles: Sequence[float]) -> Mat4:
    """Rotation matrix for XYZ order."""
    sx, cx, sy, cy, sz, cz = _sincos(angles)
    czsx = cz * sx
    cxcz = cx * cz
    sysz = sy * sz
    return _rotation(
        (cy * cz, czsx * sy + cx * sz, -cxcz * sy + sx * sz),
        (-cy * sz, cxcz - sx * sysz, czsx + cx * sysz),
        (sy, -cy * sx, cx * cy),
    )


def euler(angles: Sequence[float]) -> Mat4:
    """Rotation matrix for the default (XYZ) order."""
    return euler_xyz(angles)


def euler_xzy(angles: Sequence[float]) -> Mat4:
    """Rotation matrix for XZY order."""
    sx, cx, sy, cy, sz, cz = _sincos(angles)
    sxsy = sx * sy
    cysx = cy * sx
    cxsy = cx * sy
    cxcy = cx * cy
    return _rotation(
        (cy * cz, sxsy + cxcy * sz, -cxsy + cysx * sz),
        (-sz, cx * cz, cz * sx),
        (cz * sy, -cysx + cxsy * sz, cxcy + sxsy * sz),
    )


def euler_yxz(angles: Sequence[float]) -> Mat4:
    """Rotation matrix for YXZ order."""
    sx, cx, sy, cy, sz, cz = _sincos(angles)
    cycz = cy * cz
    sysz = sy * sz
    czsy = cz * sy
    cysz = cy * sz
    return _rotation(
        (cycz + sx * sysz, cx * sz, -czsy + cysz * sx),
        (-cysz + czsy * sx, cx * cz, cycz * sx + sysz),
        (cx * sy, -sx, cx * cy),
    )


def euler_yzx(angles: Sequence[float]) -> Mat4:
    """Rotation matrix for YZX order."""
    sx, cx, sy, cy, sz, cz = _sincos(angles)
    sxsy = sx * sy
    cxcy = cx * cy
    cysx = cy * sx
    cxsy = cx * sy
    return _rotation(
        (cy * cz, sz, -cz * sy),
        (sxsy - cxcy * sz, cx * cz, cysx + cxsy * sz),
        (cxsy + cysx * sz, -cz * sx, cxcy - sxsy * sz),
    )


def euler_zxy(angles: Sequence[float]) -> Mat4:
    """Rotation matrix for ZXY order."""
    sx, cx, sy, cy, sz, cz = _sincos(angles)
    cycz = cy * cz
    sxsy = sx * sy
    cysz = cy * sz
    return _rotation(
        (cycz - sxsy * sz, cz * sxsy + cysz, -cx * sy),
        (-cx * sz, cx * cz, sx),
        (cz * sy + cysz * sx, -cycz * sx + sy * sz, cx * cy),
    )


def euler_zyx(angles: Sequence[float]) -> Mat4:
    """Rotation matrix for ZYX order."""
    sx, cx, sy, cy, sz, cz = _sincos(angles)
    czsx = cz * sx
    cxcz = cx * cz
    sysz = sy * sz
    return _rotation(
        (cy * cz, cy * sz, -sy),
        (czsx * sy - cx * sz, cxcz + sx * sysz, cy * sx),
        (cxcz * sy + sx * sz, -czsx + cx * sysz, cx * cy),
    )


def euler_by_order(angles: Sequence[float], order) -> Mat4:
    """Rotation matrix for the given order; raises ValueError for an unknown one."""
    order = EulerOrder(order)
    sx, cx, sy, cy, sz, cz = _sincos(angles)

    cycz, cysz = cy * cz, cy * sz
    cysx, cxcy = cy * sx, cx * cy
    czsy, cxcz = cz * sy, cx * cz
    czsx, cxsz = cz * sx, cx * sz
    sysz = sy * sz

    if order is EulerOrder.XZY:
        cols = (
            (cycz, sx * sy + cx * cysz, -cx * sy + cysx * sz),
            (-sz, cxcz, czsx),
            (czsy, -cysx + cx * sysz, cxcy + sx * sysz),
        )
    elif order is EulerOrder.XYZ:
        cols = (
            (cycz, czsx * sy + cxsz, -cx * czsy + sx * sz),
            (-cysz, cxcz - sx * sysz, czsx + cx * sysz),
            (sy, -cysx, cxcy),
        )
    elif order is EulerOrder.YXZ:
        cols = (
            (cycz + sx * sysz, cxsz, -czsy + cysx * sz),
            (czsx * sy - cysz, cxcz, cycz * sx + sysz),
            (cx * sy, -sx, cxcy),
        )
    elif order is EulerOrder.YZX:
        cols = (
            (cycz, sz, -czsy),
            (sx * sy - cx * cysz, cxcz, cysx + cx * sysz),
            (cx * sy + cysx * sz, -czsx, cxcy - sx * sysz),
        )
    elif order is EulerOrder.ZXY:
        cols = (
            (cycz - sx * sysz, czsx * sy + cysz, -cx * sy),
            (-cxsz, cxcz, sx),
            (czsy + cysx * sz, -cycz * sx + sysz, cxcy),
        )
    else:
        cols = (
            (cycz, cysz, -sy),
            (czsx * sy - cxsz, cxcz + sx * sysz, cysx),
            (cx * czsy + sx * sz, -czsx + cx * sysz, cxcy),
        )

    return _rotation(*cols)