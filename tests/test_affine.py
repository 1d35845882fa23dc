import math

import pytest

from core2kit import affine
from core2kit.euler import euler_xyz


def flat(m):
    return [x for col in m for x in col]


def assert_mat_close(a, b):
    assert flat(a) == pytest.approx(flat(b), abs=1e-9)


SAMPLE = affine.mat4_mul(
    affine.translate_make((1.0, -2.0, 3.0)),
    affine.mat4_mul(
        affine.rotate_make(0.7, (1.0, 2.0, 3.0)),
        affine.scale_make((2.0, 3.0, 4.0)),
    ),
)


def test_identity_is_neutral_for_mul():
    assert_mat_close(affine.mat4_mul(affine.identity(), SAMPLE), SAMPLE)
    assert_mat_close(affine.mat4_mul(SAMPLE, affine.identity()), SAMPLE)


def test_mulv_applies_translation():
    m = affine.translate_make((1.0, 2.0, 3.0))
    assert affine.mat4_mulv(m, (0.0, 0.0, 0.0, 1.0)) == pytest.approx((1.0, 2.0, 3.0, 1.0))


def test_inverse_round_trip():
    inv = affine.mat4_inv(SAMPLE)
    assert_mat_close(affine.mat4_mul(SAMPLE, inv), affine.identity())
    assert_mat_close(affine.mat4_mul(inv, SAMPLE), affine.identity())


def test_inverse_of_singular_raises():
    singular = ((1.0, 2.0, 3.0, 4.0),) * 4
    with pytest.raises(ValueError):
        affine.mat4_inv(singular)


def test_translate_matches_translate_make():
    assert_mat_close(
        affine.translate(affine.identity(), (4.0, 5.0, 6.0)),
        affine.translate_make((4.0, 5.0, 6.0)),
    )


def test_translate_axes_compose_to_translate():
    m = affine.rotate_make(0.3, (0.0, 1.0, 1.0))
    stepwise = affine.translate_z(affine.translate_y(affine.translate_x(m, 1.5), -2.0), 0.5)
    assert_mat_close(stepwise, affine.translate(m, (1.5, -2.0, 0.5)))


def test_scale_matches_scale_make():
    assert_mat_close(affine.scale(affine.identity(), (2.0, 3.0, 4.0)), affine.scale_make((2.0, 3.0, 4.0)))


def test_scale_uni_is_uniscaled():
    m = affine.scale_uni(affine.rotate_make(1.1, (1.0, 0.0, 1.0)), 3.0)
    assert affine.uniscaled(affine.scale_make((2.0, 2.0, 2.0)))
    assert not affine.uniscaled(affine.scale_make((2.0, 3.0, 2.0)))
    assert affine.decompose_scalev(m) == pytest.approx((3.0, 3.0, 3.0))


@pytest.mark.parametrize("angle", [0.0, 0.4, math.pi / 2, -2.3])
def test_rotate_x_matches_euler(angle):
    assert_mat_close(affine.rotate_x(affine.identity(), angle), euler_xyz((angle, 0.0, 0.0)))
    assert_mat_close(affine.rotate_make(angle, (2.0, 0.0, 0.0)), affine.rotate_x(affine.identity(), angle))


@pytest.mark.parametrize("angle", [0.25, -1.2])
def test_rotate_y_and_z_match_axis_rotation(angle):
    assert_mat_close(affine.rotate_y(affine.identity(), angle), euler_xyz((0.0, angle, 0.0)))
    assert_mat_close(affine.rotate_z(affine.identity(), angle), euler_xyz((0.0, 0.0, angle)))
    assert_mat_close(affine.rotate_make(angle, (0.0, 0.0, 1.0)), affine.rotate_z(affine.identity(), angle))


def test_rotate_keeps_translation():
    m = affine.translate_make((1.0, 2.0, 3.0))
    rotated = affine.rotate(m, 0.9, (1.0, 1.0, 0.0))
    assert rotated[3] == pytest.approx(m[3])
    assert_mat_close(affine.mul_rot(m, affine.rotate_make(0.9, (1.0, 1.0, 0.0))), rotated)


def test_rotate_at_keeps_pivot_fixed():
    pivot = (1.0, -3.0, 2.0)
    m = affine.rotate_atm(pivot, 1.3, (0.2, 0.5, 1.0))
    assert affine.mat4_mulv(m, pivot + (1.0,)) == pytest.approx(pivot + (1.0,))
    assert_mat_close(affine.rotate_at(affine.identity(), pivot, 1.3, (0.2, 0.5, 1.0)), m)


def test_decompose_round_trip():
    t, r, s = affine.decompose(SAMPLE)
    assert t == pytest.approx((1.0, -2.0, 3.0, 1.0))
    assert s == pytest.approx((2.0, 3.0, 4.0))
    assert_mat_close(r, affine.rotate_make(0.7, (1.0, 2.0, 3.0)))


def test_decompose_rs_handles_flip():
    m = affine.scale_make((-2.0, 3.0, 4.0))
    r, s = affine.decompose_rs(m)
    assert s == pytest.approx((-2.0, -3.0, -4.0))
    assert_mat_close(affine.mat4_mul(r, affine.scale_make(s)), m)