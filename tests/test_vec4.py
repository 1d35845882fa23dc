import math

import pytest

from core2kit import vec4

A = (1.0, -2.0, 3.5, 4.0)
B = (0.5, 6.0, -1.0, 2.0)


def test_vec4_and_copy3_round_trip():
    v = vec4.vec4((7.0, 8.0, 9.0), 10.0)
    assert v == (7.0, 8.0, 9.0, 10.0)
    assert vec4.copy3(v) == (7.0, 8.0, 9.0)


def test_zero_and_one_constants():
    assert vec4.zero() == (0.0, 0.0, 0.0, 0.0)
    assert vec4.one() == (1.0, 1.0, 1.0, 1.0)


def test_add_sub_round_trip():
    assert vec4.sub(vec4.add(A, B), B) == pytest.approx(A, abs=1e-9)
    assert vec4.add(A, B) == vec4.add(B, A)


def test_adds_subs_round_trip():
    assert vec4.subs(vec4.adds(A, 2.5), 2.5) == pytest.approx(A, abs=1e-9)


def test_dot_and_norms_agree():
    assert vec4.dot(A, A) == vec4.norm2(A)
    assert math.isclose(vec4.norm(A) ** 2, vec4.norm2(A))
    assert vec4.dot(A, B) == vec4.dot(B, A)


def test_mul_and_mulv_with_one_is_identity():
    assert vec4.mul(A, vec4.one()) == A
    assert vec4.mulv(A, B) == vec4.mul(A, B)


def test_scale_identity_and_zero():
    assert vec4.scale(A, 1.0) == A
    assert vec4.scale(A, 0.0) == (0.0, -0.0, 0.0, 0.0)


def test_scale_as_sets_length():
    out = vec4.scale_as(A, 3.0)
    assert math.isclose(vec4.norm(out), 3.0)
    assert vec4.scale_as(vec4.zero(), 3.0) == vec4.zero()


def test_div_inverts_mul():
    assert vec4.div(vec4.mul(A, B), B) == pytest.approx(A, abs=1e-9)
    assert vec4.divs(vec4.scale(A, 4.0), 4.0) == pytest.approx(A, abs=1e-9)


def test_div_by_zero_gives_infinity():
    out = vec4.divs((1.0, -1.0, 0.0, 2.0), 0.0)
    assert out[0] == math.inf
    assert out[1] == -math.inf
    assert math.isnan(out[2])


def test_accumulating_helpers():
    dest = (1.0, 1.0, 1.0, 1.0)
    assert vec4.addadd(A, B, dest) == vec4.add(dest, vec4.add(A, B))
    assert vec4.subadd(A, B, dest) == vec4.add(dest, vec4.sub(A, B))
    assert vec4.muladd(A, B, dest) == vec4.add(dest, vec4.mul(A, B))
    assert vec4.muladds(A, 2.0, dest) == vec4.add(dest, vec4.scale(A, 2.0))


def test_flipsign_and_inv():
    assert vec4.flipsign(vec4.flipsign(A)) == A
    assert vec4.inv(A) == vec4.flipsign(A)
    assert vec4.add(A, vec4.inv(A)) == vec4.zero()


def test_normalize():
    assert math.isclose(vec4.norm(vec4.normalize(A)), 1.0)
    assert vec4.normalize(vec4.zero()) == vec4.zero()


def test_distance_matches_norm_of_difference():
    assert math.isclose(vec4.distance(A, B), vec4.norm(vec4.sub(B, A)))
    assert vec4.distance(A, A) == 0.0


def test_maxv_minv():
    hi = vec4.maxv(A, B)
    lo = vec4.minv(A, B)
    assert hi == (1.0, 6.0, 3.5, 4.0)
    assert lo == (0.5, -2.0, -1.0, 2.0)


def test_clamp_bounds():
    out = vec4.clamp(A, -1.0, 2.0)
    assert all(-1.0 <= c <= 2.0 for c in out)
    assert out[0] == 1.0


@pytest.mark.parametrize("t, expected", [(0.0, A), (-3.0, A), (1.0, B), (7.0, B)])
def test_lerp_endpoints_and_clamping(t, expected):
    assert vec4.lerp(A, B, t) == pytest.approx(expected, abs=1e-9)


def test_broadcast_and_eq():
    v = vec4.broadcast(2.5)
    assert v == (2.5, 2.5, 2.5, 2.5)
    assert vec4.eq(v, 2.5)
    assert not vec4.eq(A, 1.0)
    assert vec4.eq_all(v)
    assert not vec4.eq_all(A)


def test_eps_comparisons():
    near = vec4.adds(vec4.broadcast(1.0), vec4.FLT_EPSILON / 2)
    assert vec4.eq_eps(near, 1.0)
    assert not vec4.eq(near, 1.0)
    assert vec4.eqv_eps(near, vec4.one())
    assert not vec4.eqv(near, vec4.one())
    assert vec4.eqv(A, tuple(A))


def test_max_min_value():
    assert vec4.max_value(A) == 4.0
    assert vec4.min_value(A) == -2.0
    assert vec4.max_value(B) == 6.0


def test_nan_inf_validity():
    assert vec4.isnan((0.0, 0.0, 0.0, math.nan))
    assert vec4.isinf((0.0, math.inf, 0.0, 0.0))
    assert vec4.isvalid(A)
    assert not vec4.isvalid((math.nan, 0.0, 0.0, 0.0))


def test_sign():
    assert vec4.sign((5.0, -0.1, 0.0, math.nan)) == (1.0, -1.0, 0.0, 0.0)


def test_sqrt_round_trip():
    v = (4.0, 9.0, 0.25, 0.0)
    assert vec4.sqrt(v) == (2.0, 3.0, 0.5, 0.0)
    assert vec4.mul(vec4.sqrt(v), vec4.sqrt(v)) == pytest.approx(v, abs=1e-9)
    negative = vec4.sqrt((-1.0, 0.0, 0.0, 0.0))
    assert vec4.isnan(negative)
    assert negative[1:] == (0.0, 0.0, 0.0)


def test_plane_normalize_unit_normal():
    plane = (3.0, 0.0, 4.0, 10.0)
    out = vec4.plane_normalize(plane)
    assert math.isclose(math.sqrt(out[0] ** 2 + out[1] ** 2 + out[2] ** 2), 1.0)
    assert math.isclose(out[3] / out[0], plane[3] / plane[0])