import math

import pytest

from core2kit import vec3


def test_add_then_sub_round_trip():
    a = (1.5, -2.0, 3.25)
    b = (0.5, 4.0, -1.0)
    assert vec3.sub(vec3.add(a, b), b) == a


def test_negate_is_scale_by_minus_one():
    v = (1.0, -2.0, 3.0)
    assert vec3.negate(v) == vec3.scale(v, -1.0)


def test_cross_is_orthogonal_to_inputs():
    a = (1.0, 2.0, 3.0)
    b = (-4.0, 0.5, 2.0)
    c = vec3.cross(a, b)
    assert vec3.dot(c, a) == pytest.approx(0.0)
    assert vec3.dot(c, b) == pytest.approx(0.0)


def test_cross_of_unit_axes():
    assert vec3.cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == (0.0, 0.0, 1.0)


def test_normalize_has_unit_length():
    v = vec3.normalize((3.0, -7.0, 2.5))
    assert vec3.norm(v) == pytest.approx(1.0)


def test_normalize_zero_stays_zero():
    assert vec3.normalize((0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)


def test_broadcast_and_eq():
    v = vec3.broadcast(2.5)
    assert vec3.eq(v, 2.5)
    assert vec3.eq_all(v)
    assert not vec3.eq((2.5, 2.5, 2.4), 2.5)


def test_eq_eps_tolerates_tiny_difference():
    v = (1.0, 1.0 + vec3.FLT_EPSILON / 2, 1.0)
    assert vec3.eq_eps(v, 1.0)
    assert not vec3.eq(v, 1.0)


def test_eqv_and_eqv_eps():
    a = (1.0, 2.0, 3.0)
    b = (1.0, 2.0, 3.0 + vec3.FLT_EPSILON / 4)
    assert vec3.eqv(a, a)
    assert not vec3.eqv(a, b)
    assert vec3.eqv_eps(a, b)
    assert not vec3.eqv_eps(a, (1.0, 2.0, 3.1))


def test_max_and_min():
    v = (1.0, 5.0, -3.0)
    assert vec3.max_value(v) == 5.0
    assert vec3.min_value(v) == -3.0


def test_nan_inf_validity():
    assert vec3.isnan((0.0, math.nan, 1.0))
    assert not vec3.isnan((0.0, 1.0, 2.0))
    assert vec3.isinf((math.inf, 0.0, 0.0))
    assert not vec3.isvalid((math.inf, 0.0, 0.0))
    assert vec3.isvalid((1.0, 2.0, 3.0))


def test_sign_components():
    assert vec3.sign((-2.0, 0.0, 3.0)) == (-1.0, 0.0, 1.0)
    assert vec3.sign((math.nan, 0.0, 0.0))[0] == 0.0


def test_sqrt_inverts_square():
    v = (1.5, 2.0, 7.0)
    assert vec3.sqrt(vec3.mulv(v, v)) == pytest.approx(v)


def test_sqrt_negative_is_nan():
    result = vec3.sqrt((-1.0, 0.0, 4.0))
    assert vec3.isnan(result)
    assert result[1:] == (0.0, 2.0)