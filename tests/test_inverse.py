import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from minilibc.inverse import acos, asin, atan

unit = st.floats(min_value=-1.0, max_value=1.0, allow_nan=False)
finite = st.floats(allow_nan=False, allow_infinity=False)


def test_acos_endpoints():
    assert acos(1.0) == 0.0
    assert acos(-1.0) == math.pi


def test_acos_zero_is_half_pi():
    assert acos(0.0) == math.pi / 2


def test_asin_endpoints():
    assert asin(1.0) == math.pi / 2
    assert asin(-1.0) == -math.pi / 2


def test_atan_infinities():
    assert atan(math.inf) == math.pi / 2
    assert atan(-math.inf) == -math.pi / 2


def test_atan_one_is_quarter_pi():
    assert atan(1.0) == math.pi / 4


@pytest.mark.parametrize("value", [1.5, -2.0, math.inf, -math.inf, math.nan])
def test_acos_outside_domain_is_nan(value):
    result = acos(value)
    assert repr(result) == "nan"


@pytest.mark.parametrize("value", [1.5, -2.0, math.inf, -math.inf, math.nan])
def test_asin_outside_domain_is_nan(value):
    result = asin(value)
    assert repr(result) == "nan"


def test_atan_nan_is_nan():
    assert math.isnan(atan(math.nan))


@pytest.mark.parametrize("value", [1e-20, -1e-20, 1e-310, 0.0, -0.0])
def test_tiny_arguments_pass_through(value):
    assert asin(value) == value
    assert atan(value) == value
    assert math.copysign(1.0, atan(value)) == math.copysign(1.0, value)


@given(unit)
def test_acos_matches_reference(x):
    assert math.isclose(acos(x), math.acos(x), rel_tol=1e-15, abs_tol=1e-300)


@given(unit)
def test_asin_matches_reference(x):
    assert math.isclose(asin(x), math.asin(x), rel_tol=1e-15, abs_tol=1e-300)


@given(finite)
def test_atan_matches_reference(x):
    assert math.isclose(atan(x), math.atan(x), rel_tol=1e-15, abs_tol=1e-300)


@given(unit)
def test_asin_is_odd(x):
    assert asin(-x) == -asin(x)


@given(finite)
def test_atan_is_odd(x):
    assert atan(-x) == -atan(x)


@given(unit)
def test_acos_range(x):
    assert 0.0 <= acos(x) <= math.pi


@given(unit)
def test_asin_plus_acos_is_half_pi(x):
    assert math.isclose(asin(x) + acos(x), math.pi / 2, rel_tol=1e-14)


@given(st.floats(min_value=-1.5, max_value=1.5, allow_nan=False))
def test_atan_inverts_tan(x):
    assert math.isclose(atan(math.tan(x)), x, rel_tol=1e-14, abs_tol=1e-300)