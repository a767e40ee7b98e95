import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from minilibc.logarithm import log1p, log2, log10

positive = st.floats(min_value=5e-324, max_value=1.7e308, allow_nan=False)


@pytest.mark.parametrize("fn", [log2, log10])
def test_one_is_exact_zero(fn):
    assert fn(1.0) == 0.0
    assert math.copysign(1.0, fn(1.0)) == 1.0


@pytest.mark.parametrize("fn", [log2, log10])
@pytest.mark.parametrize("zero", [0.0, -0.0])
def test_zero_gives_negative_infinity(fn, zero):
    assert fn(zero) == -math.inf


@pytest.mark.parametrize("fn", [log2, log10])
@pytest.mark.parametrize("value", [-1.0, -1e-300, -math.inf])
def test_negative_gives_nan(fn, value):
    result = fn(value)
    assert repr(result) == "nan"


@pytest.mark.parametrize("fn", [log2, log10, log1p])
def test_infinity_and_nan_pass_through(fn):
    assert fn(math.inf) == math.inf
    assert math.isnan(fn(math.nan))


def test_log1p_special_values():
    assert log1p(-1.0) == -math.inf
    assert math.isnan(log1p(-2.0))
    assert math.isnan(log1p(-math.inf))
    assert log1p(0.0) == 0.0


def test_log1p_keeps_negative_zero():
    result = log1p(-0.0)
    assert result == 0.0
    assert math.copysign(1.0, result) == -1.0


def test_log1p_tiny_argument_returned_unchanged():
    assert log1p(1e-300) == 1e-300
    assert log1p(-1e-20) == -1e-20


@pytest.mark.parametrize("k", [-1074, -1060, -1022, -3, -1, 1, 2, 10, 52, 1023])
def test_log2_of_powers_of_two(k):
    assert math.isclose(log2(math.ldexp(1.0, k)), float(k), rel_tol=1e-15)


@pytest.mark.parametrize("k", range(-20, 21))
def test_log10_of_powers_of_ten(k):
    assert math.isclose(log10(10.0**k), float(k), rel_tol=1e-15, abs_tol=1e-15)


def test_log10_subnormal():
    assert math.isclose(log10(5e-324), math.log10(5e-324), rel_tol=1e-15)


@given(positive)
def test_log2_matches_reference(x):
    assert math.isclose(log2(x), math.log2(x), rel_tol=1e-15, abs_tol=1e-300)


@given(positive)
def test_log10_matches_reference(x):
    assert math.isclose(log10(x), math.log10(x), rel_tol=1e-15, abs_tol=1e-300)


@given(st.floats(min_value=-0.999999, max_value=1e300, allow_nan=False))
def test_log1p_matches_reference(x):
    assert math.isclose(log1p(x), math.log1p(x), rel_tol=1e-15, abs_tol=1e-300)


@given(st.floats(min_value=0.9, max_value=1.1))
def test_log2_near_one_matches_reference(x):
    assert math.isclose(log2(x), math.log2(x), rel_tol=1e-15, abs_tol=1e-300)


@given(st.floats(min_value=1e-100, max_value=1e100))
def test_log2_is_monotonic(x):
    y = math.nextafter(x, math.inf)
    assert log2(x) <= log2(y)


@given(st.floats(min_value=1e-150, max_value=1e150), st.floats(min_value=1e-150, max_value=1e150))
def test_log10_product_rule(a, b):
    assert math.isclose(log10(a * b), log10(a) + log10(b), rel_tol=1e-13, abs_tol=1e-13)


@given(st.floats(min_value=-0.5, max_value=0.5))
def test_log1p_sign_matches_argument(x):
    result = log1p(x)
    assert (result > 0) == (x > 0)
    assert (result < 0) == (x < 0)