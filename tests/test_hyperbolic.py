import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from minilibc.hyperbolic import acosh, asinh, atanh, cosh


def test_cosh_of_zero_is_one():
    assert cosh(0.0) == 1.0
    assert cosh(-0.0) == 1.0


def test_cosh_overflow_and_specials():
    assert cosh(1000.0) == math.inf
    assert cosh(-math.inf) == math.inf
    assert math.isnan(cosh(math.nan))


@given(st.floats(min_value=-700.0, max_value=700.0))
def test_cosh_matches_reference(x):
    assert cosh(x) == pytest.approx(math.cosh(x), rel=1e-14)


@given(st.floats(min_value=-700.0, max_value=700.0))
def test_cosh_is_even(x):
    assert cosh(x) == cosh(-x)


def test_acosh_of_one_is_zero():
    assert acosh(1.0) == 0.0


@pytest.mark.parametrize("x", [0.5, 0.0, -5.0, -math.inf, math.nan])
def test_acosh_domain(x):
    result = acosh(x)
    assert repr(result) == "nan"


def test_acosh_infinity():
    assert acosh(math.inf) == math.inf


@given(st.floats(min_value=1.0, max_value=1e300))
def test_acosh_matches_reference(x):
    assert acosh(x) == pytest.approx(math.acosh(x), rel=1e-14, abs=1e-300)


def test_asinh_keeps_signed_zero():
    assert math.copysign(1.0, asinh(-0.0)) == -1.0
    assert math.copysign(1.0, asinh(0.0)) == 1.0


def test_asinh_infinities():
    assert asinh(math.inf) == math.inf
    assert asinh(-math.inf) == -math.inf


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_asinh_matches_reference(x):
    assert asinh(x) == pytest.approx(math.asinh(x), rel=1e-14, abs=1e-300)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_asinh_is_odd(x):
    assert asinh(-x) == -asinh(x)


def test_atanh_poles():
    assert atanh(1.0) == math.inf
    assert atanh(-1.0) == -math.inf


@pytest.mark.parametrize("x", [2.0, -1.5, math.inf, math.nan])
def test_atanh_domain(x):
    result = atanh(x)
    assert repr(result) == "nan"


def test_atanh_tiny_is_identity():
    assert atanh(1e-300) == 1e-300


@given(st.floats(min_value=-0.999999, max_value=0.999999))
def test_atanh_matches_reference(x):
    assert atanh(x) == pytest.approx(math.atanh(x), rel=1e-13, abs=1e-300)