import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from minilibc.exponential import exp, expm1, expo2


def test_exp_of_zero_is_one():
    assert exp(0.0) == 1.0
    assert exp(-0.0) == 1.0


def test_exp_of_one_is_e():
    assert math.isclose(exp(1.0), math.e, rel_tol=1e-15, abs_tol=1e-320)


def test_exp_special_values():
    assert exp(math.inf) == math.inf
    assert exp(-math.inf) == 0.0
    assert math.isnan(exp(math.nan))


def test_exp_overflow_and_underflow():
    assert exp(1000.0) == math.inf
    assert exp(710.0) == math.inf
    assert exp(-1000.0) == 0.0


@pytest.mark.parametrize("x", [-745.0, -740.0, -708.5, 708.0, 709.7, 512.5, -512.5])
def test_exp_special_case_region(x):
    assert math.isclose(exp(x), math.exp(x), rel_tol=1e-15, abs_tol=1e-320)


@given(st.floats(min_value=-745.0, max_value=709.7))
def test_exp_matches_reference(x):
    assert math.isclose(exp(x), math.exp(x), rel_tol=1e-15, abs_tol=1e-320)


@given(st.floats(min_value=-300.0, max_value=300.0))
def test_exp_is_multiplicative_inverse(x):
    assert math.isclose(exp(x) * exp(-x), 1.0, rel_tol=1e-14)


@given(st.floats(min_value=-1e-17, max_value=1e-17))
def test_exp_tiny_argument(x):
    assert exp(x) == 1.0 + x


def test_expm1_special_values():
    assert expm1(math.inf) == math.inf
    assert expm1(-math.inf) == -1.0
    assert math.isnan(expm1(math.nan))
    assert expm1(800.0) == math.inf
    assert expm1(-100.0) == -1.0


def test_expm1_preserves_signed_zero():
    assert expm1(0.0) == 0.0
    assert math.copysign(1.0, expm1(-0.0)) == -1.0


def test_expm1_tiny_returns_argument():
    assert expm1(1e-20) == 1e-20
    assert expm1(-1e-20) == -1e-20


@pytest.mark.parametrize("x", [0.3, -0.3, 0.6, -0.6, 1.0, -1.0, 5.0, 20.0, 50.0, -30.0, 700.0, 709.7])
def test_expm1_known_points(x):
    assert math.isclose(expm1(x), math.expm1(x), rel_tol=1e-15, abs_tol=1e-320)


@given(st.floats(min_value=-50.0, max_value=709.7))
def test_expm1_matches_reference(x):
    assert math.isclose(expm1(x), math.expm1(x), rel_tol=2e-15, abs_tol=1e-320)


@given(st.floats(min_value=709.8, max_value=710.4))
def test_expo2_is_half_exp(x):
    half = math.exp(x / 2)
    assert math.isclose(expo2(x, 1.0), half * (half / 2), rel_tol=1e-13)


@given(st.floats(min_value=709.8, max_value=710.4))
def test_expo2_sign_is_applied(x):
    assert expo2(x, -1.0) == -expo2(x, 1.0)


def test_expo2_overflows_far_out():
    assert expo2(712.0, 1.0) == math.inf
    assert expo2(712.0, -1.0) == -math.inf