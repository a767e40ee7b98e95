import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from minilibc.trig import cos, kernel_cos, kernel_sin, kernel_tan

PI4 = math.pi / 4
small = st.floats(min_value=-PI4, max_value=PI4, allow_nan=False)
nonzero_small = small.filter(lambda v: abs(v) > 1e-300)


def test_cos_zero_is_one():
    assert cos(0.0) == 1.0
    assert cos(-0.0) == 1.0


def test_cos_tiny_argument_is_one():
    assert cos(1e-10) == 1.0


def test_cos_pi_is_minus_one():
    assert cos(math.pi) == -1.0


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_cos_non_finite_is_nan(value):
    result = cos(value)
    assert repr(result) == "nan"


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_cos_matches_reference(x):
    assert math.isclose(cos(x), math.cos(x), rel_tol=1e-14, abs_tol=1e-15)


@given(st.floats(min_value=1e6, max_value=1e300, allow_nan=False))
def test_cos_large_arguments_match_reference(x):
    assert math.isclose(cos(x), math.cos(x), rel_tol=1e-14, abs_tol=1e-15)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_cos_is_even(x):
    assert cos(-x) == cos(x)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_cos_is_bounded(x):
    assert -1.0 <= cos(x) <= 1.0


@given(small)
def test_kernel_cos_matches_reference(x):
    assert math.isclose(kernel_cos(x, 0.0), math.cos(x), rel_tol=1e-15)


@given(nonzero_small)
def test_kernel_sin_matches_reference(x):
    assert math.isclose(kernel_sin(x, 0.0, 0), math.sin(x), rel_tol=1e-15)


@given(nonzero_small)
def test_kernel_sin_tail_flag_with_zero_tail_agrees(x):
    assert math.isclose(kernel_sin(x, 0.0, 1), kernel_sin(x, 0.0, 0), rel_tol=1e-15)


@given(nonzero_small)
def test_kernel_tan_matches_reference(x):
    assert math.isclose(kernel_tan(x, 0.0, 0), math.tan(x), rel_tol=1e-15)


@given(nonzero_small)
def test_kernel_tan_odd_is_negative_cotangent(x):
    assert math.isclose(kernel_tan(x, 0.0, 1), -1.0 / math.tan(x), rel_tol=1e-15)


@given(st.floats(min_value=0.7, max_value=PI4, allow_nan=False))
def test_kernel_tan_big_branch_is_odd(x):
    assert kernel_tan(-x, 0.0, 0) == -kernel_tan(x, 0.0, 0)