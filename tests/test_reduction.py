import math

import pytest
from hypothesis import given, strategies as st

from minilibc.reduction import _ipio2_table, rem_pio2, rem_pio2_large


def _sin_from_quadrant(n, y):
    return (math.sin(y), math.cos(y), -math.sin(y), -math.cos(y))[n % 4]


def _cos_from_quadrant(n, y):
    return (math.cos(y), -math.sin(y), -math.cos(y), math.sin(y))[n % 4]


SAMPLES = [
    1.0,
    -1.0,
    2.0,
    3.0,
    -3.0,
    4.5,
    5.5,
    -6.0,
    7.0,
    10.0,
    math.pi,
    -math.pi,
    1.5 * math.pi,
    2 * math.pi,
    1e6,
    -1e6,
    1e9,
    1e22,
    -1e22,
    1e300,
    1.7976931348623157e308,
]


def test_table_starts_with_binary_digits_of_two_over_pi():
    table = _ipio2_table()
    assert table[:6] == (0xA2F983, 0x6E4E44, 0x1529FC, 0x2757D1, 0xF534DD, 0xC0DB62)
    assert table[66] == 0x47C419
    assert all(0 <= v < 1 << 24 for v in table)


@pytest.mark.parametrize("x", SAMPLES)
def test_quadrant_reproduces_sine_and_cosine(x):
    n, y0, y1 = rem_pio2(x)
    y = y0 + y1
    assert _sin_from_quadrant(n, y) == pytest.approx(math.sin(x), abs=1e-13)
    assert _cos_from_quadrant(n, y) == pytest.approx(math.cos(x), abs=1e-13)


@pytest.mark.parametrize("x", SAMPLES)
def test_remainder_is_within_a_quarter_turn(x):
    _, y0, y1 = rem_pio2(x)
    assert abs(y0) <= math.pi / 4 * (1 + 1e-12)
    assert abs(y1) <= abs(y0) * 2.0**-51


@pytest.mark.parametrize(
    "x, expected",
    [(math.pi, 2), (-math.pi, -2), (1.5 * math.pi, 3), (2 * math.pi, 4), (2.0, 1), (-2.0, -1)],
)
def test_quotient_for_multiples_of_half_pi(x, expected):
    assert rem_pio2(x)[0] == expected


def test_half_pi_leaves_the_rounding_error_of_pi():
    n, y0, y1 = rem_pio2(math.pi / 2)
    assert n == 1
    assert y0 == pytest.approx(-6.123233995736766e-17, rel=1e-12)


def test_odd_symmetry():
    for x in (3.0, 1e6, 1e22, 1e300):
        n, y0, y1 = rem_pio2(x)
        m, z0, z1 = rem_pio2(-x)
        assert (m, z0, z1) == (-n, -y0, -y1)


@pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
def test_non_finite_gives_nan(x):
    n, y0, y1 = rem_pio2(x)
    assert n == 0
    assert math.isnan(y0) and math.isnan(y1)


finite_beyond_quarter = st.floats(
    min_value=0.8, max_value=1.7976931348623157e308, allow_nan=False
) | st.floats(max_value=-0.8, min_value=-1.7976931348623157e308, allow_nan=False)


@given(finite_beyond_quarter)
def test_reduction_invariants(x):
    n, y0, y1 = rem_pio2(x)
    y = y0 + y1
    assert abs(y0) <= math.pi / 4 * (1 + 1e-12)
    assert _sin_from_quadrant(n, y) == pytest.approx(math.sin(x), abs=1e-12)
    assert _cos_from_quadrant(n, y) == pytest.approx(math.cos(x), abs=1e-12)


PIECES = [8388608.0, 1234.0, 99.0]


def test_large_result_shapes_per_precision():
    lengths = [len(rem_pio2_large(PIECES, 100, prec)[1]) for prec in range(4)]
    assert lengths == [1, 2, 2, 3]


def test_large_precisions_agree():
    results = [rem_pio2_large(PIECES, 100, prec) for prec in range(4)]
    quotients = {n for n, _ in results}
    assert len(quotients) == 1
    assert quotients.pop() in range(8)
    double_sum = sum(results[1][1])
    assert sum(results[2][1]) == double_sum
    assert sum(results[3][1]) == pytest.approx(double_sum, rel=1e-15)
    assert results[0][1][0] == pytest.approx(double_sum, rel=1e-6)
    assert abs(double_sum) <= math.pi / 4 * (1 + 1e-12)


def test_large_matches_full_reduction():
    n, y0, y1 = rem_pio2(1e300)
    assert 0 <= n < 8
    assert _sin_from_quadrant(n, y0 + y1) == pytest.approx(math.sin(1e300), abs=1e-13)


@pytest.mark.parametrize("prec", [-1, 4])
def test_large_rejects_unknown_precision(prec):
    with pytest.raises(ValueError):
        rem_pio2_large(PIECES, 100, prec)


def test_large_rejects_empty_input():
    with pytest.raises(ValueError):
        rem_pio2_large([], 100, 1)


def test_large_rejects_exponent_beyond_table():
    with pytest.raises(ValueError):
        rem_pio2_large(PIECES, 20000, 1)