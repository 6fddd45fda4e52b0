import math
import struct

import pytest

from libcshim.log2f import log2f


def _to_float32(value):
    return struct.unpack("<f", struct.pack("<f", value))[0]


def test_one_gives_zero():
    assert log2f(1.0) == 0.0


@pytest.mark.parametrize("k", [-126, -20, -3, -1, 1, 2, 3, 10, 64, 127])
def test_powers_of_two_are_exact(k):
    assert log2f(2.0**k) == float(k)


def test_smallest_subnormal():
    assert log2f(2.0**-149) == -149.0


@pytest.mark.parametrize(
    "x", [0.1, 0.5, 0.75, 0.99, 1.01, 1.5, 3.0, 10.0, 1000.0, 123456.0, 3e38]
)
def test_close_to_reference(x):
    xf = _to_float32(x)
    assert log2f(x) == pytest.approx(math.log2(xf), rel=2e-7, abs=2e-7)


def test_subnormal_close_to_reference():
    x = 3 * 2.0**-140
    assert log2f(x) == pytest.approx(math.log2(x), rel=1e-7)


@pytest.mark.parametrize("x", [0.3, 2.5, 7.0, 1e-30, 1e30])
def test_result_is_single_precision(x):
    result = log2f(x)
    assert _to_float32(result) == result
    assert result == pytest.approx(math.log2(_to_float32(x)), rel=2e-7)


def test_monotonic():
    values = [0.01 * n for n in range(1, 500)]
    results = [log2f(v) for v in values]
    assert all(a <= b for a, b in zip(results, results[1:]))


def test_infinity():
    assert log2f(math.inf) == math.inf


def test_value_beyond_single_range_rounds_to_infinity():
    assert log2f(1e300) == math.inf


def test_nan():
    assert math.isnan(log2f(math.nan))


@pytest.mark.parametrize("x", [0.0, -0.0])
def test_zero_raises(x):
    with pytest.raises(ValueError):
        log2f(x)


@pytest.mark.parametrize("x", [-1.0, -1e-40, -math.inf])
def test_negative_raises(x):
    with pytest.raises(ValueError):
        log2f(x)