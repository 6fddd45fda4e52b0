import math
import struct

import pytest

from libcshim.logf import logf


def _f32(value):
    return struct.unpack("<f", struct.pack("<f", value))[0]


def test_one_gives_zero():
    assert logf(1.0) == 0.0


def test_two_gives_single_precision_ln2():
    assert logf(2.0) == _f32(math.log(2.0))


@pytest.mark.parametrize("k", [-100, -5, -1, 1, 4, 50, 127])
def test_powers_of_two(k):
    assert logf(2.0**k) == pytest.approx(k * math.log(2.0), rel=2e-7)


@pytest.mark.parametrize(
    "x", [0.1, 0.5, 0.75, 0.99, 1.01, 1.5, math.e, 10.0, 1000.0, 3e38]
)
def test_close_to_reference(x):
    xf = _f32(x)
    assert logf(x) == pytest.approx(math.log(xf), rel=2e-7, abs=2e-7)


def test_subnormal_close_to_reference():
    x = 2.0**-149
    assert logf(x) == pytest.approx(math.log(x), rel=1e-7)


@pytest.mark.parametrize("x", [0.3, 2.5, 7.0, 1e-30, 1e30])
def test_result_is_single_precision(x):
    result = logf(x)
    assert _f32(result) == result


def test_monotonic():
    values = [0.01 * n for n in range(1, 500)]
    results = [logf(v) for v in values]
    assert all(a <= b for a, b in zip(results, results[1:]))


def test_sign_follows_side_of_one():
    assert logf(0.9) < 0.0 < logf(1.1)


def test_infinity():
    assert logf(math.inf) == math.inf


def test_nan():
    assert math.isnan(logf(math.nan))


@pytest.mark.parametrize("x", [0.0, -0.0])
def test_zero_raises(x):
    with pytest.raises(ValueError):
        logf(x)


@pytest.mark.parametrize("x", [-2.0, -1e-40, -math.inf])
def test_negative_raises(x):
    with pytest.raises(ValueError):
        logf(x)