"""Single-precision natural logarithm, table driven.

The argument is reduced as ``x = 2**k * z`` with ``z`` in ``[OFF, 2*OFF]``.
That interval is split into 16 subintervals, each with a precomputed ``1/c``
and ``log(c)``. A short polynomial gives ``log1p(z/c - 1)``. The work is done
in double precision and the result is rounded to single precision.
"""

from __future__ import annotations

import math
import struct

__all__ = ["logf"]

_MASK32 = 0xFFFFFFFF
_TABLE_BITS = 4
_N = 1 << _TABLE_BITS
_OFF = 0x3F330000


def _h(text: str) -> float:
    return float.fromhex(text)


# (invc, logc) per subinterval.
_TAB = tuple(
    (_h(a), _h(b))
    for a, b in (
        ("0x1.661ec79f8f3bep+0", "-0x1.57bf7808caadep-2"),
        ("0x1.571ed4aaf883dp+0", "-0x1.2bef0a7c06ddbp-2"),
        ("0x1.49539f0f010bp+0", "-0x1.01eae7f513a67p-2"),
        ("0x1.3c995b0b80385p+0", "-0x1.b31d8a68224e9p-3"),
        ("0x1.30d190c8864a5p+0", "-0x1.6574f0ac07758p-3"),
        ("0x1.25e227b0b8eap+0", "-0x1.1aa2bc79c81p-3"),
        ("0x1.1bb4a4a1a343fp+0", "-0x1.a4e76ce8c0e5ep-4"),
        ("0x1.12358f08ae5bap+0", "-0x1.1973c5a611cccp-4"),
        ("0x1.0953f419900a7p+0", "-0x1.252f438e10c1ep-5"),
        ("0x1p+0", "0x0p+0"),
        ("0x1.e608cfd9a47acp-1", "0x1.aa5aa5df25984p-5"),
        ("0x1.ca4b31f026aap-1", "0x1.c5e53aa362eb4p-4"),
        ("0x1.b2036576afce6p-1", "0x1.526e57720db08p-3"),
        ("0x1.9c2d163a1aa2dp-1", "0x1.bc2860d22477p-3"),
        ("0x1.886e6037841edp-1", "0x1.1058bc8a07ee1p-2"),
        ("0x1.767dcf5534862p-1", "0x1.4043057b6ee09p-2"),
    )
)

_LN2 = _h("0x1.62e42fefa39efp-1")

# Coefficients of r**2 and up; the first-order coefficient is 1.
_POLY = tuple(
    _h(v)
    for v in (
        "-0x1.00ea348b88334p-2",
        "0x1.5575b0be00b6ap-2",
        "-0x1.ffffef20a4123p-2",
    )
)


def _to_float32(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _asuint(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", _to_float32(value)))[0]


def _asfloat(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & _MASK32))[0]


def logf(x: float) -> float:
    """Return the natural logarithm of ``x`` computed in single precision.

    ``x`` is first rounded to single precision. ``logf(inf)`` is ``inf`` and
    NaN gives NaN. Zero and negative arguments raise :class:`ValueError`.
    """
    x = _to_float32(float(x))
    ix = _asuint(x)
    if ix == 0x3F800000:
        return 0.0
    if (ix - 0x00800000) & _MASK32 >= 0x7F800000 - 0x00800000:
        # Subnormal, zero, negative, infinite or NaN.
        if (ix * 2) & _MASK32 == 0:
            raise ValueError("math domain error: logf of zero")
        if ix == 0x7F800000:
            return x
        if math.isnan(x):
            return x
        if (ix & 0x80000000) or (ix * 2) & _MASK32 >= 0xFF000000:
            raise ValueError("math domain error: logf of a negative number")
        ix = (_asuint(x * 2.0**23) - (23 << 23)) & _MASK32

    tmp = (ix - _OFF) & _MASK32
    i = (tmp >> (23 - _TABLE_BITS)) % _N
    k = (tmp - (1 << 32) if tmp & 0x80000000 else tmp) >> 23
    iz = (ix - (tmp & (0x1FF << 23))) & _MASK32
    invc, logc = _TAB[i]
    z = _asfloat(iz)

    r = z * invc - 1.0
    y0 = logc + float(k) * _LN2

    a = _POLY
    r2 = r * r
    y = a[1] * r + a[2]
    y = a[0] * r2 + y
    y = y * r2 + (y0 + r)
    return _to_float32(y)