"""Single-precision base-2 logarithm, table driven.

The argument is reduced as ``x = 2**k * z`` with ``z`` in ``[OFF, 2*OFF]``.
That interval is split into 16 subintervals, each with a precomputed
``1/c`` and ``log2(c)``. A short polynomial then gives ``log1p(z/c - 1)/ln2``.
The work is done in double precision and the result is rounded to single
precision.
"""

from __future__ import annotations

import math
import struct

__all__ = ["log2f"]

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
        ("0x1.661ec79f8f3bep+0", "-0x1.efec65b963019p-2"),
        ("0x1.571ed4aaf883dp+0", "-0x1.b0b6832d4fca4p-2"),
        ("0x1.49539f0f010bp+0", "-0x1.7418b0a1fb77bp-2"),
        ("0x1.3c995b0b80385p+0", "-0x1.39de91a6dcf7bp-2"),
        ("0x1.30d190c8864a5p+0", "-0x1.01d9bf3f2b631p-2"),
        ("0x1.25e227b0b8eap+0", "-0x1.97c1d1b3b7afp-3"),
        ("0x1.1bb4a4a1a343fp+0", "-0x1.2f9e393af3c9fp-3"),
        ("0x1.12358f08ae5bap+0", "-0x1.960cbbf788d5cp-4"),
        ("0x1.0953f419900a7p+0", "-0x1.a6f9db6475fcep-5"),
        ("0x1p+0", "0x0p+0"),
        ("0x1.e608cfd9a47acp-1", "0x1.338ca9f24f53dp-4"),
        ("0x1.ca4b31f026aap-1", "0x1.476a9543891bap-3"),
        ("0x1.b2036576afce6p-1", "0x1.e840b4ac4e4d2p-3"),
        ("0x1.9c2d163a1aa2dp-1", "0x1.40645f0c6651cp-2"),
        ("0x1.886e6037841edp-1", "0x1.88e9c2c1b9ff8p-2"),
        ("0x1.767dcf5534862p-1", "0x1.ce0a44eb17bccp-2"),
    )
)

_POLY = tuple(
    _h(v)
    for v in (
        "-0x1.712b6f70a7e4dp-2",
        "0x1.ecabf496832ep-2",
        "-0x1.715479ffae3dep-1",
        "0x1.715475f35c8b8p0",
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


def log2f(x: float) -> float:
    """Return the base-2 logarithm of ``x`` computed in single precision.

    ``x`` is first rounded to single precision. ``log2f(inf)`` is ``inf`` and
    NaN gives NaN. Zero and negative arguments raise :class:`ValueError`.
    """
    x = _to_float32(float(x))
    ix = _asuint(x)
    if ix == 0x3F800000:
        return 0.0
    if (ix - 0x00800000) & _MASK32 >= 0x7F800000 - 0x00800000:
        # Subnormal, zero, negative, infinite or NaN.
        if (ix * 2) & _MASK32 == 0:
            raise ValueError("math domain error: log2f of zero")
        if ix == 0x7F800000:
            return x
        if math.isnan(x):
            return x
        if (ix & 0x80000000) or (ix * 2) & _MASK32 >= 0xFF000000:
            raise ValueError("math domain error: log2f of a negative number")
        ix = (_asuint(x * 2.0**23) - (23 << 23)) & _MASK32

    tmp = (ix - _OFF) & _MASK32
    i = (tmp >> (23 - _TABLE_BITS)) % _N
    top = tmp & 0xFF800000
    iz = (ix - top) & _MASK32
    k = (tmp - (1 << 32) if tmp & 0x80000000 else tmp) >> 23
    invc, logc = _TAB[i]
    z = _asfloat(iz)

    r = z * invc - 1.0
    y0 = logc + float(k)

    a = _POLY
    r2 = r * r
    y = a[1] * r + a[2]
    y = a[0] * r2 + y
    p = a[3] * r + y0
    y = y * r2 + p
    return _to_float32(y)