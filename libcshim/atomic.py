"""Atomic 32-bit integer operations and bit-scan helpers.

:class:`AtomicInt` holds a signed 32-bit value guarded by a lock, so every
operation is indivisible across threads. Arithmetic wraps modulo 2**32, as a
C ``int`` updated through an unsigned sum does.
"""

from __future__ import annotations

import threading

__all__ = ["AtomicInt", "ctz32", "ctz64", "clz64"]

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


class AtomicInt:
    """A signed 32-bit integer with atomic read-modify-write operations."""

    __slots__ = ("_value", "_lock")

    def __init__(self, value: int = 0) -> None:
        self._value = _to_int32(value)
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"AtomicInt({self.load()})"

    def load(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        """Replace the value."""
        with self._lock:
            self._value = _to_int32(value)

    def cas(self, expected: int, new: int) -> int:
        """Set the value to ``new`` if it equals ``expected``; return the old value."""
        expected = _to_int32(expected)
        with self._lock:
            old = self._value
            if old == expected:
                self._value = _to_int32(new)
            return old

    def swap(self, value: int) -> int:
        """Replace the value and return the previous one."""
        with self._lock:
            old = self._value
            self._value = _to_int32(value)
            return old

    def fetch_add(self, value: int) -> int:
        """Add ``value`` with wrap-around; return the previous value."""
        with self._lock:
            old = self._value
            self._value = _to_int32(old + value)
            return old

    def fetch_and(self, value: int) -> int:
        """Bitwise-and with ``value``; return the previous value."""
        with self._lock:
            old = self._value
            self._value = _to_int32(old & value)
            return old

    def fetch_or(self, value: int) -> int:
        """Bitwise-or with ``value``; return the previous value."""
        with self._lock:
            old = self._value
            self._value = _to_int32(old | value)
            return old

    def inc(self) -> None:
        """Add one."""
        self.fetch_add(1)

    def dec(self) -> None:
        """Subtract one."""
        self.fetch_add(-1)


_DEBRUIJN32 = (
    0, 1, 23, 2, 29, 24, 19, 3, 30, 27, 25, 11, 20, 8, 4, 13,
    31, 22, 28, 18, 26, 10, 7, 12, 21, 17, 9, 6, 16, 5, 15, 14,
)

_DEBRUIJN64 = (
    0, 1, 2, 53, 3, 7, 54, 27, 4, 38, 41, 8, 34, 55, 48, 28,
    62, 5, 39, 46, 44, 42, 22, 9, 24, 35, 59, 56, 49, 18, 29, 11,
    63, 52, 6, 26, 37, 40, 33, 47, 61, 45, 43, 21, 23, 58, 17, 10,
    51, 25, 36, 32, 60, 20, 57, 16, 50, 31, 19, 15, 30, 14, 13, 12,
)


def ctz32(x: int) -> int:
    """Count trailing zero bits of a 32-bit value; zero maps to 0."""
    x &= _MASK32
    lowest = x & (-x & _MASK32)
    return _DEBRUIJN32[((lowest * 0x076BE629) & _MASK32) >> 27]


def ctz64(x: int) -> int:
    """Count trailing zero bits of a 64-bit value; zero maps to 0."""
    x &= _MASK64
    lowest = x & (-x & _MASK64)
    return _DEBRUIJN64[((lowest * 0x022FDD63CC95386D) & _MASK64) >> 58]


def clz64(x: int) -> int:
    """Count leading zero bits of a 64-bit value; zero maps to 63."""
    x &= _MASK64
    if x >> 32:
        y, r = x >> 32, 0
    else:
        y, r = x & _MASK32, 32
    for shift in (16, 8, 4, 2):
        if y >> shift:
            y >>= shift
        else:
            r |= shift
    return r | (0 if y >> 1 else 1)