"""Conversion of raw system-call results and wall-clock queries."""

from __future__ import annotations

import os
import time
from typing import NamedTuple

__all__ = ["syscall_ret", "timespec_get", "Timespec", "TIME_UTC"]

TIME_UTC = 1

_MAX_ERRNO = 4095
_NS_PER_SECOND = 1_000_000_000


class Timespec(NamedTuple):
    """A point in time as whole seconds and nanoseconds."""

    tv_sec: int
    tv_nsec: int


def syscall_ret(result: int) -> int:
    """Return ``result``, or raise :class:`OSError` if it encodes an error.

    Values from -4095 to -1 are negated error numbers.
    """
    if -_MAX_ERRNO <= result < 0:
        code = -result
        raise OSError(code, os.strerror(code))
    return result


def timespec_get(base: int = TIME_UTC) -> Timespec:
    """Return the current calendar time for ``base``.

    Only :data:`TIME_UTC` is supported; any other base raises
    :class:`ValueError`.
    """
    if base != TIME_UTC:
        raise ValueError(f"unsupported time base {base!r}")
    sec, nsec = divmod(time.time_ns(), _NS_PER_SECOND)
    return Timespec(sec, nsec)