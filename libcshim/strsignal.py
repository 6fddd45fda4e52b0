"""Descriptions of signal numbers.

Signal numbers follow the usual Linux numbering. The real-time signals 32 to
64 are described as ``RT32`` to ``RT64``. Any other number, zero included, is
an "Unknown signal".
"""

from __future__ import annotations

import operator

__all__ = ["strsignal", "NSIG"]

NSIG = 65

_UNKNOWN = "Unknown signal"

_NAMES = (
    _UNKNOWN,
    "Hangup",
    "Interrupt",
    "Quit",
    "Illegal instruction",
    "Trace/breakpoint trap",
    "Aborted",
    "Bus error",
    "Arithmetic exception",
    "Killed",
    "User defined signal 1",
    "Segmentation fault",
    "User defined signal 2",
    "Broken pipe",
    "Alarm clock",
    "Terminated",
    "Stack fault",
    "Child process status",
    "Continued",
    "Stopped (signal)",
    "Stopped",
    "Stopped (tty input)",
    "Stopped (tty output)",
    "Urgent I/O condition",
    "CPU time limit exceeded",
    "File size limit exceeded",
    "Virtual timer expired",
    "Profiling timer expired",
    "Window changed",
    "I/O possible",
    "Power failure",
    "Bad system call",
) + tuple(f"RT{n}" for n in range(32, NSIG))


def strsignal(signum: int) -> str:
    """Return a short description of signal number ``signum``."""
    signum = operator.index(signum)
    if not 1 <= signum < NSIG:
        return _UNKNOWN
    return _NAMES[signum]