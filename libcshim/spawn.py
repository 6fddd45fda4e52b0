"""Pipes with creation flags and spawning of child processes."""

from __future__ import annotations

import errno
import os
import struct
from collections.abc import Mapping, Sequence

__all__ = ["pipe2", "posix_spawn"]

_O_CLOEXEC = getattr(os, "O_CLOEXEC", 0)
_O_NONBLOCK = getattr(os, "O_NONBLOCK", 0)
_ERRNO = struct.Struct("i")


def pipe2(flags: int = 0) -> tuple[int, int]:
    """Create a pipe and return its read and write descriptors.

    ``flags`` may combine ``os.O_CLOEXEC`` and ``os.O_NONBLOCK``; without
    ``O_CLOEXEC`` both ends are inherited by executed programs.
    """
    if flags & ~(_O_CLOEXEC | _O_NONBLOCK):
        raise OSError(errno.EINVAL, os.strerror(errno.EINVAL))
    if hasattr(os, "pipe2"):
        return os.pipe2(flags)
    fds = os.pipe()
    for fd in fds:
        os.set_inheritable(fd, not flags & _O_CLOEXEC)
        if flags & _O_NONBLOCK:
            os.set_blocking(fd, False)
    return fds


def _run_child(
    error_fd: int, path: str, argv: list[str], env: Mapping[str, str]
) -> None:
    code = errno.EINVAL
    try:
        os.execve(path, argv, env)
    except OSError as exc:
        code = exc.errno or errno.EINVAL
    except BaseException:
        code = errno.EINVAL
    try:
        data = _ERRNO.pack(code)
        while True:
            try:
                os.write(error_fd, data)
                break
            except InterruptedError:
                continue
    finally:
        os._exit(127)


def posix_spawn(
    path: str | os.PathLike[str],
    argv: Sequence[str],
    env: Mapping[str, str] | None = None,
) -> int:
    """Start the program at ``path`` with ``argv`` and ``env``; return its pid.

    ``env`` defaults to the current environment. If the program cannot be
    executed, the child is reaped and :class:`OSError` is raised with the
    error the child met.
    """
    path = os.fspath(path)
    args = list(argv)
    environment = dict(os.environ if env is None else env)

    read_fd, write_fd = pipe2(_O_CLOEXEC)
    try:
        pid = os.fork()
    except OSError:
        os.close(read_fd)
        os.close(write_fd)
        raise

    if pid == 0:
        os.close(read_fd)
        _run_child(write_fd, path, args, environment)

    os.close(write_fd)
    try:
        data = b""
        while len(data) < _ERRNO.size:
            chunk = os.read(read_fd, _ERRNO.size - len(data))
            if not chunk:
                break
            data += chunk
    finally:
        os.close(read_fd)

    if len(data) == _ERRNO.size:
        os.waitpid(pid, 0)
        (code,) = _ERRNO.unpack(data)
        raise OSError(code, os.strerror(code), path)
    return pid