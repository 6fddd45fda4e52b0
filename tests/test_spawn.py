import os
import sys

import pytest

from libcshim.spawn import pipe2, posix_spawn


def _close(fds):
    for fd in fds:
        os.close(fd)


def test_pipe2_round_trip():
    r, w = pipe2(0)
    try:
        os.write(w, b"ping")
        assert os.read(r, 4) == b"ping"
    finally:
        _close((r, w))


def test_pipe2_plain_is_inheritable_and_blocking():
    fds = pipe2(0)
    try:
        for fd in fds:
            assert os.get_inheritable(fd) is True
            assert os.get_blocking(fd) is True
    finally:
        _close(fds)


def test_pipe2_cloexec():
    fds = pipe2(os.O_CLOEXEC)
    try:
        assert [os.get_inheritable(fd) for fd in fds] == [False, False]
    finally:
        _close(fds)


def test_pipe2_nonblock():
    r, w = pipe2(os.O_NONBLOCK)
    try:
        assert os.get_blocking(r) is False
        assert os.get_blocking(w) is False
        with pytest.raises(BlockingIOError):
            os.read(r, 1)
    finally:
        _close((r, w))


def test_pipe2_bad_flags():
    with pytest.raises(OSError):
        pipe2(1 << 30)


def test_spawn_exit_status():
    pid = posix_spawn(
        sys.executable, [sys.executable, "-c", "import sys; sys.exit(3)"]
    )
    assert pid > 0
    _, status = os.waitpid(pid, 0)
    assert os.waitstatus_to_exitcode(status) == 3


def test_spawn_passes_environment(tmp_path):
    out = tmp_path / "out.txt"
    env = dict(os.environ, SPAWN_PROBE="probe-value")
    code = (
        "import os, sys; "
        "open(sys.argv[1], 'w').write(os.environ['SPAWN_PROBE'])"
    )
    pid = posix_spawn(sys.executable, [sys.executable, "-c", code, str(out)], env)
    _, status = os.waitpid(pid, 0)
    assert os.waitstatus_to_exitcode(status) == 0
    assert out.read_text() == "probe-value"


def test_spawn_missing_program(tmp_path):
    missing = tmp_path / "no-such-program"
    with pytest.raises(FileNotFoundError):
        posix_spawn(missing, [str(missing)], {})


def test_spawn_not_executable(tmp_path):
    script = tmp_path / "plain.txt"
    script.write_text("data")
    os.chmod(script, 0o644)
    with pytest.raises(PermissionError):
        posix_spawn(script, [str(script)], {})