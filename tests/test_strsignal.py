import signal

import pytest

from libcshim.strsignal import NSIG, strsignal


@pytest.mark.parametrize(
    "signum, text",
    [
        (1, "Hangup"),
        (2, "Interrupt"),
        (9, "Killed"),
        (16, "Stack fault"),
        (31, "Bad system call"),
        (32, "RT32"),
        (34, "RT34"),
        (64, "RT64"),
    ],
)
def test_known_signals(signum, text):
    assert strsignal(signum) == text


@pytest.mark.parametrize("signum", [0, -1, NSIG, 1000])
def test_out_of_range_is_unknown(signum):
    assert strsignal(signum) == "Unknown signal"


def test_accepts_signal_enum():
    assert strsignal(signal.SIGTERM) == "Terminated"


def test_all_valid_numbers_distinct():
    texts = [strsignal(n) for n in range(1, NSIG)]
    assert len(set(texts)) == len(texts)
    assert "Unknown signal" not in texts


def test_rejects_non_integer():
    with pytest.raises(TypeError):
        strsignal(1.5)