import pytest

from libcshim.cpuset import cpu_count


def test_empty_mask():
    assert cpu_count(b"") == 0
    assert cpu_count(bytes(16)) == 0


def test_full_bytes():
    assert cpu_count(b"\xff\xff") == 16


def test_single_bits():
    mask = bytearray(8)
    for cpu in (0, 7, 13, 63):
        mask[cpu // 8] |= 1 << (cpu % 8)
    assert cpu_count(mask) == 4


def test_memoryview_matches_bytes():
    data = bytes(range(256))
    assert cpu_count(memoryview(data)) == cpu_count(data)


def test_rejects_int():
    with pytest.raises(TypeError):
        cpu_count(5)