"""Counting CPUs in an affinity mask."""

from __future__ import annotations

__all__ = ["cpu_count"]


def cpu_count(mask: bytes | bytearray | memoryview) -> int:
    """Return the number of set bits in the CPU mask ``mask``."""
    data = memoryview(mask).tobytes()
    return sum(bin(byte).count("1") for byte in data)