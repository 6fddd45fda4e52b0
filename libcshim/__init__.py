"""Pure-Python implementations of small C library routines: logarithms,
atomics, signal names, temporary files, pipes and process spawning."""

__version__ = "0.1.0"