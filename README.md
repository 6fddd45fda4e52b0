# libcshim

Small C library routines written in plain Python, with no dependencies beyond
the standard library. The logarithms and bit-scan helpers follow the bit-level
algorithms that C libraries use, so their results match what a C program
would produce.

## Installation

```
pip install libcshim
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "libcshim[test]"
pytest
```

## What is included

| Module | Names | Purpose |
| --- | --- | --- |
| `libcshim.log2` | `log2(x)` | Double-precision base-2 logarithm |
| `libcshim.log2f` | `log2f(x)` | Single-precision base-2 logarithm |
| `libcshim.logf` | `logf(x)` | Single-precision natural logarithm |
| `libcshim.atomic` | `AtomicInt`, `ctz32`, `ctz64`, `clz64` | Thread-safe signed 32-bit integer cell and bit-counting helpers |
| `libcshim.strsignal` | `strsignal(signum)`, `NSIG` | Text description of a signal number |
| `libcshim.tempfiles` | `mkstemps(template, suffix_len)` | Create a unique file from a `XXXXXX` template |
| `libcshim.cpuset` | `cpu_count(mask)` | Count the CPUs set in a CPU mask given as bytes |
| `libcshim.syscalls` | `syscall_ret(result)`, `timespec_get(base)`, `Timespec`, `TIME_UTC` | Turn raw system-call results into errors; read the UTC clock |
| `libcshim.spawn` | `pipe2(flags)`, `posix_spawn(path, argv, env)` | Create pipes with flags; start a program |

## Examples

Logarithms:

```python
from libcshim.log2 import log2
from libcshim.log2f import log2f
from libcshim.logf import logf

log2(8.0)      # 3.0
log2f(1.0)     # 0.0
logf(1.0)      # 0.0
```

`log2f` and `logf` round their argument and result to single precision.
Infinity maps to infinity and NaN to NaN. Zero and negative arguments raise
`ValueError`.

Atomic counters:

```python
from libcshim.atomic import AtomicInt, ctz64, clz64

counter = AtomicInt(0)
counter.inc()
previous = counter.fetch_add(5)   # returns 1
counter.load()                    # 6
counter.cas(6, 10)                # returns 6 and stores 10

ctz64(8)    # 3
clz64(1)    # 63
```

Arithmetic on `AtomicInt` wraps around modulo 2**32, as a C `int` does.

Signal names:

```python
from libcshim.strsignal import strsignal

strsignal(2)    # "Interrupt"
strsignal(15)   # "Terminated"
strsignal(40)   # "RT40"
strsignal(0)    # "Unknown signal"
```

Temporary files:

```python
from libcshim.tempfiles import mkstemps

fd, path = mkstemps("/tmp/reportXXXXXX.txt", 4)
```

A malformed template raises `ValueError`; if no free name is found after 100
tries, `FileExistsError` is raised.

System-call results and the clock:

```python
from libcshim.syscalls import syscall_ret, timespec_get

syscall_ret(3)       # 3
syscall_ret(-2)      # raises OSError with errno 2
now = timespec_get() # Timespec(tv_sec=..., tv_nsec=...)
```

Pipes and starting a program:

```python
import os
from libcshim.spawn import pipe2, posix_spawn

read_fd, write_fd = pipe2(os.O_CLOEXEC | os.O_NONBLOCK)
pid = posix_spawn("/bin/true", ["true"], {})
```

If the program cannot be started, `posix_spawn` raises `OSError` carrying the
error number of the failure. The caller is responsible for waiting on the
returned pid.

## What is not included

There is no power function; use Python's `**` or `math.pow`. Process spawning
uses `fork` and therefore works only on POSIX systems.