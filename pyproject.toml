[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libcshim"
version = "0.1.0"
description = "Pure-Python implementations of small C library routines: logarithms, atomics, signal names, temp files, pipes and process spawning"
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "log2", "logf", "atomic", "strsignal", "mkstemps", "pipe2", "posix_spawn"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["libcshim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
