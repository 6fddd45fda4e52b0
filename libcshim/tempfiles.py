"""Creation of uniquely named files from a template."""

from __future__ import annotations

import errno
import os
import secrets

__all__ = ["mkstemps"]

_PLACEHOLDER = "XXXXXX"
_ALPHABET = "ABCDEFGHIJKLMNOPabcdefghijklmnop"
_RETRIES = 100


def _random_name() -> str:
    return "".join(secrets.choice(_ALPHABET) for _ in range(len(_PLACEHOLDER)))


def mkstemps(template: str | os.PathLike[str], suffix_len: int) -> tuple[int, str]:
    """Create and open a new file named after ``template``.

    The six characters ``XXXXXX`` that precede the last ``suffix_len``
    characters of ``template`` are replaced by random letters. The file is
    created exclusively with mode 0600 and opened for reading and writing.
    Returns the open descriptor and the path that was used.

    Raises :class:`ValueError` if the template is malformed, and
    :class:`FileExistsError` if no free name was found after 100 tries.
    """
    template = os.fspath(template)
    length = len(template)
    start = length - suffix_len - len(_PLACEHOLDER)
    if (
        length < len(_PLACEHOLDER)
        or suffix_len < 0
        or suffix_len > length - len(_PLACEHOLDER)
        or template[start : start + len(_PLACEHOLDER)] != _PLACEHOLDER
    ):
        raise ValueError(
            f"template {template!r} has no {_PLACEHOLDER} before a "
            f"suffix of {suffix_len} characters"
        )

    head = template[:start]
    tail = template[start + len(_PLACEHOLDER) :]
    flags = os.O_RDWR | os.O_CREAT | os.O_EXCL
    for _ in range(_RETRIES):
        path = head + _random_name() + tail
        try:
            return os.open(path, flags, 0o600), path
        except FileExistsError:
            continue
    raise FileExistsError(
        errno.EEXIST, "no unused name found for template", template
    )