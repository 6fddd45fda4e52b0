import os
import stat
from unittest import mock

import pytest

from libcshim.tempfiles import mkstemps


def test_creates_file_with_suffix(tmp_path):
    template = str(tmp_path / "dataXXXXXX.txt")
    fd, path = mkstemps(template, 4)
    try:
        assert os.path.exists(path)
        assert path.endswith(".txt")
        assert path.startswith(str(tmp_path / "data"))
        assert len(path) == len(template)
        middle = os.path.basename(path)[4:10]
        assert all(c.isalpha() and c.lower() <= "p" for c in middle)
        mode = os.fstat(fd).st_mode
        assert stat.S_IMODE(mode) & 0o077 == 0
        os.write(fd, b"hello")
        os.lseek(fd, 0, os.SEEK_SET)
        assert os.read(fd, 5) == b"hello"
    finally:
        os.close(fd)


def test_no_suffix(tmp_path):
    fd, path = mkstemps(tmp_path / "fileXXXXXX", 0)
    os.close(fd)
    assert "XXXXXX" not in path
    assert os.path.isfile(path)


def test_names_differ(tmp_path):
    paths = set()
    for _ in range(5):
        fd, path = mkstemps(str(tmp_path / "aXXXXXX"), 0)
        os.close(fd)
        paths.add(path)
    assert len(paths) == 5


@pytest.mark.parametrize(
    "template, suffix_len",
    [
        ("XXXX", 0),
        ("fileXXXXX", 0),
        ("XXXXXX", 1),
        ("fileXXXXXX.c", 1),
        ("fileXXXXXX", -1),
    ],
)
def test_bad_template(template, suffix_len):
    with pytest.raises(ValueError):
        mkstemps(template, suffix_len)


def test_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        mkstemps(str(tmp_path / "nope" / "xXXXXXX"), 0)


def test_gives_up_after_retries(tmp_path):
    with mock.patch(
        "libcshim.tempfiles.os.open", side_effect=FileExistsError(17, "exists")
    ) as fake_open:
        with pytest.raises(FileExistsError):
            mkstemps(str(tmp_path / "xXXXXXX"), 0)
    assert fake_open.call_count == 100