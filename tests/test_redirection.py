import errno
import os
import stat

import pytest

from myshell.redirection import RedirectionError, open_input, open_output


def test_empty_names_mean_no_redirection():
    assert open_input("") is None
    assert open_output("", False) is None


def test_open_input_reads_file(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"line one\nline two\n")
    with open_input(str(path)) as handle:
        assert handle.read() == b"line one\nline two\n"


def test_open_input_missing_file(tmp_path):
    path = tmp_path / "missing.txt"
    with pytest.raises(RedirectionError) as info:
        open_input(str(path))
    assert info.value.errno == errno.ENOENT
    assert f"'{path}'" in str(info.value)


def test_open_output_creates_file(tmp_path):
    path = tmp_path / "out.txt"
    with open_output(str(path), False) as handle:
        handle.write(b"hello")
    assert path.read_bytes() == b"hello"


def test_open_output_truncates(tmp_path):
    path = tmp_path / "out.txt"
    path.write_bytes(b"old contents that are long")
    with open_output(str(path), False) as handle:
        handle.write(b"new")
    assert path.read_bytes() == b"new"


def test_open_output_appends(tmp_path):
    path = tmp_path / "out.txt"
    path.write_bytes(b"first\n")
    with open_output(str(path), True) as handle:
        handle.write(b"second\n")
    assert path.read_bytes() == b"first\nsecond\n"


def test_open_output_mode(tmp_path):
    path = tmp_path / "mode.txt"
    old_umask = os.umask(0)
    try:
        with open_output(str(path), False):
            pass
    finally:
        os.umask(old_umask)
    assert stat.S_IMODE(path.stat().st_mode) == 0o644


def test_open_output_to_directory_fails(tmp_path):
    with pytest.raises(RedirectionError) as info:
        open_output(str(tmp_path), False)
    assert info.value.errno == errno.EISDIR
    assert isinstance(info.value, OSError)


def test_open_output_missing_parent(tmp_path):
    path = tmp_path / "nodir" / "out.txt"
    with pytest.raises(RedirectionError) as info:
        open_output(str(path), True)
    assert info.value.errno == errno.ENOENT
    assert not path.exists()