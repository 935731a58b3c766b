from __future__ import annotations

from pathlib import Path

import pytest

from hexgrid.core.io import LoadError, load


def test_load_reads_whole_file(tmp_path: Path) -> None:
    data = bytes(i % 256 for i in range(5000))
    p = tmp_path / "fixture.bin"
    p.write_bytes(data)
    assert load(str(p)) == data


def test_load_empty_file(tmp_path: Path) -> None:
    p = tmp_path / "empty.bin"
    p.write_bytes(b"")
    assert load(str(p)) == b""


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(LoadError):
        load(str(tmp_path / "missing.bin"))


def test_directory_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(LoadError):
        load(str(tmp_path))


def test_load_error_is_os_error() -> None:
    assert issubclass(LoadError, OSError)
