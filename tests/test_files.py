"""Tests for nextsetup.files."""

from pathlib import Path

import pytest

from nextsetup.errors import DirectoryConflict, FilesystemError
from nextsetup.files import (
    create_project_directory,
    file_exists,
    read_file,
    read_json,
    write_file,
    write_json,
)


def test_create_project_directory_returns_absolute_path(tmp_path: Path) -> None:
    path = create_project_directory("site", tmp_path)
    assert path == (tmp_path / "site").resolve()
    assert path.is_absolute()
    assert path.is_dir()


def test_create_project_directory_creates_missing_parents(tmp_path: Path) -> None:
    path = create_project_directory("site", tmp_path / "a" / "b")
    assert path.is_dir()


def test_create_project_directory_twice_conflicts(tmp_path: Path) -> None:
    """Second call fails and leaves the first directory untouched."""
    first = create_project_directory("site", tmp_path)
    (first / "keep.txt").write_text("x")

    with pytest.raises(DirectoryConflict, match='"site" already exists'):
        create_project_directory("site", tmp_path)

    assert [p.name for p in first.iterdir()] == ["keep.txt"]


def test_create_project_directory_conflicts_with_existing_file(tmp_path: Path) -> None:
    (tmp_path / "site").write_text("not a dir")
    with pytest.raises(DirectoryConflict):
        create_project_directory("site", tmp_path)


def test_write_and_read_roundtrip(tmp_path: Path) -> None:
    target = tmp_path / "a.txt"
    write_file(target, "hello\n")
    assert file_exists(target)
    assert read_file(target) == "hello\n"


def test_write_into_missing_directory_raises_filesystem_error(tmp_path: Path) -> None:
    with pytest.raises(FilesystemError, match="Failed to write"):
        write_file(tmp_path / "missing" / "a.txt", "x")


def test_read_missing_file_raises_filesystem_error(tmp_path: Path) -> None:
    with pytest.raises(FilesystemError, match="Failed to read"):
        read_file(tmp_path / "nope.txt")


def test_file_exists_false_for_directory(tmp_path: Path) -> None:
    assert file_exists(tmp_path) is False


def test_write_json_is_indented_with_trailing_newline(tmp_path: Path) -> None:
    target = tmp_path / "data.json"
    write_json(target, {"a": 1})
    assert target.read_text() == '{\n  "a": 1\n}\n'
    assert read_json(target) == {"a": 1}


def test_read_json_rejects_malformed(tmp_path: Path) -> None:
    target = tmp_path / "package.json"
    target.write_text("{ not json")
    with pytest.raises(FilesystemError, match="Failed to parse"):
        read_json(target)


def test_read_json_rejects_non_object(tmp_path: Path) -> None:
    target = tmp_path / "package.json"
    target.write_text("[1, 2]")
    with pytest.raises(FilesystemError, match="expected a JSON object"):
        read_json(target)


def test_read_non_utf8_file_raises_filesystem_error(tmp_path: Path) -> None:
    target = tmp_path / "next.config.ts"
    target.write_bytes(b"const nextConfig: NextConfig = {\xff\n};\n")
    with pytest.raises(FilesystemError, match="Failed to decode") as exc_info:
        read_file(target)
    assert exc_info.value.action == "decode"


def test_read_json_non_utf8_raises_filesystem_error(tmp_path: Path) -> None:
    target = tmp_path / "package.json"
    target.write_bytes(b'{"name": "\xff"}')
    with pytest.raises(FilesystemError, match="Failed to decode"):
        read_json(target)
