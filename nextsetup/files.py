"""Scoped file reads and writes inside the project directory."""

import json
import logging
from pathlib import Path
from typing import Any

from nextsetup.errors import DirectoryConflict, FilesystemError

logger = logging.getLogger(__name__)


def create_project_directory(name: str, base_path: Path | str) -> Path:
    """Create base_path/name (with missing parents) and return its absolute path.

    Raises DirectoryConflict if it already exists; nothing is created then.
    """
    new_path = (Path(base_path) / name).resolve()
    if new_path.exists():
        raise DirectoryConflict(new_path)
    try:
        new_path.mkdir(parents=True)
    except FileExistsError as e:
        raise DirectoryConflict(new_path) from e
    except OSError as e:
        raise FilesystemError(new_path, "create directory", e) from e
    logger.info("Created project directory %s", new_path)
    return new_path


def write_file(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FilesystemError(path, "write", e) from e
    logger.info("Wrote %s", path)


def read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise FilesystemError(path, "read", e) from e
    except UnicodeDecodeError as e:
        raise FilesystemError(path, "decode", e) from e


def file_exists(path: Path) -> bool:
    return path.is_file()


def read_json(path: Path) -> dict[str, Any]:
    """Read a JSON object. Malformed JSON is reported as FilesystemError."""
    text = read_file(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FilesystemError(path, "parse", e) from e
    if not isinstance(data, dict):
        raise FilesystemError(path, "parse", ValueError("expected a JSON object"))
    return data


def write_json(path: Path, data: dict[str, Any]) -> None:
    """Write data as 2-space indented JSON with a trailing newline."""
    write_file(path, json.dumps(data, indent=2) + "\n")
