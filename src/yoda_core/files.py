"""
File and JSON I/O wrappers.

Every reader/writer returns an (ok, payload) tuple instead of raising for
ordinary I/O or parse failures, so editor-side callers can report the
message without a try block.
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

from yoda_core.cache import TTLCache
from yoda_core.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def read_file(path: PathLike) -> tuple[bool, str]:
    """Read a UTF-8 text file. Returns (True, content) or (False, error)."""
    try:
        return True, Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %s: %s", path, e)
        return False, f"Could not read file {path}: {e}"


def write_file(path: PathLike, content: str) -> tuple[bool, Optional[str]]:
    """Write text to a file, creating parent directories as needed."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.debug("Failed to write %s: %s", path, e)
        return False, f"Could not write file {path}: {e}"
    return True, None


def read_json(path: PathLike) -> tuple[bool, Any]:
    """Read and parse a JSON file. Returns (True, data) or (False, error)."""
    ok, content = read_file(path)
    if not ok:
        return False, content

    try:
        return True, json.loads(content)
    except json.JSONDecodeError as e:
        logger.debug("Invalid JSON in %s: %s", path, e)
        return False, f"Invalid JSON in {path}: {e}"


def write_json(path: PathLike, data: Any, indent: int = 2) -> tuple[bool, Optional[str]]:
    """Serialize data as JSON and write it to path."""
    try:
        content = json.dumps(data, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        return False, f"Could not encode JSON for {path}: {e}"
    return write_file(path, content)


def file_exists(path: Any) -> bool:
    if not isinstance(path, (str, Path)) or not str(path):
        return False
    return Path(path).is_file()


def is_dir(path: Any) -> bool:
    if not isinstance(path, (str, Path)) or not str(path):
        return False
    return Path(path).is_dir()


class _ReadFailed(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def cached_read_json(path: PathLike, cache: TTLCache) -> tuple[bool, Any]:
    """
    read_json() memoized in cache, keyed by absolute path.

    Failed reads are returned but never cached.
    """
    key = f"json:{Path(path).resolve()}"

    def produce():
        ok, data = read_json(path)
        if not ok:
            raise _ReadFailed(data)
        return data

    try:
        return True, cache.get_or_compute(key, produce)
    except _ReadFailed as e:
        return False, e.message
