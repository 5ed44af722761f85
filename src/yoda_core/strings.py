"""String helpers. Non-string input never raises; it yields a neutral result."""

from typing import Any


def trim(s: Any) -> str:
    """Trim whitespace from both ends."""
    if isinstance(s, str):
        return s.strip()
    return ""


def starts_with(s: Any, prefix: Any) -> bool:
    if isinstance(s, str) and isinstance(prefix, str):
        return s.startswith(prefix)
    return False


def ends_with(s: Any, suffix: Any) -> bool:
    if isinstance(s, str) and isinstance(suffix, str):
        return s.endswith(suffix)
    return False


def split(s: Any, delimiter: str = " ") -> list[str]:
    """
    Split on a literal delimiter (not a pattern).

    An empty delimiter splits into characters; a non-string delimiter
    falls back to a single space.
    """
    if not isinstance(s, str):
        return []
    if not isinstance(delimiter, str):
        delimiter = " "
    if delimiter == "":
        return list(s)
    return s.split(delimiter)


def is_blank(s: Any) -> bool:
    """True for non-strings, empty strings and whitespace-only strings."""
    if isinstance(s, str):
        return s.strip() == ""
    return True


def get_extension(path: Any) -> str:
    """
    Get file extension without the dot.

    Dotfiles such as '.bashrc' have no extension; only the final
    path component is inspected.
    """
    if not isinstance(path, str):
        return ""
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return ""
    return ext
