"""Platform detection and path helpers."""

import sys


def is_windows() -> bool:
    return sys.platform.startswith("win")


def is_macos() -> bool:
    return sys.platform == "darwin"


def is_linux() -> bool:
    return sys.platform.startswith("linux")


def get_platform() -> str:
    """Return 'windows', 'macos', 'linux' or 'unknown'."""
    if is_windows():
        return "windows"
    if is_macos():
        return "macos"
    if is_linux():
        return "linux"
    return "unknown"


def get_path_sep() -> str:
    return "\\" if is_windows() else "/"


def join_path(*parts: str) -> str:
    """Join path parts with the platform separator, skipping empty parts."""
    return get_path_sep().join(part for part in parts if part)


def normalize_path(path: str) -> str:
    """Use the platform separator throughout."""
    sep = get_path_sep()
    return path.replace("\\", sep).replace("/", sep)
