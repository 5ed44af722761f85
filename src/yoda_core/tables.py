"""Helpers for nested dicts and lists (merged editor configs and the like)."""

import copy
from collections.abc import Mapping, Sequence
from typing import Any

MERGE_BEHAVIORS = ("force", "keep", "error")


def _merge_into(target: dict, source: Mapping, behavior: str, path: str) -> None:
    for key, value in source.items():
        if key not in target:
            target[key] = copy.deepcopy(value)
            continue

        current = target[key]
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            _merge_into(current, value, behavior, f"{path}{key}.")
        elif behavior == "force":
            target[key] = copy.deepcopy(value)
        elif behavior == "error":
            raise ValueError(f"Key '{path}{key}' is already present")
        # keep: leave the earlier value


def deep_merge(behavior: str, *mappings: Mapping) -> dict:
    """
    Recursively merge mappings into a new dict.

    Args:
        behavior: 'force' (later mappings win), 'keep' (earlier mappings win)
                  or 'error' (raise ValueError on a conflicting leaf key).
        mappings: Mappings to merge, left to right. None entries are skipped.

    Only nested mappings are merged; lists and scalars are replaced whole.
    """
    if behavior not in MERGE_BEHAVIORS:
        raise ValueError(f"Invalid merge behavior '{behavior}'. Expected one of: {', '.join(MERGE_BEHAVIORS)}")

    result: dict = {}
    for mapping in mappings:
        if mapping is None:
            continue
        # Copy nested mappings to dicts so merging never mutates the inputs
        _merge_into(result, _to_dict(mapping), behavior, "")
    return result


def _to_dict(value: Mapping) -> dict:
    return {
        k: _to_dict(v) if isinstance(v, Mapping) else v
        for k, v in value.items()
    }


def deep_copy(value: Any) -> Any:
    return copy.deepcopy(value)


def is_empty(value: Any) -> bool:
    """True for None and empty containers."""
    if value is None:
        return True
    if isinstance(value, (Mapping, Sequence, set, frozenset)):
        return len(value) == 0
    return False


def contains(sequence: Any, value: Any) -> bool:
    if isinstance(sequence, (str, bytes)) or not isinstance(sequence, Sequence):
        return False
    return value in sequence


def size(mapping: Any) -> int:
    """Number of keys in a mapping, 0 for anything else."""
    if isinstance(mapping, Mapping):
        return len(mapping)
    return 0
