"""yoda-core: small utilities shared by editor plugins."""

import importlib
from types import ModuleType
from typing import Any, Optional

from yoda_core.cache import TTLCache, new, new_persistent
from yoda_core.logging import get_logger
from yoda_core.models import CacheOptions, normalize_options
from yoda_core.tables import deep_merge

logger = get_logger(__name__)

HELPER_MODULES = ("strings", "tables", "system", "files")

_is_setup = False
_module_cache: dict[str, ModuleType] = {}

_config: dict[str, Any] = {
    "cache": {},
}


def setup(**opts: Any) -> None:
    """
    Configure the package once.

    Options are merged over the current config; 'cache' holds default
    options for create_cache(). Calling setup() again logs a warning and is ignored.
    """
    global _config, _is_setup
    if _is_setup:
        logger.warning("yoda_core: setup() called multiple times")
        return

    _config = deep_merge("force", _config, opts)
    _is_setup = True


def get_config() -> dict[str, Any]:
    return _config


def _reset() -> None:
    """Forget setup() state. Used by tests."""
    global _config, _is_setup
    _config = {"cache": {}}
    _is_setup = False
    _module_cache.clear()


def load_module(name: str) -> ModuleType:
    """Import a helper module (strings, tables, system, files) on first use."""
    if name not in HELPER_MODULES:
        raise ValueError(f"Unknown module '{name}'. Available: {', '.join(HELPER_MODULES)}")
    if name not in _module_cache:
        _module_cache[name] = importlib.import_module(f"yoda_core.{name}")
    return _module_cache[name]


def create_cache(options: Optional[dict[str, Any]] = None) -> TTLCache:
    """Create a new cache using setup() cache defaults overridden by options."""
    defaults = normalize_options(_config.get("cache"))
    return new(deep_merge("force", defaults, normalize_options(options)))


__all__ = [
    # Setup
    "setup",
    "get_config",
    # Cache
    "TTLCache",
    "CacheOptions",
    "new",
    "new_persistent",
    "create_cache",
    # Lazily loaded helper modules
    "HELPER_MODULES",
    "load_module",
]
