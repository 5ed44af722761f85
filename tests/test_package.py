"""
Tests for package setup, config and logging.

Run with: pytest tests/test_package.py -v
"""

import logging
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import yoda_core
from yoda_core.config import Settings
from yoda_core.logging import ROOT_LOGGER, get_logger, setup_logging

# --- Fixtures ---


@pytest.fixture(autouse=True)
def reset_package():
    yoda_core._reset()
    yield
    yoda_core._reset()


# --- setup() ---


def test_setup_merges_options():
    yoda_core.setup(cache={"ttl": 5}, extra={"flag": True})
    config = yoda_core.get_config()
    assert config["cache"] == {"ttl": 5}
    assert config["extra"] == {"flag": True}


def test_setup_twice_warns(caplog):
    yoda_core.setup(cache={"ttl": 5})
    with caplog.at_level(logging.WARNING, logger="yoda_core"):
        yoda_core.setup(cache={"ttl": 10})
    assert "setup() called multiple times" in caplog.text
    assert yoda_core.get_config()["cache"] == {"ttl": 5}


def test_create_cache_uses_setup_defaults():
    yoda_core.setup(cache={"ttl": 5, "weak": False})
    cache = yoda_core.create_cache()
    assert cache.ttl == 5
    assert cache.weak is False

    assert yoda_core.create_cache({"ttl": 1}).ttl == 1


def test_create_cache_ttl_ms_overrides_setup_ttl():
    """Each options layer is normalized before the merge."""
    yoda_core.setup(cache={"ttl": 5})
    assert yoda_core.create_cache({"ttl_ms": 100}).ttl == pytest.approx(0.1)

    yoda_core._reset()
    yoda_core.setup(cache={"ttl_ms": 100})
    assert yoda_core.create_cache({"ttl": 5}).ttl == 5


def test_create_cache_returns_new_instances():
    first = yoda_core.create_cache()
    first.set("k", "v")
    assert yoda_core.create_cache().get("k") is None


def test_load_module_is_memoized():
    strings = yoda_core.load_module("strings")
    assert strings.trim("  x ") == "x"
    assert yoda_core.load_module("strings") is strings


def test_load_unknown_module():
    with pytest.raises(ValueError, match="Unknown module"):
        yoda_core.load_module("platform")


# --- Settings ---


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("YODA_CACHE_TTL", "2.5")
    monkeypatch.setenv("YODA_CACHE_WEAK", "false")
    monkeypatch.setenv("YODA_LOG_LEVEL", "debug")
    s = Settings()
    assert s.cache_ttl == 2.5
    assert s.cache_weak is False
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("name,value", [
    ("YODA_CACHE_TTL", "0"),
    ("YODA_CACHE_TTL", "soon"),
    ("YODA_LOG_LEVEL", "chatty"),
])
def test_invalid_settings(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()


# --- Logging ---


def test_setup_logging_is_idempotent():
    logger = logging.getLogger(ROOT_LOGGER)
    before = list(logger.handlers)
    try:
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        added = [h for h in logger.handlers if h not in before]
        assert len(added) <= 1
        assert logger.level == logging.DEBUG
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_get_logger_returns_logger():
    logger = get_logger("yoda_core.test")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "yoda_core.test"
