"""Tests for the settings loader and logger factory.

These verify:
1) Importing the module-level `settings` yields a `Settings` instance.
2) Environment variables override defaults after clearing the loader cache.
3) `get_logger()` respects the configured LOG_LEVEL.
4) The configured default splitter is what `extract_terms` uses when no
   splitter is passed.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import Any

import pytest

from clozeterms.core.settings import Settings, get_logger, load_settings, settings
from clozeterms.pipelines.extract import extract_terms
from clozeterms.stages.splitters import DEFAULT_SPLITTER


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings after each test so env changes do not leak."""
    yield
    load_settings.cache_clear()


def test_settings_instance_type() -> None:
    assert isinstance(settings, Settings)


def test_env_overrides_with_cache_clear(monkeypatch: Any) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CLOZETERMS_SPLITTER", "whitespace")

    load_settings.cache_clear()
    s = load_settings()

    assert s.log_level == "DEBUG"
    assert s.default_splitter == "whitespace"


def test_defaults(monkeypatch: Any) -> None:
    monkeypatch.delenv("CLOZETERMS_SPLITTER", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    load_settings.cache_clear()
    s = load_settings()
    assert s.default_splitter == DEFAULT_SPLITTER == "japanese"
    assert s.log_level_numeric() == logging.INFO


def test_get_logger_respects_level(monkeypatch: Any) -> None:
    """A unique logger name avoids side effects between tests."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    load_settings.cache_clear()

    logger = get_logger("clozeterms.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.handlers, "Expected a StreamHandler to be attached."
    assert logger.propagate is False


def test_default_splitter_comes_from_settings(monkeypatch: Any) -> None:
    monkeypatch.setenv("CLOZETERMS_SPLITTER", "whitespace")
    load_settings.cache_clear()

    terms, _ = extract_terms("A [big cat][bc] sat.\n\n[bc]: /\nfeline")
    assert terms[0].splits == {"big", "cat"}


def test_invalid_default_splitter_raises(monkeypatch: Any) -> None:
    """A broken configured pattern is a configuration error, not silent."""
    monkeypatch.setenv("CLOZETERMS_SPLITTER", "[broken")
    load_settings.cache_clear()

    with pytest.raises(RuntimeError, match="broken"):
        extract_terms("[x]\n\n[x]: /")


def test_loading_settings_leaves_environment_untouched(monkeypatch: Any) -> None:
    """Building settings reads the environment but never writes to it."""
    monkeypatch.delenv("CLOZETERMS_ENV", raising=False)
    load_settings.cache_clear()
    load_settings()
    assert "CLOZETERMS_ENV" not in os.environ
