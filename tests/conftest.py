"""Shared pytest fixtures for the genparse test-suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest

from genparse.core.settings import load_settings


@pytest.fixture  # type: ignore[misc]
def propagate(monkeypatch: Any) -> Iterator[None]:
    """Let component loggers reach pytest's `caplog` handler.

    `get_logger()` disables propagation so the library does not double-print
    through the root logger; tests that assert on log records switch it back on.
    """
    for name in (
        "genparse.extractors.fences",
        "genparse.extractors.decorators",
        "genparse.parsers.yaml_doc",
        "genparse.editors.genui",
    ):
        monkeypatch.setattr(logging.getLogger(name), "propagate", True)
    yield


@pytest.fixture(autouse=True)  # type: ignore[misc]
def fresh_settings() -> Iterator[None]:
    """Drop cached settings after each test so env overrides never leak."""
    yield
    load_settings.cache_clear()
