"""Unit tests for the Result container used inside the transforms."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from genparse.core.result import Err, Ok, Result, err, ok


def test_ok_map_and_flat_map() -> None:
    """`Ok` should map/flat_map through validation steps."""

    def non_empty(x: str) -> Result[str, str]:
        return ok(x) if x else err("> invalid : empty content")

    r: Result[str, str] = ok("  body  ")
    out = r.map(str.strip).flat_map(non_empty)
    assert out.is_ok() and out.unwrap() == "body"

    blank = ok("   ").map(str.strip).flat_map(non_empty)
    assert blank.is_err() and blank.unwrap_err() == "> invalid : empty content"


def test_err_propagates_unchanged() -> None:
    """`Err` should skip map/flat_map and keep its diagnostic."""
    r: Result[int, str] = err("boom")
    assert r.map(lambda x: x + 1) == Err("boom")
    assert r.flat_map(lambda x: ok(x * 2)).unwrap_err() == "boom"


def test_unwrap_raises_on_the_wrong_variant() -> None:
    """Unwrapping the wrong side is a programming error, not a sentinel."""
    with pytest.raises(RuntimeError):
        err("nope").unwrap()
    with pytest.raises(RuntimeError):
        ok(1).unwrap_err()


def test_unwrap_or_log_returns_value_silently(caplog: Any) -> None:
    """`Ok.unwrap_or_log` returns the payload and logs nothing."""
    logger = logging.getLogger("genparse.tests.result")
    with caplog.at_level(logging.DEBUG, logger="genparse.tests.result"):
        assert Ok("x").unwrap_or_log(logger, "op", None) == "x"
    assert caplog.records == []


def test_unwrap_or_log_logs_and_falls_back(caplog: Any) -> None:
    """`Err.unwrap_or_log` logs `<label>:error <diagnostic>` and returns the fallback."""
    logger = logging.getLogger("genparse.tests.result")
    with caplog.at_level(logging.DEBUG, logger="genparse.tests.result"):
        out = Err("> invalid : broken").unwrap_or_log(logger, "op", [], level=logging.WARNING)

    assert out == []
    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "op:error > invalid : broken"
