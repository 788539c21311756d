"""Unit tests for the ``@need`` annotation scanner."""

from __future__ import annotations

import logging
from typing import Any

from genparse.core.contracts import Annotation
from genparse.core.settings import load_settings
from genparse.extractors.decorators import ELISION, extract_decorators


def _source(n: int, marks: dict[int, str]) -> tuple[str, list[str]]:
    """Build an ``n``-line source with ``marks`` placed at 1-based line numbers."""
    lines = [marks.get(i, f"const line{i} = {i};") for i in range(1, n + 1)]
    return "\n".join(lines), lines


def test_single_marker_with_full_window() -> None:
    """Marker at line 10 of 30: snippet spans lines 5..25 inside elision lines."""
    code, lines = _source(30, {10: "  // @need:api:fetch user data"})

    found = extract_decorators(code)

    assert len(found) == 1
    item = found[0]
    assert isinstance(item, Annotation)
    assert item.type == "api"
    assert item.description == "fetch user data"
    assert item.line_number == 10
    assert item.snippet == ELISION + "\n" + "\n".join(lines[4:25]) + "\n" + ELISION


def test_window_is_clamped_at_both_ends() -> None:
    code, lines = _source(4, {2: "{/* @need:db:store the draft */}"})

    [item] = extract_decorators(code)

    assert item.line_number == 2
    assert item.snippet.split("\n") == [ELISION, *lines, ELISION]


def test_markers_are_returned_in_source_order() -> None:
    code, _ = _source(
        40,
        {
            3: "// @need:auth:current session",
            21: "// @need:api:list projects",
            39: "// @need:storage : upload avatar ",
        },
    )

    found = extract_decorators(code)

    assert [a.line_number for a in found] == [3, 21, 39]
    assert [a.type for a in found] == ["auth", "api", "storage"]
    assert found[2].description == "upload avatar"


def test_missing_description_is_skipped() -> None:
    """`@need:api:` does not match the marker grammar; the line is ignored."""
    code, _ = _source(
        12,
        {
            2: "// @need:api:",
            6: "// @need:api:load feed",
        },
    )

    found = extract_decorators(code)

    assert len(found) == 1
    assert found[0].line_number == 6


def test_blank_parts_are_logged_and_skipped(caplog: Any, propagate: None) -> None:
    """A marker whose type or description strips to empty is malformed."""
    code, _ = _source(
        8,
        {
            1: "// @need:   :something",
            2: "// @need:api:    ",
            5: "// @need:api:ok",
        },
    )

    with caplog.at_level(logging.WARNING):
        found = extract_decorators(code)

    assert [a.line_number for a in found] == [5]
    warned = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert any("line 1" in m for m in warned)
    assert any("line 2" in m for m in warned)


def test_description_keeps_inner_colons() -> None:
    [item] = extract_decorators("// @need:api:GET /users/:id returns a user")
    assert item.type == "api"
    assert item.description == "GET /users/:id returns a user"


def test_no_markers_returns_empty_list() -> None:
    code, _ = _source(5, {})
    assert extract_decorators(code) == []


def test_invalid_input_returns_empty_list() -> None:
    assert extract_decorators(None) == []
    assert extract_decorators("") == []
    assert extract_decorators(123) == []  # type: ignore[arg-type]


def test_explicit_window_overrides_settings() -> None:
    code, lines = _source(10, {5: "// @need:api:x"})
    [item] = extract_decorators(code, before=1, after=1)
    assert item.snippet.split("\n") == [ELISION, lines[3], lines[4], lines[5], ELISION]


def test_window_follows_settings(monkeypatch: Any) -> None:
    monkeypatch.setenv("GENPARSE_SNIPPET_BEFORE", "0")
    monkeypatch.setenv("GENPARSE_SNIPPET_AFTER", "0")
    load_settings.cache_clear()

    code, lines = _source(10, {5: "// @need:api:x"})
    [item] = extract_decorators(code)

    assert item.snippet == f"{ELISION}\n{lines[4]}\n{ELISION}"


def test_serializes_with_camel_case_line_number() -> None:
    [item] = extract_decorators("// @need:api:x")
    payload = item.model_dump(by_alias=True)
    assert payload["lineNumber"] == 1
    assert set(payload) == {"type", "description", "snippet", "lineNumber"}
