# tests/test_api.py
"""
Integration tests for the genparse HTTP API.

Focus
-----
These tests verify the HTTP contract (request/response schemas) of every
transform route plus the health probe. The transforms themselves are
exercised for real; they are pure and fast.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from genparse import __version__ as PKG_VERSION
from genparse.api.app import create_app, get_app


@pytest.fixture  # type: ignore[misc]
def client() -> Generator[TestClient, None, None]:
    """Create a clean API client for each test."""
    with TestClient(create_app()) as c:
        yield c


def test_health_endpoint_contract() -> None:
    """`GET /health` returns a stable shape and expected values."""
    client = TestClient(get_app())
    resp = client.get("/health")

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["environment"] in {"dev", "test", "prod"}
    assert data["version"] == PKG_VERSION


def test_backticks_route(client: TestClient) -> None:
    resp = client.post("/extract/backticks", json={"text": "```\nhello\n```"})
    assert resp.status_code == 200
    assert resp.json() == {"result": {"text": "hello"}}


def test_backticks_route_null_result(client: TestClient) -> None:
    resp = client.post("/extract/backticks", json={"text": "no fences"})
    assert resp.status_code == 200
    assert resp.json() == {"result": None}


def test_backticks_multiple_route(client: TestClient) -> None:
    text = "```a\nA\n```\n```b\nB\n```"
    resp = client.post(
        "/extract/backticks-multiple", json={"text": text, "delimiters": ["a", "b"]}
    )
    assert resp.status_code == 200
    assert resp.json() == {"result": {"a": "A", "b": "B"}}


def test_backticks_multiple_requires_delimiters(client: TestClient) -> None:
    resp = client.post("/extract/backticks-multiple", json={"text": "x", "delimiters": []})
    assert resp.status_code == 422


def test_decorators_route_uses_camel_case(client: TestClient) -> None:
    resp = client.post("/extract/decorators", json={"code": "a\n// @need:api:load feed"})
    assert resp.status_code == 200
    [item] = resp.json()["result"]
    assert item["type"] == "api"
    assert item["description"] == "load feed"
    assert item["lineNumber"] == 2


def test_yaml_route(client: TestClient) -> None:
    resp = client.post("/parse/yaml", json={"generated": {"text": "a: [1, 2]"}, "query": "q"})
    assert resp.status_code == 200
    assert resp.json() == {"result": {"a": [1, 2]}}

    bad = client.post("/parse/yaml", json={"generated": {"text": "a: [1, 2"}})
    assert bad.json() == {"result": None}


def test_gen_ui_route(client: TestClient) -> None:
    tsx = "import V from '@/components/views/V';\n<V />"
    resp = client.post("/edit/gen-ui", json={"tsx": tsx})
    assert resp.status_code == 200
    data = resp.json()
    assert data["ids"] == {"sections": False, "views": ["V"]}
    assert data["text"].endswith('<GenUiView id="V" />')
