"""
Request/response schemas for the genparse HTTP API.

Each request mirrors the argument list of the corresponding Python entry
point. Responses wrap the sentinel-bearing result in a ``result`` field so
that "nothing extracted" is an explicit ``null`` rather than an empty body.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from genparse.core.contracts import Annotation, Extraction


class TextRequest(BaseModel):
    """A raw completion to extract a fenced block from."""

    text: str = Field(..., description="Raw generated text.")


class MultiBlockRequest(BaseModel):
    """A completion plus the ordered fence labels to pull out of it."""

    text: str = Field(..., description="Raw generated text.")
    delimiters: list[str] = Field(..., min_length=1, description="Fence labels, in text order.")


class CodeRequest(BaseModel):
    """Generated source to scan for ``@need`` markers."""

    code: str


class GeneratedText(BaseModel):
    text: str


class YamlRequest(BaseModel):
    """A generation record whose ``generated.text`` holds a YAML document."""

    generated: GeneratedText
    query: Any | None = None


class TsxRequest(BaseModel):
    """Generated TSX module to rewrite."""

    tsx: str


class ExtractionResponse(BaseModel):
    result: Extraction | None


class MultiBlockResponse(BaseModel):
    result: dict[str, str] | None


class AnnotationsResponse(BaseModel):
    result: list[Annotation]


class YamlResponse(BaseModel):
    result: Any | None


__all__ = [
    "TextRequest",
    "MultiBlockRequest",
    "CodeRequest",
    "GeneratedText",
    "YamlRequest",
    "TsxRequest",
    "ExtractionResponse",
    "MultiBlockResponse",
    "AnnotationsResponse",
    "YamlResponse",
]
