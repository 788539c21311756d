"""
Annotation Contract

An ``@need:<type>:<description>`` marker found in generated source code,
together with the surrounding lines so a follow-up prompt can see where the
capability is required.

The JSON shape keeps the camel-cased ``lineNumber`` key that frontend
consumers already read; Python callers use ``line_number``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Annotation(BaseModel):
    """A single ``@need`` marker with its context snippet."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., min_length=1, description="Capability kind, e.g. 'api' or 'db'.")
    description: str = Field(..., min_length=1, description="Free-text request after the type.")
    snippet: str = Field(..., description="Context window wrapped in elision markers.")
    line_number: int = Field(..., ge=1, alias="lineNumber", description="1-indexed source line.")


__all__ = ["Annotation"]
