"""Extraction: the body of a single fenced block."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Extraction(BaseModel):
    """Trimmed content found strictly between the first and last fence lines."""

    text: str = Field(..., description="Fence body, stripped of surrounding space.")

    @field_validator("text")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("extracted text must not be blank")
        return v


__all__ = ["Extraction"]
