"""GenUI rewrite contracts.

`GenUiIds` records which generated components a TSX module referenced, per
category. A category is ``False`` when no reference to it was seen, otherwise
an ordered, de-duplicated list of identifiers (first occurrence wins).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

IdSet = list[str] | Literal[False]


class GenUiIds(BaseModel):
    """Referenced component identifiers, per category."""

    sections: IdSet = False
    views: IdSet = False


class GenUiEdit(BaseModel):
    """Rewritten source plus the identifiers that were wrapped."""

    text: str = Field(..., description="TSX source after the rewrite (or the untouched input).")
    ids: GenUiIds = Field(default_factory=GenUiIds)


__all__ = ["GenUiIds", "GenUiEdit", "IdSet"]
