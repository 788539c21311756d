"""Extractors that pull fenced blocks and ``@need`` markers out of completions."""

from __future__ import annotations

from .decorators import ELISION, extract_decorators
from .fences import FENCE, extract_backticks, extract_backticks_multiple

__all__ = [
    "ELISION",
    "FENCE",
    "extract_backticks",
    "extract_backticks_multiple",
    "extract_decorators",
]
