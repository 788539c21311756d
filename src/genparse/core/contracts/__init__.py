"""Pydantic contracts returned by the genparse transforms."""

from __future__ import annotations

from .annotation import Annotation
from .extraction import Extraction
from .genui import GenUiEdit, GenUiIds

__all__ = ["Annotation", "Extraction", "GenUiEdit", "GenUiIds"]
