from __future__ import annotations

from .genui import SECTIONS_PREFIX, VIEWS_PREFIX, edit_gen_ui

__all__ = ["SECTIONS_PREFIX", "VIEWS_PREFIX", "edit_gen_ui"]
