"""Coroutine facades over the synchronous transforms.

Callers running on an event loop (API handlers, generation pipelines) use::

    from genparse import extract, parse, edit

    block = await extract.backticks(completion)
    blocks = await extract.backticks_multiple(completion, ["tsx", "css"])
    needs = await extract.decorators(block.text)
    doc = await parse.yaml({"text": completion})
    page = await edit.gen_ui(tsx)

Every member wraps the pure function of the same contract; none of them
suspends, so they are safe to ``asyncio.gather`` over any inputs.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from genparse.core.contracts import Annotation, Extraction, GenUiEdit
from genparse.editors.genui import edit_gen_ui
from genparse.extractors.decorators import extract_decorators
from genparse.extractors.fences import extract_backticks, extract_backticks_multiple
from genparse.parsers.yaml_doc import parse_yaml


class _Extract:
    """``extract.*`` entry points."""

    async def backticks(self, text: str | None) -> Extraction | None:
        return extract_backticks(text)

    async def backticks_multiple(
        self, text: str | None, delimiters: Sequence[str] | None
    ) -> dict[str, str] | None:
        return extract_backticks_multiple(text, delimiters)

    async def decorators(self, code: str | None) -> list[Annotation]:
        return extract_decorators(code)


class _Parse:
    """``parse.*`` entry points."""

    async def yaml(self, generated: object, query: object | None = None) -> Any | None:
        return parse_yaml(generated, query)


class _Edit:
    """``edit.*`` entry points."""

    async def gen_ui(self, tsx: str | None) -> GenUiEdit:
        return edit_gen_ui(tsx)


extract = _Extract()
parse = _Parse()
edit = _Edit()

__all__ = ["extract", "parse", "edit"]
