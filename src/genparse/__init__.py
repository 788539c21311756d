"""genparse: best-effort extraction of structured fragments from LLM output.

The package exposes three facades mirroring the operations downstream
consumers reach for most often:

- ``extract``: fenced blocks (single or labeled) and ``@need:`` annotations
- ``parse``  : YAML payloads
- ``edit``   : GenUI component-reference rewriting

Each facade member is a coroutine; the synchronous implementations live in
``genparse.extractors``, ``genparse.parsers`` and ``genparse.editors``.
"""

from __future__ import annotations

from genparse.facade import edit, extract, parse

__all__ = ["__version__", "extract", "parse", "edit"]
__version__ = "0.1.0"
