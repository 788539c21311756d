"""
``@need`` annotation scanner for generated source code.

Code generators leave inline requests such as::

    // @need:api:fetch the current user profile

wherever they could not implement something themselves. This module finds
those markers and returns each one with a window of surrounding lines, so a
follow-up generation step sees the marker in context.

Marker syntax
-------------
``@need:<type>:<description>`` where ``<type>`` contains no colon and
``<description>`` runs to the end of the line. Both parts are stripped; a
marker with an empty part is logged and skipped.

Snippet window
--------------
``snippet_before`` lines above and ``snippet_after`` lines below the marker
(5 and 15 by default, see :mod:`genparse.core.settings`), clamped to the
source, framed by :data:`ELISION` lines.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from genparse.core.contracts.annotation import Annotation
from genparse.core.result import Result, err, ok
from genparse.core.settings import get_logger, load_settings

ELISION = "{/*...*/}"

_NEED = re.compile(r"@need:([^:]+):(.+)")

logger = get_logger(__name__)


def _window(lines: Sequence[str], index: int, before: int, after: int) -> str:
    """Return the lines around ``index`` framed by elision markers."""
    start = max(0, index - before)
    end = min(len(lines), index + after + 1)
    return f"{ELISION}\n" + "\n".join(lines[start:end]) + f"\n{ELISION}"


def _scan(code: object, before: int, after: int) -> Result[list[Annotation], str]:
    if not code or not isinstance(code, str):
        return err("> invalid : null or missing code input")

    lines = code.split("\n")
    found: list[Annotation] = []

    for index, line in enumerate(lines):
        match = _NEED.search(line)
        if not match:
            continue

        kind = match.group(1).strip()
        description = match.group(2).strip()
        if not kind or not description:
            logger.warning("extract_decorators:warn invalid decorator format at line %d", index + 1)
            continue

        found.append(
            Annotation(
                type=kind,
                description=description,
                snippet=_window(lines, index, before, after),
                line_number=index + 1,
            )
        )

    logger.debug("extract_decorators: %d annotation(s)", len(found))
    return ok(found)


def extract_decorators(
    code: str | None,
    *,
    before: int | None = None,
    after: int | None = None,
) -> list[Annotation]:
    """Collect every well-formed ``@need`` marker in ``code``.

    Parameters
    ----------
    code:
        Generated source text.
    before, after:
        Context lines kept above / below each marker. Default to the
        configured ``snippet_before`` / ``snippet_after``.

    Returns
    -------
    list[Annotation]
        Annotations in source order. Empty when nothing is found or the input
        is unusable.
    """
    config = load_settings()
    before = config.snippet_before if before is None else before
    after = config.snippet_after if after is None else after

    try:
        outcome = _scan(code, max(0, before), max(0, after))
    except Exception as exc:  # noqa: BLE001
        outcome = err(f"> unexpected : {exc!r}")
    return outcome.unwrap_or_log(logger, "extract_decorators", [])


__all__ = ["ELISION", "extract_decorators"]
