"""
Fenced-block extractors for raw LLM completions.

Completions routinely wrap the payload we want (code, YAML, JSON) in Markdown
fences and surround it with chatty prose. This module recovers the fenced
bodies without trying to be a Markdown parser.

Two strategies are offered:

``extract_backticks``
    Treat the *first* and *last* fence lines in the text as the outer pair and
    return everything in between, trimmed. Nested or intermediate fences are
    kept verbatim inside the body. A language tag on the opening line
    (``yaml``, ``tsx`` ...) is ignored.

``extract_backticks_multiple``
    Pull several labeled blocks (fences tagged ``tsx``, ``css`` ...)
    out of one completion. Labels are searched in the order given by the
    caller and each search starts after the previously consumed block, so the
    caller's order must match the order of the blocks in the text. A missing
    label is logged and skipped; the remaining labels are still tried.

Both functions are best-effort: malformed input produces ``None`` plus a
log line, never an exception.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from genparse.core.contracts.extraction import Extraction
from genparse.core.result import Result, err, ok
from genparse.core.settings import get_logger

FENCE = "```"

# Trimmed from extracted bodies: Unicode whitespace plus the U+FEFF byte-order mark.
_EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

logger = get_logger(__name__)


# ===========================================================================
# Helpers
# ===========================================================================


def _find_line(lines: Sequence[str], needle: str, start: int = 0) -> int:
    """Return the index of the first line at or after ``start`` containing ``needle``.

    Returns ``-1`` when no such line exists.
    """
    for index in range(start, len(lines)):
        if needle in lines[index]:
            return index
    return -1


def _find_last_line(lines: Sequence[str], needle: str) -> int:
    """Return the index of the last line containing ``needle`` (``-1`` if none)."""
    for index in range(len(lines) - 1, -1, -1):
        if needle in lines[index]:
            return index
    return -1


# ===========================================================================
# Single block
# ===========================================================================


def _trim(value: str) -> str:
    """Strip surrounding whitespace, byte-order marks included."""
    return _EDGE_SPACE.sub("", value)


def _outer_span(text: object) -> Result[tuple[list[str], int, int], str]:
    """Locate the first and last fence lines."""
    if not text or not isinstance(text, str):
        return err("> invalid : null or non-string input")

    lines = text.split("\n")
    first = _find_line(lines, FENCE)
    last = _find_last_line(lines, FENCE)

    if first == -1:
        return err("> invalid : no opening backticks found")
    if last == -1:
        return err("> invalid : no closing backticks found")
    if last <= first:
        return err("> invalid : malformed backtick structure")
    return ok((lines, first, last))


def _non_empty(content: str) -> Result[str, str]:
    if not content:
        return err("> invalid : empty content between backticks")
    return ok(content)


def _outer_block(text: object) -> Result[Extraction, str]:
    return (
        _outer_span(text)
        .map(lambda span: _trim("\n".join(span[0][span[1] + 1 : span[2]])))
        .flat_map(_non_empty)
        .map(lambda content: Extraction(text=content))
    )


def extract_backticks(text: str | None) -> Extraction | None:
    """Return the trimmed body between the first and last fence lines.

    Parameters
    ----------
    text:
        Raw completion text.

    Returns
    -------
    Extraction | None
        ``Extraction(text=...)`` on success. ``None`` if the input is empty,
        has fewer than two fence lines, or the fenced body is blank.

    Examples
    --------
    >>> extract_backticks("```\\nhello\\n```")
    Extraction(text='hello')
    >>> extract_backticks("```\\n```") is None
    True
    """
    try:
        outcome = _outer_block(text)
    except Exception as exc:  # noqa: BLE001
        outcome = err(f"> unexpected : {exc!r}")
    return outcome.unwrap_or_log(logger, "extract_backticks", None)


# ===========================================================================
# Labeled blocks
# ===========================================================================


@dataclass(frozen=True, slots=True)
class BlockHit:
    """A labeled block located in the line list.

    ``close`` is the index of the closing fence line; the next search starts
    right after it.
    """

    label: str
    body: str
    close: int


def _locate_block(lines: Sequence[str], label: str, cursor: int) -> Result[BlockHit, str]:
    """Find the block opened by ``FENCE + label`` at or after ``cursor``."""
    opening = _find_line(lines, f"{FENCE}{label}", cursor)
    if opening == -1:
        return err(f'no opening backticks found for delimiter "{label}"')

    closing = _find_line(lines, FENCE, opening + 1)
    if closing == -1:
        return err(f'no closing backticks found for delimiter "{label}"')

    body = "\n".join(lines[opening + 1 : closing])
    return ok(BlockHit(label=label, body=body, close=closing))


def _scan_blocks(text: str, delimiters: Sequence[str]) -> tuple[dict[str, str], int]:
    """Walk ``delimiters`` in order, folding each outcome into a partial mapping.

    Returns
    -------
    tuple[dict[str, str], int]
        The labels that were found with their raw bodies, and the number of
        labels that were skipped.
    """
    lines = text.split("\n")
    found: dict[str, str] = {}
    misses = 0
    cursor = 0

    for label in delimiters:
        if cursor >= len(lines):
            break

        outcome = _locate_block(lines, label, cursor)
        if outcome.is_err():
            logger.warning("extract_backticks_multiple:warn %s", outcome.unwrap_err())
            misses += 1
            continue

        hit = outcome.unwrap()
        found[hit.label] = hit.body
        cursor = hit.close + 1

    return found, misses


def _labeled_blocks(text: object, delimiters: object) -> Result[dict[str, str], str]:
    if (
        not text
        or not isinstance(text, str)
        or isinstance(delimiters, str)
        or not isinstance(delimiters, Sequence)
        or len(delimiters) == 0
    ):
        return err("> invalid : missing text or delimiters")

    found, misses = _scan_blocks(text, [str(d) for d in delimiters])
    if not found:
        return err(f"> invalid : none of {len(delimiters)} delimiters matched")

    logger.debug(
        "extract_backticks_multiple: %d found, %d skipped", len(found), misses
    )
    return ok(found)


def extract_backticks_multiple(
    text: str | None,
    delimiters: Sequence[str] | None,
) -> dict[str, str] | None:
    """Extract several labeled fenced blocks in one pass.

    Parameters
    ----------
    text:
        Raw completion text.
    delimiters:
        Labels expected right after the opening fence (``"tsx"`` matches a
        fence line tagged ``tsx``), in the order the blocks appear.

    Returns
    -------
    dict[str, str] | None
        Mapping of matched label to raw (untrimmed) body. Labels that were not
        found are omitted. ``None`` if nothing matched or the input is invalid.
    """
    try:
        outcome = _labeled_blocks(text, delimiters)
    except Exception as exc:  # noqa: BLE001
        outcome = err(f"> unexpected : {exc!r}")
    return outcome.unwrap_or_log(logger, "extract_backticks_multiple", None)


__all__ = ["FENCE", "BlockHit", "extract_backticks", "extract_backticks_multiple"]
