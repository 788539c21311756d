"""
GenUI reference rewriter for generated TSX modules.

A generated page imports the sections and views it renders from two fixed
locations::

    import HeroSection from '@/components/sections/HeroSection';
    import Dashboard from '@/components/views/Dashboard';

Those components do not exist yet when the page is generated, so the page is
rewritten to render them through generic wrappers instead:

1. **Filter** - every import line mentioning a tracked prefix is dropped and
   the imported name (second space-separated token) is recorded for its
   category. Sections are checked before views; other lines, blank ones
   included, are kept as-is.
2. **Substitute** - for each category that was seen, one wrapper import is
   prepended and every ``<Name`` becomes ``<GenUiSection id="Name"`` (or
   ``<GenUiView id="Name"``).

The substitution is a plain substring replacement of ``<Name``: a recorded
name that prefixes another tag name (``<Hero`` inside ``<HeroBanner``) is
rewritten as well.

Failures never propagate. Empty input comes back unchanged; an unexpected
error returns the original text with no ids.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from genparse.core.contracts.genui import GenUiEdit, GenUiIds
from genparse.core.result import Result, err, ok
from genparse.core.settings import get_logger

SECTIONS_PREFIX = "@/components/sections/"
VIEWS_PREFIX = "@/components/views/"

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Wrapper:
    """How one category of references is rewritten."""

    category: str
    prefix: str
    component: str
    source: str

    @property
    def import_line(self) -> str:
        return f"import {self.component} from '{self.source}';"

    def tag(self, name: str) -> str:
        return f'<{self.component} id="{name}"'


SECTION = Wrapper("sections", SECTIONS_PREFIX, "GenUiSection", "@/p0/genui/GenUiSection")
VIEW = Wrapper("views", VIEWS_PREFIX, "GenUiView", "@/p0/genui/GenUiView")

# Checked in order; a line is claimed by the first wrapper whose prefix it contains.
WRAPPERS: tuple[Wrapper, ...] = (SECTION, VIEW)


@dataclass
class _Collected:
    kept: list[str] = field(default_factory=list)
    ids: dict[str, list[str] | None] = field(
        default_factory=lambda: {w.category: None for w in WRAPPERS}
    )

    def record(self, wrapper: Wrapper, name: str) -> None:
        seen = self.ids[wrapper.category]
        if seen is None:
            seen = self.ids[wrapper.category] = []
        if name and name not in seen:
            seen.append(name)


def _imported_name(line: str) -> str:
    """Return the second space-separated token of ``line`` (``""`` if absent)."""
    parts = line.split(" ")
    return parts[1] if len(parts) > 1 else ""


def _filter(lines: list[str]) -> _Collected:
    collected = _Collected()
    for line in lines:
        if not line:
            collected.kept.append(line)
            continue

        wrapper = next((w for w in WRAPPERS if w.prefix in line), None)
        if wrapper is None:
            collected.kept.append(line)
            continue
        collected.record(wrapper, _imported_name(line))

    return collected


def _substitute(text: str, collected: _Collected) -> str:
    for wrapper in WRAPPERS:
        names = collected.ids[wrapper.category]
        if names is None:
            continue
        text = f"{wrapper.import_line}\n{text}"
        for name in names:
            text = text.replace(f"<{name}", wrapper.tag(name))
    return text


def _rewrite(tsx: str) -> Result[GenUiEdit, str]:
    collected = _filter(tsx.split("\n"))
    text = _substitute("\n".join(collected.kept), collected)

    ids = GenUiIds(**{k: False if v is None else v for k, v in collected.ids.items()})
    logger.debug("edit_gen_ui: sections=%s views=%s", ids.sections, ids.views)
    return ok(GenUiEdit(text=text, ids=ids))


def edit_gen_ui(tsx: str | None) -> GenUiEdit:
    """Replace generated section/view imports with GenUI wrapper tags.

    Parameters
    ----------
    tsx:
        Generated TSX module source.

    Returns
    -------
    GenUiEdit
        The rewritten text and the identifiers found per category. On empty
        or unusable input, and on any internal error, the input text is
        returned untouched with both categories set to ``False``.
    """
    original = tsx if isinstance(tsx, str) else ""
    if not tsx or not isinstance(tsx, str):
        outcome: Result[GenUiEdit, str] = err("> invalid : null or missing tsx input")
    else:
        try:
            outcome = _rewrite(tsx)
        except Exception as exc:  # noqa: BLE001
            outcome = err(f"> unexpected : {exc!r}")

    return outcome.unwrap_or_log(logger, "edit_gen_ui", GenUiEdit(text=original))


__all__ = ["SECTIONS_PREFIX", "VIEWS_PREFIX", "WRAPPERS", "Wrapper", "edit_gen_ui"]
