"""YAML payload parser for generated content.

Generators are prompted to answer with a single YAML document. This module
decodes that document with PyYAML and reports any failure as ``None``
instead of an exception.

Scalars are resolved with the YAML 1.2 core schema: ``yes``, ``NO``, ``on``
stay strings, ``010`` is the integer ten, and dates stay strings. PyYAML's
default resolvers follow YAML 1.1, so :class:`CoreSchemaLoader` replaces them.

The input is the ``generated`` envelope produced upstream: either a mapping
with a ``text`` key or any object exposing a ``text`` attribute. A document
that decodes to ``null`` (empty text, a bare ``~``, comments only) counts as a
failure, not as an empty result.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import yaml

from genparse.core.result import Result, err, ok
from genparse.core.settings import get_logger

logger = get_logger(__name__)


class CoreSchemaLoader(yaml.SafeLoader):
    """``SafeLoader`` resolving plain scalars with the YAML 1.2 core schema."""

    yaml_implicit_resolvers: dict[Any, Any] = {}


def _construct_int(loader: CoreSchemaLoader, node: yaml.ScalarNode) -> int:
    value = str(loader.construct_scalar(node))
    if value.startswith("0o"):
        return int(value[2:], 8)
    if value.startswith("0x"):
        return int(value[2:], 16)
    return int(value, 10)


CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:null",
    re.compile(r"^(?:~|null|Null|NULL|)$"),
    [*"~nN", ""],
)
CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)
# int before float: "10" matches both.
CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:int",
    re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"),
    list("-+0123456789"),
)
CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:float",
    re.compile(
        r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
        r"|[-+]?\.(?:inf|Inf|INF)|\.(?:nan|NaN|NAN))$"
    ),
    list("-+0123456789."),
)
CoreSchemaLoader.add_constructor("tag:yaml.org,2002:int", _construct_int)


def _generated_text(generated: object) -> str | None:
    """Return the ``text`` carried by a mapping or attribute-style envelope."""
    if generated is None:
        return None
    if isinstance(generated, Mapping):
        text = generated.get("text")
    else:
        text = getattr(generated, "text", None)
    return text if isinstance(text, str) and text else None


def _decode(generated: object) -> Result[Any, str]:
    text = _generated_text(generated)
    if text is None:
        return err("> invalid : null or missing text in generated content")

    try:
        parsed = yaml.load(text, Loader=CoreSchemaLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        return err(f"> invalid : {exc}")

    if parsed is None:
        return err("> invalid : YAML parsing resulted in null")
    return ok(parsed)


def parse_yaml(generated: object, query: object | None = None) -> Any | None:
    """Decode the YAML document in ``generated.text``.

    Parameters
    ----------
    generated:
        ``{"text": "..."}`` mapping (or object with a ``text`` attribute).
    query:
        The prompt that produced ``generated``. Accepted so callers can pass
        their whole generation record; it does not influence parsing.

    Returns
    -------
    Any | None
        The decoded value tree (mapping, list or scalar), or ``None``.
    """
    try:
        outcome = _decode(generated)
    except Exception as exc:  # noqa: BLE001
        outcome = err(f"> unexpected : {exc!r}")
    return outcome.unwrap_or_log(logger, "parse_yaml", None)


__all__ = ["CoreSchemaLoader", "parse_yaml"]
