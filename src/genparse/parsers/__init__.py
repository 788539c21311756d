from __future__ import annotations

from .yaml_doc import parse_yaml

__all__ = ["parse_yaml"]
