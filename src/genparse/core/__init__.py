"""Core package initializer for genparse.

Holds the shared plumbing used by every transform:
    from genparse.core.settings import settings, load_settings, Settings, get_logger
    from genparse.core.result import Result, ok, err
"""

from __future__ import annotations

__all__ = ["__doc__"]
