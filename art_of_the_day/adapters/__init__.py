"""Artwork source registry and utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import ArtworkSource

# Registry of available sources
_SOURCES: dict[str, type[ArtworkSource]] = {}


def register(cls: type["ArtworkSource"]) -> type["ArtworkSource"]:
    """Decorator to register a source class."""
    _SOURCES[cls.short_name] = cls
    return cls


def get_source(short_name: str) -> "ArtworkSource":
    """Get a source instance by short name (e.g., 'AIC', 'AIC-SEARCH')."""
    if short_name not in _SOURCES:
        available = ", ".join(_SOURCES.keys()) or "none"
        raise ValueError(f"Unknown source: {short_name}. Available: {available}")
    return _SOURCES[short_name]()


def get_source_names() -> dict[str, str]:
    """Return dict mapping short_name -> full_name."""
    return {name: cls.name for name, cls in _SOURCES.items()}


# Import sources to trigger registration
# These imports must come after the registry is defined
from . import aic  # noqa: E402, F401
