"""Domain port definitions for collaborators."""

from __future__ import annotations

from .parsing import PlaceNotationParser

__all__ = ["PlaceNotationParser"]
