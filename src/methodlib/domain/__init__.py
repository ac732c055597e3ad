"""Catalog core: stages, methods, lookup and suggestions."""

from __future__ import annotations

from .catalog import CatalogEntry, CompactMethod, DuplicateTitleError, MethodCatalog
from .place_notation import PlaceNotation, PnBlock, PnErrorKind, PnParseError, parse_place_notation
from .query import (
    NotFound,
    PnParseErr,
    QueryResult,
    QueryStatus,
    QueryUnwrapError,
    Success,
)
from .suggestions import Shortlist, Suggestion, rank_suggestions

__all__ = [
    "CatalogEntry",
    "CompactMethod",
    "DuplicateTitleError",
    "MethodCatalog",
    "NotFound",
    "PlaceNotation",
    "PnBlock",
    "PnErrorKind",
    "PnParseErr",
    "PnParseError",
    "QueryResult",
    "QueryStatus",
    "QueryUnwrapError",
    "Shortlist",
    "Success",
    "Suggestion",
    "parse_place_notation",
    "rank_suggestions",
]
