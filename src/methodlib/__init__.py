from __future__ import annotations

from importlib import metadata

from methodlib.adapters.interchange import CatalogFormatError, decode_catalog, encode_catalog
from methodlib.app import find_method
from methodlib.config import configure_logging
from methodlib.domain import (
    CatalogEntry,
    CompactMethod,
    DuplicateTitleError,
    MethodCatalog,
    NotFound,
    PnParseErr,
    PnParseError,
    QueryResult,
    QueryUnwrapError,
    Success,
    Suggestion,
)
from methodlib.domain.model import Classification, Method, MethodClass, Stage

try:
    __version__ = metadata.version("methodlib")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "CatalogEntry",
    "CatalogFormatError",
    "Classification",
    "CompactMethod",
    "DuplicateTitleError",
    "Method",
    "MethodCatalog",
    "MethodClass",
    "NotFound",
    "PnParseErr",
    "PnParseError",
    "QueryResult",
    "QueryUnwrapError",
    "Stage",
    "Success",
    "Suggestion",
    "__version__",
    "configure_logging",
    "decode_catalog",
    "encode_catalog",
    "find_method",
]
