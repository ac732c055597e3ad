"""Compact JSON (de)serialization for method catalogs."""

from __future__ import annotations

from .schema import CatalogDocument, MethodRecord, StageGroup
from .translator import (
    CatalogFormatError,
    catalog_to_document,
    decode_catalog,
    document_entries,
    encode_catalog,
)

__all__ = [
    "CatalogDocument",
    "CatalogFormatError",
    "MethodRecord",
    "StageGroup",
    "catalog_to_document",
    "decode_catalog",
    "document_entries",
    "encode_catalog",
]
