"""Translate between ``MethodCatalog`` and the compact JSON format."""

from __future__ import annotations

from itertools import groupby
from logging import getLogger
from operator import attrgetter
from typing import TYPE_CHECKING

from pydantic import ValidationError

from methodlib.domain.catalog import CatalogEntry, CompactMethod, DuplicateTitleError, MethodCatalog
from methodlib.domain.model import Classification

from .schema import CatalogDocument, MethodRecord, StageGroup

if TYPE_CHECKING:
    from collections.abc import Iterator

    from methodlib.domain.ports import PlaceNotationParser

log = getLogger(__name__)


class CatalogFormatError(ValueError):
    """Raised when a serialized catalog cannot be decoded."""


def encode_catalog(catalog: MethodCatalog, *, indent: int | None = None) -> str:
    """Serialize ``catalog`` to JSON; stages ascend and titles are sorted within each."""

    return catalog_to_document(catalog).model_dump_json(by_alias=True, indent=indent)


def decode_catalog(
    payload: str | bytes,
    *,
    parser: PlaceNotationParser | None = None,
) -> MethodCatalog:
    """Build a catalog from JSON produced by ``encode_catalog``.

    Place notation is stored verbatim and only parsed on lookup, so malformed
    notation decodes fine and later surfaces as ``PnParseErr``.

    Raises:
        CatalogFormatError: if the document does not match the schema or repeats
            a title within a stage.
    """

    try:
        document = CatalogDocument.model_validate_json(payload)
    except ValidationError as exc:
        raise CatalogFormatError(
            f"Invalid catalog document ({exc.error_count()} errors): {exc}"
        ) from exc

    try:
        catalog = MethodCatalog.from_entries(document_entries(document), parser=parser)
    except DuplicateTitleError as exc:
        raise CatalogFormatError(str(exc)) from exc

    log.info(
        "Decoded method catalog: %s methods across %s stages",
        len(catalog),
        len(catalog.stages),
    )
    return catalog


def catalog_to_document(catalog: MethodCatalog) -> CatalogDocument:
    groups = [
        StageGroup(stage=stage, methods=[_to_record(entry) for entry in entries])
        for stage, entries in groupby(catalog.entries(), key=attrgetter("stage"))
    ]
    return CatalogDocument(stages=groups)


def document_entries(document: CatalogDocument) -> Iterator[CatalogEntry]:
    for group in document.stages:
        for record in group.methods:
            yield CatalogEntry(stage=group.stage, title=record.title, method=_to_compact(record))


def _to_record(entry: CatalogEntry) -> MethodRecord:
    classification = entry.method.classification
    return MethodRecord(
        title=entry.title,
        name=entry.method.name,
        method_class=classification.method_class,
        little=classification.little,
        differential=classification.differential,
        place_notation=entry.method.place_notation,
    )


def _to_compact(record: MethodRecord) -> CompactMethod:
    return CompactMethod(
        name=record.name,
        classification=Classification(
            method_class=record.method_class,
            little=record.little,
            differential=record.differential,
        ),
        place_notation=record.place_notation,
    )
