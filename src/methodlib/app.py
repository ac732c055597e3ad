"""Application entry points for looking methods up by title."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from methodlib.config import get_lookup_config
from methodlib.domain.query import NotFound, PnParseErr, Success

if TYPE_CHECKING:
    from methodlib.config import LookupConfig
    from methodlib.domain.catalog import MethodCatalog
    from methodlib.domain.query import QueryResult
    from methodlib.domain.suggestions import Suggestion


log = getLogger(__name__)


def find_method(
    catalog: MethodCatalog,
    title: str,
    *,
    num_suggestions: int | None = None,
    config: LookupConfig | None = None,
) -> QueryResult[list[Suggestion]]:
    """Look ``title`` up in ``catalog``, suggesting alternatives if it is missing.

    ``num_suggestions`` defaults to the configured suggestion limit. Outcomes are
    logged at INFO (found) or WARNING (missing or unparseable).
    """

    limit = num_suggestions
    if limit is None:
        limit = (config or get_lookup_config()).suggestion_limit

    result = catalog.get_by_title_with_suggestions(title, limit)
    match result:
        case Success(method=method):
            log.info(
                "Found %r (%s, %s changes)",
                title,
                method.stage.display_name,
                method.lead_length,
            )
        case PnParseErr(place_notation=place_notation, error=error):
            # The catalog has already logged the corrupt record at ERROR
            log.warning(
                "Method %r is stored with unparseable place notation %r: %s",
                title,
                place_notation,
                error,
            )
        case NotFound(payload=suggestions):
            log.warning(
                "No method titled %r; closest: %s",
                title,
                ", ".join(f"{s.title!r} ({s.distance})" for s in suggestions) or "none",
            )
    return result
