"""In-memory method catalog with exact title lookup and suggestions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from methodlib.domain.model import Method, Stage
from methodlib.domain.place_notation import PnParseError, parse_place_notation
from methodlib.domain.query import NotFound, PnParseErr, Success
from methodlib.domain.suggestions import rank_suggestions

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from methodlib.domain.model import Classification
    from methodlib.domain.ports import PlaceNotationParser
    from methodlib.domain.query import QueryResult
    from methodlib.domain.suggestions import Suggestion

log = logging.getLogger(__name__)


class DuplicateTitleError(ValueError):
    """Raised when a title occurs twice within the same stage."""

    def __init__(self, stage: Stage, title: str) -> None:
        super().__init__(f"duplicate title {title!r} for stage {stage.display_name}")
        self.stage = stage
        self.title = title


@dataclass(frozen=True, slots=True)
class CompactMethod:
    """Stored form of a method: everything except its title and stage, unparsed."""

    name: str
    classification: Classification
    place_notation: str

    def to_method(
        self,
        stage: Stage,
        title: str,
        *,
        parser: PlaceNotationParser = parse_place_notation,
    ) -> Method:
        """Parse the stored notation into a full ``Method``.

        Raises:
            PnParseError: if the stored notation is malformed.
        """
        return Method(
            title=title,
            name=self.name,
            classification=self.classification,
            block=parser(self.place_notation, stage),
        )


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    stage: Stage
    title: str
    method: CompactMethod


type LibraryMap = dict[Stage, dict[str, CompactMethod]]


class MethodCatalog:
    """A read-only library of methods, keyed by stage and then by title.

    The catalog copies its input on construction and is never mutated
    afterwards, so it can be shared between threads without locking. To change
    its contents, build a new catalog.
    """

    def __init__(
        self,
        methods: Mapping[Stage, Mapping[str, CompactMethod]] | None = None,
        *,
        parser: PlaceNotationParser | None = None,
    ) -> None:
        self._methods: LibraryMap = {
            Stage(stage): dict(by_title) for stage, by_title in (methods or {}).items()
        }
        self._parser: PlaceNotationParser = parser or parse_place_notation
        log.debug(
            "Built method catalog: %s methods across %s stages",
            len(self),
            len(self._methods),
        )

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[CatalogEntry],
        *,
        parser: PlaceNotationParser | None = None,
    ) -> MethodCatalog:
        """Build a catalog from flat entries, rejecting repeated titles within a stage."""

        methods: LibraryMap = {}
        for entry in entries:
            by_title = methods.setdefault(entry.stage, {})
            if entry.title in by_title:
                raise DuplicateTitleError(entry.stage, entry.title)
            by_title[entry.title] = entry.method
        return cls(methods, parser=parser)

    def __len__(self) -> int:
        return sum(len(by_title) for by_title in self._methods.values())

    def __repr__(self) -> str:
        return f"MethodCatalog(methods={len(self)}, stages={len(self._methods)})"

    @property
    def stages(self) -> tuple[Stage, ...]:
        return tuple(sorted(self._methods))

    def titles(self, stage: Stage | None = None) -> Iterator[str]:
        """Yield stored titles, for one stage or for all of them."""
        if stage is not None:
            yield from self._methods.get(stage, {})
            return
        for by_title in self._methods.values():
            yield from by_title

    def entries(self) -> Iterator[CatalogEntry]:
        """Yield every stored method, ordered by stage and then title."""
        for stage in self.stages:
            by_title = self._methods[stage]
            for title in sorted(by_title):
                yield CatalogEntry(stage=stage, title=title, method=by_title[title])

    def get_compact(self, stage: Stage, title: str) -> CompactMethod | None:
        return self._methods.get(stage, {}).get(title)

    def get_by_title(self, title: str) -> QueryResult[None]:
        """Look up a method by its exact title.

        The stage is taken from the last word of the title, so ``"Plain Bob
        Major"`` is only searched for among the Major methods.
        """

        tokens = title.rsplit(maxsplit=1)
        if not tokens:
            return NotFound(None)
        stage = Stage.from_lower_case_name(tokens[-1].lower())
        if stage is None:
            return NotFound(None)

        compact = self.get_compact(stage, title)
        if compact is None:
            return NotFound(None)

        try:
            method = compact.to_method(stage, title, parser=self._parser)
        except PnParseError as exc:
            log.error(
                "Catalog holds malformed place notation for %r: %r (%s)",
                title,
                compact.place_notation,
                exc,
            )
            return PnParseErr(place_notation=compact.place_notation, error=exc)
        return Success(method)

    def get_by_title_with_suggestions(
        self,
        title: str,
        num_suggestions: int,
    ) -> QueryResult[list[Suggestion]]:
        """Look up a method, suggesting close titles if it does not exist.

        Suggestions are only computed when the title is not found. They are
        ranked by Levenshtein distance, closest first, with ties in title order,
        and drawn from every stage since the query's stage may itself be wrong.

        ``num_suggestions`` is only consulted once the title is known to be
        missing, so a found title is returned even when it is negative.

        Raises:
            ValueError: if the title is not found and ``num_suggestions`` is
                negative.
        """

        return self.get_by_title(title).map_not_found(
            lambda _: self.suggest(title, num_suggestions)
        )

    def suggest(self, title: str, num_suggestions: int) -> list[Suggestion]:
        """Rank every stored title against ``title``; scans the whole catalog."""
        if num_suggestions < 0:
            raise ValueError("num_suggestions must be non-negative")
        return rank_suggestions(title, self.titles(), num_suggestions)
