"""Outcome of a catalog lookup.

A lookup ends in exactly one of three variants:

- ``Success``: the title exists and its place notation parsed
- ``PnParseErr``: the title exists but the stored notation is malformed, which
  means the catalog data is corrupt rather than the query being wrong
- ``NotFound``: the title does not exist; the payload is ``None`` for a plain
  lookup and the ranked suggestions for a suggestion lookup

``map_not_found`` rewrites only the ``NotFound`` payload, so higher-level lookups
reuse the first two variants unchanged.

``unwrap`` and ``unwrap_parse_err`` are assertions for callers that have already
established the outcome (e.g. tests against a known-good catalog). They raise
``QueryUnwrapError`` on the wrong variant and must not be used for control flow;
match on the variants instead.

``unwrap_parse_err`` hands back the ``Success`` or ``NotFound`` itself rather
than a separate two-way result: with ``PnParseErr`` ruled out, the remaining
variants already are that result and keep their ``status`` for matching.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Literal, NoReturn

if TYPE_CHECKING:
    from collections.abc import Callable

    from methodlib.domain.model import Method
    from methodlib.domain.place_notation import PnParseError


class QueryStatus(StrEnum):
    SUCCESS = "success"
    PN_PARSE_ERROR = "pn_parse_error"
    NOT_FOUND = "not_found"


class QueryUnwrapError(RuntimeError):
    """Raised when a forced accessor is called on the wrong query variant."""


@dataclass(frozen=True, slots=True)
class Success:
    """Title resolved and its notation parsed."""

    method: Method
    status: Literal[QueryStatus.SUCCESS] = field(default=QueryStatus.SUCCESS, init=False)

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_not_found(self) -> bool:
        return False

    def map_not_found(self, func: Callable[..., object]) -> Success:  # noqa: ARG002
        return self

    def unwrap(self) -> Method:
        return self.method

    def unwrap_parse_err(self) -> Success:
        return self


@dataclass(frozen=True, slots=True)
class PnParseErr:
    """Title found, but the stored place notation is malformed."""

    place_notation: str
    error: PnParseError
    status: Literal[QueryStatus.PN_PARSE_ERROR] = field(
        default=QueryStatus.PN_PARSE_ERROR, init=False
    )

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_not_found(self) -> bool:
        return False

    def map_not_found(self, func: Callable[..., object]) -> PnParseErr:  # noqa: ARG002
        return self

    def unwrap(self) -> NoReturn:
        raise QueryUnwrapError(self._describe()) from self.error

    def unwrap_parse_err(self) -> NoReturn:
        raise QueryUnwrapError(self._describe()) from self.error

    def _describe(self) -> str:
        return f"Error parsing {self.place_notation!r}: {self.error}"


@dataclass(frozen=True, slots=True)
class NotFound[T]:
    """No method with the requested title."""

    payload: T
    status: Literal[QueryStatus.NOT_FOUND] = field(default=QueryStatus.NOT_FOUND, init=False)

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_not_found(self) -> bool:
        return True

    def map_not_found[U](self, func: Callable[[T], U]) -> NotFound[U]:
        return NotFound(func(self.payload))

    def unwrap(self) -> NoReturn:
        raise QueryUnwrapError("unwrap called on a NotFound query result")

    def unwrap_parse_err(self) -> NotFound[T]:
        return self


type QueryResult[T] = Success | PnParseErr | NotFound[T]
