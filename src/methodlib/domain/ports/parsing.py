"""Ports for turning stored notation into permutations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from methodlib.domain.model import Stage
    from methodlib.domain.place_notation import PnBlock


@runtime_checkable
class PlaceNotationParser(Protocol):
    """Callable port parsing place notation against a stage.

    Implementations raise ``PnParseError`` for malformed notation.
    """

    def __call__(self, notation: str, stage: Stage) -> PnBlock: ...


__all__ = ["PlaceNotationParser"]
