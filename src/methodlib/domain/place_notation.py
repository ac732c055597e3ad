"""Place notation: the compact textual encoding of a method's changes.

Grammar accepted here (the Central Council library dialect):

- ``x``/``X``/``-`` is a cross change (every pair swaps); only valid on even stages
- a run of bell names (``1234567890ETABCDFGHJKL``) lists the places made
- ``.`` or whitespace separates two adjacent place groups
- ``,`` splits the notation into sections; with more than one section each
  section is palindromic (``x18x18x18x18,12`` is Plain Bob Major)
- a section prefixed with ``&`` is always palindromic, one prefixed with ``+``
  never is

Implicit external places are filled in, so ``3`` on Doubles is ``3`` and ``1``
on Minor is ``16``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from itertools import pairwise
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

    from methodlib.domain.model.stage import Stage

type Row = tuple[int, ...]

BELL_NAMES: Final[str] = "1234567890ETABCDFGHJKL"
_PLACE_BY_CHAR: Final[dict[str, int]] = {char: index for index, char in enumerate(BELL_NAMES)}
_CROSS_CHARS: Final[frozenset[str]] = frozenset("xX-")
_SYMMETRIC_PREFIX = "&"
_ASYMMETRIC_PREFIX = "+"


class PnErrorKind(StrEnum):
    EMPTY = "empty"
    UNKNOWN_CHARACTER = "unknown_character"
    PLACE_OUT_OF_STAGE = "place_out_of_stage"
    ODD_STAGE_CROSS = "odd_stage_cross"
    AMBIGUOUS_PLACES = "ambiguous_places"


class PnParseError(ValueError):
    """Raised when place notation cannot be parsed against a stage."""

    def __init__(self, kind: PnErrorKind, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"


@dataclass(frozen=True, slots=True)
class PlaceNotation:
    """A single change: the places made, 0-indexed and sorted. No places means a cross.

    Every bell not making a place must have a partner to swap with, so each
    gap around the places must hold an even number of bells.

    Raises:
        PnParseError: if the places cannot form a change on ``stage``.
    """

    stage: Stage
    places: tuple[int, ...]

    def __post_init__(self) -> None:
        _check_change(self.stage, self.places)

    @property
    def is_cross(self) -> bool:
        return not self.places

    def permute(self, row: Row) -> Row:
        made = frozenset(self.places)
        out = list(row)
        index = 0
        while index < self.stage:
            if index in made:
                index += 1
                continue
            out[index], out[index + 1] = out[index + 1], out[index]
            index += 2
        return tuple(out)

    def __str__(self) -> str:
        if self.is_cross:
            return "x"
        return "".join(BELL_NAMES[place] for place in self.places)


@dataclass(frozen=True, slots=True)
class PnBlock:
    """A parsed sequence of changes, i.e. one lead of a method."""

    stage: Stage
    changes: tuple[PlaceNotation, ...]

    def __post_init__(self) -> None:
        for change in self.changes:
            if change.stage != self.stage:
                raise ValueError(
                    f"change {change} is on {change.stage} bells, block is on {self.stage}"
                )

    @classmethod
    def parse(cls, notation: str, stage: Stage) -> PnBlock:
        return parse_place_notation(notation, stage)

    def __len__(self) -> int:
        return len(self.changes)

    def iter_rows(self) -> Iterator[Row]:
        """Yield rounds, then the row after each change (ending on the lead head)."""
        row: Row = tuple(range(self.stage))
        yield row
        for change in self.changes:
            row = change.permute(row)
            yield row

    def rows(self) -> tuple[Row, ...]:
        return tuple(self.iter_rows())

    @property
    def lead_head(self) -> Row:
        *_, last = self.iter_rows()
        return last

    def __str__(self) -> str:
        parts: list[str] = []
        previous_was_cross = True
        for change in self.changes:
            if not change.is_cross and not previous_was_cross:
                parts.append(".")
            parts.append(str(change))
            previous_was_cross = change.is_cross
        return "".join(parts)


def parse_place_notation(notation: str, stage: Stage) -> PnBlock:
    """Parse ``notation`` against ``stage``.

    Raises:
        PnParseError: if the text is empty, contains characters that are not
            bell names or separators, or describes an impossible change.
    """

    if not notation.strip():
        raise PnParseError(PnErrorKind.EMPTY, "place notation is empty")

    bounds = list(_section_bounds(notation))
    palindromic_by_default = len(bounds) > 1
    changes: list[PlaceNotation] = []
    for start, end in bounds:
        changes.extend(
            _parse_section(
                notation,
                start,
                end,
                stage,
                palindromic_by_default=palindromic_by_default,
            )
        )
    return PnBlock(stage=stage, changes=tuple(changes))


def _section_bounds(notation: str) -> Iterator[tuple[int, int]]:
    start = 0
    while True:
        end = notation.find(",", start)
        if end == -1:
            yield start, len(notation)
            return
        yield start, end
        start = end + 1


def _parse_section(
    notation: str,
    start: int,
    end: int,
    stage: Stage,
    *,
    palindromic_by_default: bool,
) -> list[PlaceNotation]:
    palindromic = palindromic_by_default
    index = start
    while index < end and notation[index].isspace():
        index += 1
    if index < end and notation[index] in (_SYMMETRIC_PREFIX, _ASYMMETRIC_PREFIX):
        palindromic = notation[index] == _SYMMETRIC_PREFIX
        index += 1

    changes: list[PlaceNotation] = []
    pending: list[int] = []
    group_start = index
    for position in range(index, end):
        char = notation[position]
        if char == "." or char.isspace():
            if pending:
                changes.append(_close_group(pending, stage, group_start))
                pending = []
            continue
        if char in _CROSS_CHARS:
            if pending:
                changes.append(_close_group(pending, stage, group_start))
                pending = []
            if stage % 2 == 1:
                raise PnParseError(
                    PnErrorKind.ODD_STAGE_CROSS,
                    f"cross change is not possible on {stage} bells",
                    position=position,
                )
            changes.append(PlaceNotation(stage=stage, places=()))
            continue
        place = _PLACE_BY_CHAR.get(char.upper())
        if place is None:
            raise PnParseError(
                PnErrorKind.UNKNOWN_CHARACTER,
                f"unexpected character {char!r}",
                position=position,
            )
        if place >= stage:
            raise PnParseError(
                PnErrorKind.PLACE_OUT_OF_STAGE,
                f"place {char!r} is out of stage for {stage} bells",
                position=position,
            )
        if not pending:
            group_start = position
        pending.append(place)

    if pending:
        changes.append(_close_group(pending, stage, group_start))

    if not changes:
        raise PnParseError(PnErrorKind.EMPTY, "section contains no changes", position=start)

    if palindromic:
        changes.extend(reversed(changes[:-1]))
    return changes


def _close_group(places: list[int], stage: Stage, position: int) -> PlaceNotation:
    made = sorted(set(places))
    # An odd number of bells outside the outermost places forces an external place
    if made[0] % 2 == 1:
        made.insert(0, 0)
    if (stage - 1 - made[-1]) % 2 == 1:
        made.append(stage - 1)
    try:
        return PlaceNotation(stage=stage, places=tuple(made))
    except PnParseError as exc:
        raise PnParseError(exc.kind, exc.message, position=position) from None


def _check_change(stage: Stage, places: tuple[int, ...]) -> None:
    if not places:
        if stage % 2 == 1:
            raise PnParseError(
                PnErrorKind.ODD_STAGE_CROSS,
                f"cross change is not possible on {stage} bells",
            )
        return
    if list(places) != sorted(set(places)):
        raise PnParseError(
            PnErrorKind.AMBIGUOUS_PLACES,
            f"places {places!r} are not sorted and distinct",
        )
    if places[0] < 0 or places[-1] >= stage:
        raise PnParseError(
            PnErrorKind.PLACE_OUT_OF_STAGE,
            f"places {places!r} do not fit on {stage} bells",
        )
    # -1 and stage stand for the front and back of the row
    for lower, upper in pairwise((-1, *places, stage)):
        if (upper - lower - 1) % 2 == 1:
            front = "the front" if lower < 0 else f"place {BELL_NAMES[lower]}"
            back = "the back" if upper >= stage else f"place {BELL_NAMES[upper]}"
            raise PnParseError(
                PnErrorKind.AMBIGUOUS_PLACES,
                f"odd number of bells between {front} and {back}",
            )
