"""Stages: the number of bells a method is rung on."""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class Stage(IntEnum):
    """Bell count, named by ringing convention."""

    SINGLES = 3
    MINIMUS = 4
    DOUBLES = 5
    MINOR = 6
    TRIPLES = 7
    MAJOR = 8
    CATERS = 9
    ROYAL = 10
    CINQUES = 11
    MAXIMUS = 12
    SEXTUPLES = 13
    FOURTEEN = 14
    SEPTUPLES = 15
    SIXTEEN = 16
    OCTUPLES = 17
    EIGHTEEN = 18
    NONUPLES = 19
    TWENTY = 20
    DECUPLES = 21
    TWENTY_TWO = 22

    @property
    def num_bells(self) -> int:
        return int(self)

    @property
    def is_even(self) -> bool:
        return self.value % 2 == 0

    @property
    def lower_case_name(self) -> str:
        return _NAME_BY_STAGE[self]

    @property
    def display_name(self) -> str:
        """Name as it appears at the end of a method title, e.g. ``Twenty-two``."""
        return self.lower_case_name.capitalize()

    @classmethod
    def from_lower_case_name(cls, name: str) -> Stage | None:
        """Return the stage called ``name`` or ``None``.

        Only the lower-case spelling matches; callers lower-case title tokens first.
        """
        return _STAGE_BY_NAME.get(name)


_NAME_BY_STAGE: Final[dict[Stage, str]] = {
    stage: stage.name.lower().replace("_", "-") for stage in Stage
}
_STAGE_BY_NAME: Final[dict[str, Stage]] = {name: stage for stage, name in _NAME_BY_STAGE.items()}
