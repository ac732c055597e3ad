"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class MethodClass(StrEnum):
    """Structural family of a method, following the Central Council's categories."""

    PRINCIPLE = "principle"
    BOB = "bob"
    PLACE = "place"
    TREBLE_BOB = "treble bob"
    SURPRISE = "surprise"
    DELIGHT = "delight"
    TREBLE_PLACE = "treble place"
    ALLIANCE = "alliance"
    HYBRID = "hybrid"
    SLOW_COURSE = "slow course"
