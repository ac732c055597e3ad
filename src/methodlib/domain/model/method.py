"""Fully materialized methods."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from methodlib.domain.model.classification import Classification
    from methodlib.domain.model.stage import Stage
    from methodlib.domain.place_notation import PnBlock, Row


@dataclass(frozen=True, slots=True)
class Method:
    """A named method with its parsed lead.

    Instances are independent values; nothing here refers back to the catalog.
    """

    title: str
    name: str
    classification: Classification
    block: PnBlock

    @property
    def stage(self) -> Stage:
        return self.block.stage

    @property
    def lead_length(self) -> int:
        return len(self.block)

    @property
    def lead_head(self) -> Row:
        return self.block.lead_head

    @property
    def place_notation(self) -> str:
        """Normalized notation, one entry per change (palindromes expanded)."""
        return str(self.block)

    @property
    def rows(self) -> tuple[Row, ...]:
        """Every row of one lead, from rounds through the lead head."""
        return self.block.rows()
