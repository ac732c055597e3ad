"""Method classification tag."""

from __future__ import annotations

from dataclasses import dataclass

from methodlib.domain.model.enums import MethodClass


@dataclass(frozen=True, slots=True, order=True)
class Classification:
    """Opaque structural tag carried alongside each method.

    The catalog stores and compares these but never interprets them.
    """

    method_class: MethodClass
    little: bool = False
    differential: bool = False

    def __str__(self) -> str:
        parts: list[str] = []
        if self.differential:
            parts.append("differential")
        if self.little:
            parts.append("little")
        parts.append(str(self.method_class))
        return " ".join(parts)
