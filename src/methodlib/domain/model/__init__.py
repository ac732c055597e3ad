"""Public domain model surface."""

from __future__ import annotations

from methodlib.domain.model.classification import Classification
from methodlib.domain.model.enums import MethodClass
from methodlib.domain.model.method import Method
from methodlib.domain.model.stage import Stage

__all__ = [
    "Classification",
    "Method",
    "MethodClass",
    "Stage",
]
