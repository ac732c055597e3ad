"""Pydantic models for the compact JSON catalog format.

Methods are grouped by stage::

    {"stages": [{"stage": 8, "methods": [
        {"title": "Plain Bob Major", "name": "Plain", "class": "bob",
         "little": false, "differential": false, "pn": "x18x18x18x18,12"}
    ]}]}
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from methodlib.domain.model import MethodClass, Stage  # noqa: TC001


class InterchangeBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MethodRecord(InterchangeBaseModel):
    title: str
    name: str
    method_class: MethodClass = Field(alias="class")
    little: bool = False
    differential: bool = False
    place_notation: str = Field(alias="pn")


class StageGroup(InterchangeBaseModel):
    stage: Stage
    methods: list[MethodRecord] = Field(default_factory=list["MethodRecord"])


class CatalogDocument(InterchangeBaseModel):
    stages: list[StageGroup] = Field(default_factory=list["StageGroup"])
