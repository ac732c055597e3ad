from __future__ import annotations

import pytest

from methodlib.domain.catalog import CatalogEntry, MethodCatalog
from methodlib.domain.model import Stage
from tests.support.methods import KNOWN_METHODS, PLAIN_BOB, compact


@pytest.fixture
def catalog() -> MethodCatalog:
    return MethodCatalog.from_entries(
        CatalogEntry(stage=stage, title=title, method=compact(name, classification, pn))
        for title, stage, name, classification, pn in KNOWN_METHODS
    )


@pytest.fixture
def corrupt_catalog() -> MethodCatalog:
    return MethodCatalog(
        {
            Stage.MAJOR: {
                "Plain Bob Major": compact("Plain", PLAIN_BOB, "x18x18x18x18,12"),
                "Broken Bob Major": compact("Broken", PLAIN_BOB, "x19x18"),
            },
        }
    )


@pytest.fixture
def plain_bob_major_only() -> MethodCatalog:
    return MethodCatalog(
        {Stage.MAJOR: {"Plain Bob Major": compact("Plain", PLAIN_BOB, "x18x18x18x18,12")}}
    )
