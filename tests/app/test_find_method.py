from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from methodlib.app import find_method
from methodlib.config import LookupConfig
from methodlib.domain.query import NotFound, PnParseErr, Success

if TYPE_CHECKING:
    import pytest

    from methodlib.domain.catalog import MethodCatalog


def test_find_method_returns_success(
    catalog: MethodCatalog,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.INFO, logger="methodlib.app"):
        result = find_method(catalog, "Plain Bob Major", num_suggestions=2)

    assert isinstance(result, Success)
    assert "Plain Bob Major" in caplog.text


def test_find_method_uses_configured_limit(catalog: MethodCatalog) -> None:
    result = find_method(catalog, "Plain Bob Maxjor", config=LookupConfig(suggestion_limit=2))

    assert isinstance(result, NotFound)
    assert len(result.payload) == 2
    assert result.payload[0] == ("Plain Bob Major", 1)


def test_find_method_reads_limit_from_environment(
    catalog: MethodCatalog,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("METHODLIB_SUGGESTION_LIMIT", "1")

    result = find_method(catalog, "Unknown Method")

    assert isinstance(result, NotFound)
    assert len(result.payload) == 1


def test_find_method_logs_not_found_with_suggestions(
    catalog: MethodCatalog,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="methodlib.app"):
        find_method(catalog, "Plain Bob Majer", num_suggestions=1)

    assert "'Plain Bob Major' (1)" in caplog.text


def test_find_method_reports_corruption_once_at_error(
    corrupt_catalog: MethodCatalog,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="methodlib"):
        result = find_method(corrupt_catalog, "Broken Bob Major", num_suggestions=3)

    assert isinstance(result, PnParseErr)
    errors = [record for record in caplog.records if record.levelno >= logging.ERROR]
    assert [record.name for record in errors] == ["methodlib.domain.catalog"]
    assert any(
        record.levelno == logging.WARNING and record.name == "methodlib.app"
        for record in caplog.records
    )
