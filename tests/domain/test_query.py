from __future__ import annotations

import pytest

from methodlib.domain.model import Classification, Method, MethodClass, Stage
from methodlib.domain.place_notation import PnErrorKind, PnParseError, parse_place_notation
from methodlib.domain.query import NotFound, PnParseErr, QueryStatus, QueryUnwrapError, Success


def _method() -> Method:
    return Method(
        title="Plain Bob Minimus",
        name="Plain",
        classification=Classification(MethodClass.BOB),
        block=parse_place_notation("x14x14,12", Stage.MINIMUS),
    )


def _parse_err() -> PnParseErr:
    return PnParseErr(
        place_notation="x19",
        error=PnParseError(PnErrorKind.PLACE_OUT_OF_STAGE, "out of stage", position=2),
    )


def test_map_not_found_only_touches_not_found_payload() -> None:
    calls: list[object] = []

    def record(payload: object) -> list[str]:
        calls.append(payload)
        return ["suggestion"]

    success = Success(_method())
    parse_err = _parse_err()

    assert success.map_not_found(record) is success
    assert parse_err.map_not_found(record) is parse_err
    assert calls == []

    mapped = NotFound(None).map_not_found(record)

    assert mapped == NotFound(["suggestion"])
    assert calls == [None]


def test_status_discriminators() -> None:
    assert Success(_method()).status is QueryStatus.SUCCESS
    assert _parse_err().status is QueryStatus.PN_PARSE_ERROR
    assert NotFound(None).status is QueryStatus.NOT_FOUND
    assert Success(_method()).is_success
    assert NotFound(None).is_not_found
    assert not _parse_err().is_success
    assert not _parse_err().is_not_found


def test_unwrap_returns_method_on_success() -> None:
    method = _method()

    assert Success(method).unwrap() is method
    assert Success(method).unwrap_parse_err() == Success(method)


def test_unwrap_raises_on_not_found() -> None:
    with pytest.raises(QueryUnwrapError, match="NotFound"):
        NotFound(None).unwrap()


def test_unwrap_raises_on_parse_error_with_notation() -> None:
    with pytest.raises(QueryUnwrapError, match="x19") as exc:
        _parse_err().unwrap()

    assert isinstance(exc.value.__cause__, PnParseError)


def test_unwrap_parse_err_passes_not_found_through() -> None:
    result = NotFound([("Plain Bob Major", 1)])

    assert result.unwrap_parse_err() is result
    with pytest.raises(QueryUnwrapError):
        _parse_err().unwrap_parse_err()


def test_unwrap_parse_err_keeps_the_remaining_variant() -> None:
    success = Success(_method())
    not_found = NotFound(None)

    assert success.unwrap_parse_err() is success
    assert success.unwrap_parse_err().status is QueryStatus.SUCCESS
    assert not_found.unwrap_parse_err().status is QueryStatus.NOT_FOUND


@pytest.mark.parametrize(
    "accessor",
    [PnParseErr.unwrap, PnParseErr.unwrap_parse_err, NotFound.unwrap],
)
def test_always_failing_accessors_are_declared_never_returning(accessor: object) -> None:
    assert accessor.__annotations__["return"] == "NoReturn"
