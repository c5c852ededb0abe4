from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger as loguru_logger

from geeks_api.domain.geeks.exceptions import GeekAlreadyExistsError
from geeks_api.infrastructure.messages.catalog import CatalogMessageResolver
from geeks_api.interfaces.http.error_codes.geeks import EXCEPTION_MAPPERS
from geeks_api.shared.errors import (
    NO_MESSAGE_AVAILABLE,
    ApiExceptionHandler,
    ErrorCodeResolver,
    NoSuchMessageError,
    RequestValidationError,
    Violation,
)

CATALOGS = {
    "en": {
        "1": "Something went wrong",
        "geeks-1": "Geek already exists",
        "geeks-2": "First name is required",
        "geeks-3": "Last name is required",
    },
    "fa": {"geeks-1": "گیک تکراری است"},
}


class EmptyMessageResolver:
    def lookup(self, code: str, locale: str) -> str:
        raise NoSuchMessageError(code, locale)


@pytest.fixture()
def handler() -> ApiExceptionHandler:
    return ApiExceptionHandler(
        ErrorCodeResolver(EXCEPTION_MAPPERS),
        CatalogMessageResolver(CATALOGS, default_locale="en"),
    )


@pytest.fixture()
def captured_logs() -> Iterator[list[str]]:
    messages: list[str] = []
    handler_id = loguru_logger.add(messages.append, level="WARNING", format="{message}")
    yield messages
    loguru_logger.remove(handler_id)


def test_constructor_rejects_missing_collaborators() -> None:
    with pytest.raises(ValueError):
        ApiExceptionHandler(None, EmptyMessageResolver())  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        ApiExceptionHandler(ErrorCodeResolver([]), None)  # type: ignore[arg-type]


def test_mapped_domain_failure(handler: ApiExceptionHandler) -> None:
    response = handler.handle_service_error(GeekAlreadyExistsError(), "en")

    assert response.to_dict() == {
        "status_code": 400,
        "reason_phrase": "Bad Request",
        "errors": [{"code": "geeks-1", "message": "Geek already exists"}],
    }


def test_mapped_domain_failure_is_localized(handler: ApiExceptionHandler) -> None:
    response = handler.handle_service_error(GeekAlreadyExistsError(), "fa-IR")

    assert response.errors[0].message == "گیک تکراری است"


def test_unmapped_failure_reports_unknown_error(handler: ApiExceptionHandler) -> None:
    response = handler.handle_service_error(ZeroDivisionError(), "en")

    assert response.status_code == 500
    assert response.reason_phrase == "Internal Server Error"
    assert [e.to_dict() for e in response.errors] == [
        {"code": "1", "message": "Something went wrong"}
    ]


def test_validation_failure_fans_out_in_order(handler: ApiExceptionHandler) -> None:
    exc = RequestValidationError(
        [Violation("geeks-3", field="lastName"), Violation("geeks-2", field="firstName")]
    )

    response = handler.handle_validation_error(exc, "en")

    assert response.status_code == 400
    assert response.reason_phrase == "Bad Request"
    assert [e.to_dict() for e in response.errors] == [
        {"code": "geeks-3", "message": "Last name is required"},
        {"code": "geeks-2", "message": "First name is required"},
    ]


def test_validation_failure_keeps_duplicate_violations(handler: ApiExceptionHandler) -> None:
    exc = RequestValidationError([Violation("geeks-2")] * 3)

    response = handler.handle_validation_error(exc, "en")

    assert [e.code for e in response.errors] == ["geeks-2", "geeks-2", "geeks-2"]


def test_missing_message_uses_sentinel_and_logs(captured_logs: list[str]) -> None:
    handler = ApiExceptionHandler(ErrorCodeResolver(EXCEPTION_MAPPERS), EmptyMessageResolver())

    response = handler.handle_service_error(GeekAlreadyExistsError(), "de")

    assert response.status_code == 400
    assert response.errors[0].code == "geeks-1"
    assert response.errors[0].message == NO_MESSAGE_AVAILABLE == "No message available"
    assert any("geeks-1" in m and "de" in m for m in captured_logs)


def test_missing_message_does_not_change_unknown_status() -> None:
    handler = ApiExceptionHandler(ErrorCodeResolver([]), EmptyMessageResolver())

    response = handler.handle_service_error(RuntimeError(), "en")

    assert response.status_code == 500
    assert response.errors[0].code == "1"
    assert response.errors[0].message == NO_MESSAGE_AVAILABLE


def test_missing_message_for_one_violation_only(handler: ApiExceptionHandler) -> None:
    exc = RequestValidationError([Violation("string_type"), Violation("geeks-3")])

    response = handler.handle_validation_error(exc, "en")

    assert [e.to_dict() for e in response.errors] == [
        {"code": "string_type", "message": NO_MESSAGE_AVAILABLE},
        {"code": "geeks-3", "message": "Last name is required"},
    ]
