from __future__ import annotations

from http import HTTPStatus

import pytest

from geeks_api.shared.errors import ApiError, ErrorResponse

ERROR = ApiError(code="geeks-1", message="exists")


@pytest.mark.parametrize("status_code", [399, 600, 200, 0])
def test_rejects_status_outside_error_range(status_code: int) -> None:
    with pytest.raises(ValueError):
        ErrorResponse(status_code=status_code, reason_phrase="Nope", errors=(ERROR,))


@pytest.mark.parametrize("status_code", [400, 599])
def test_accepts_error_range_boundaries(status_code: int) -> None:
    response = ErrorResponse(status_code=status_code, reason_phrase="Boundary", errors=(ERROR,))

    assert response.status_code == status_code
    assert response.errors == (ERROR,)


@pytest.mark.parametrize("reason_phrase", ["", "   ", None])
def test_rejects_blank_reason_phrase(reason_phrase: str | None) -> None:
    with pytest.raises(ValueError):
        ErrorResponse(status_code=400, reason_phrase=reason_phrase, errors=(ERROR,))  # type: ignore[arg-type]


@pytest.mark.parametrize("errors", [(), [], None])
def test_rejects_missing_errors(errors) -> None:
    with pytest.raises(ValueError):
        ErrorResponse(status_code=400, reason_phrase="Bad Request", errors=errors)


def test_single_error_factory_uses_status_phrase() -> None:
    response = ErrorResponse.of(HTTPStatus.NOT_FOUND, ERROR)

    assert response.status_code == 404
    assert response.reason_phrase == "Not Found"
    assert response.errors == (ERROR,)


def test_multi_error_factory_normalizes_to_tuple() -> None:
    errors = [ApiError("geeks-2", "first"), ApiError("geeks-3", "last")]

    response = ErrorResponse.of_errors(HTTPStatus.BAD_REQUEST, errors)
    errors.clear()

    assert isinstance(response.errors, tuple)
    assert [e.code for e in response.errors] == ["geeks-2", "geeks-3"]


def test_factories_reject_non_error_status() -> None:
    with pytest.raises(ValueError):
        ErrorResponse.of(HTTPStatus.OK, ERROR)


def test_to_dict_matches_wire_format() -> None:
    response = ErrorResponse.of_errors(
        HTTPStatus.BAD_REQUEST,
        [ApiError("geeks-2", "First name is required"), ApiError("geeks-3", "Last name is required")],
    )

    assert response.to_dict() == {
        "status_code": 400,
        "reason_phrase": "Bad Request",
        "errors": [
            {"code": "geeks-2", "message": "First name is required"},
            {"code": "geeks-3", "message": "Last name is required"},
        ],
    }
