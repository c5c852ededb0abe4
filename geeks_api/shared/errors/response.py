# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Immutable HTTP error response bodies.

The JSON representation looks like::

    {
        "status_code": 404,
        "reason_phrase": "Not Found",
        "errors": [
            {"code": "geeks-15", "message": "some, hopefully localized, error message"},
            {"code": "geeks-16", "message": "yet another message"}
        ]
    }

Field names are part of the public contract.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(frozen=True, slots=True)
class ApiError:
    """One application level error: a code and a (hopefully localized) message."""

    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True, slots=True)
class ErrorResponse:
    status_code: int
    reason_phrase: str
    errors: tuple[ApiError, ...]

    def __post_init__(self) -> None:
        if not 400 <= self.status_code <= 599:
            raise ValueError("Error status codes should be between 400 and 599")

        if self.reason_phrase is None or not self.reason_phrase.strip():
            raise ValueError("HTTP response reason phrase can't be null or blank")

        if self.errors is None:
            raise ValueError("Errors list can't be null or empty")
        errors = tuple(self.errors)
        if not errors:
            raise ValueError("Errors list can't be null or empty")
        object.__setattr__(self, "errors", errors)

    @classmethod
    def of_errors(cls, status: HTTPStatus, errors: Iterable[ApiError]) -> ErrorResponse:
        """Response carrying several errors, typically one per validation violation."""
        status = HTTPStatus(status)
        return cls(status_code=status.value, reason_phrase=status.phrase, errors=tuple(errors))

    @classmethod
    def of(cls, status: HTTPStatus, error: ApiError) -> ErrorResponse:
        return cls.of_errors(status, (error,))

    def to_dict(self) -> dict[str, Any]:
        return {
            "status_code": self.status_code,
            "reason_phrase": self.reason_phrase,
            "errors": [error.to_dict() for error in self.errors],
        }


__all__ = ["ApiError", "ErrorResponse"]
