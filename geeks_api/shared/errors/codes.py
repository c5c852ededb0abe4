# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Error code contract.

An error code identifies one reportable failure category: a stable
identifier that clients may rely on, and the HTTP status the failure is
reported with. Identifiers are part of the public API, so once released
they must never change meaning.

Feature areas usually declare their codes as an ``Enum`` whose members
carry ``(code, http_status)`` pairs, see ``ErrorCodeEnum``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Protocol, runtime_checkable

ERROR_CODE_FOR_UNKNOWN_ERROR = "1"


@runtime_checkable
class ErrorCode(Protocol):
    @property
    def code(self) -> str: ...

    @property
    def http_status(self) -> HTTPStatus: ...


@dataclass(frozen=True, slots=True)
class SimpleErrorCode:
    """Plain value implementation of ``ErrorCode``."""

    code: str
    http_status: HTTPStatus


class ErrorCodeEnum(Enum):
    """Base for per-feature error code enums.

    Members are declared as ``NAME = ("feature-1", HTTPStatus.NOT_FOUND)``.
    """

    def __init__(self, code: str, http_status: HTTPStatus) -> None:
        self._code = code
        self._http_status = HTTPStatus(http_status)

    @property
    def code(self) -> str:
        return self._code

    @property
    def http_status(self) -> HTTPStatus:
        return self._http_status


# Used whenever no mapper recognises a failure.
UNKNOWN_ERROR_CODE = SimpleErrorCode(
    code=ERROR_CODE_FOR_UNKNOWN_ERROR,
    http_status=HTTPStatus.INTERNAL_SERVER_ERROR,
)


def validation_error_code(message_key: str) -> SimpleErrorCode:
    return SimpleErrorCode(code=message_key, http_status=HTTPStatus.BAD_REQUEST)


__all__ = [
    "ERROR_CODE_FOR_UNKNOWN_ERROR",
    "ErrorCode",
    "ErrorCodeEnum",
    "SimpleErrorCode",
    "UNKNOWN_ERROR_CODE",
    "validation_error_code",
]
