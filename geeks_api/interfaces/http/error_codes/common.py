# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from werkzeug.exceptions import HTTPException

from geeks_api.shared.errors import ErrorCode, SimpleErrorCode


class HttpExceptionToErrorCode:
    """Maps framework level HTTP errors (404, 405, 415...) to ``http-<status>`` codes."""

    def can_handle(self, exception: BaseException) -> bool:
        if not isinstance(exception, HTTPException) or exception.code is None:
            return False
        try:
            return HTTPStatus(exception.code) >= 400
        except ValueError:
            return False

    def to_error_code(self, exception: BaseException) -> ErrorCode:
        status = HTTPStatus(exception.code)  # type: ignore[attr-defined]
        return SimpleErrorCode(code=f"http-{status.value}", http_status=status)


EXCEPTION_MAPPERS = (HttpExceptionToErrorCode(),)


__all__ = ["EXCEPTION_MAPPERS", "HttpExceptionToErrorCode"]
