# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Conversion of failures raised while serving a request into error responses.

``ApiExceptionHandler`` is framework agnostic: it turns an exception and a
locale into an ``ErrorResponse``. ``geeks_api.shared.errors.http`` plugs it
into Flask.
"""

from __future__ import annotations

from http import HTTPStatus

from geeks_api.shared.logging import logger

from .codes import ErrorCode, validation_error_code
from .mappers import ErrorCodeResolver
from .messages import MessageResolver, NoSuchMessageError
from .response import ApiError, ErrorResponse
from .validation import RequestValidationError

NO_MESSAGE_AVAILABLE = "No message available"


class ApiExceptionHandler:
    def __init__(
        self,
        error_codes: ErrorCodeResolver,
        message_resolver: MessageResolver,
    ) -> None:
        if error_codes is None:
            raise ValueError("error_codes is required")
        if message_resolver is None:
            raise ValueError("message_resolver is required")

        self._error_codes = error_codes
        self._message_resolver = message_resolver

    def handle_service_error(self, exception: BaseException, locale: str) -> ErrorResponse:
        """Build the response for any non-validation failure.

        The resolved error code decides the HTTP status, so two different
        domain failures may be reported with two different statuses. Failures
        without a registered mapper are reported as the unknown error (500).
        """
        error_code = self._error_codes.resolve(exception)
        return ErrorResponse.of(error_code.http_status, self._to_api_error(error_code, locale))

    def handle_validation_error(
        self, exception: RequestValidationError, locale: str
    ) -> ErrorResponse:
        """Report every violation as its own error, in the order they were found."""
        api_errors = [
            self._to_api_error(validation_error_code(violation.message_key), locale)
            for violation in exception.violations
        ]
        return ErrorResponse.of_errors(HTTPStatus.BAD_REQUEST, api_errors)

    def _to_api_error(self, error_code: ErrorCode, locale: str) -> ApiError:
        try:
            message = self._message_resolver.lookup(error_code.code, locale)
        except NoSuchMessageError:
            logger.error(
                f"Couldn't find any message for {error_code.code} code under {locale} locale"
            )
            message = NO_MESSAGE_AVAILABLE

        return ApiError(code=error_code.code, message=message)


__all__ = ["ApiExceptionHandler", "NO_MESSAGE_AVAILABLE"]
