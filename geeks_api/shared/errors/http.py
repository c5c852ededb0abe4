# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from geeks_api.shared.logging import logger

from .base import ServiceError
from .handler import ApiExceptionHandler
from .response import ErrorResponse
from .validation import RequestValidationError


def to_flask_response(error_response: ErrorResponse) -> tuple[Response, int]:
    response = jsonify(error_response.to_dict())
    return response, error_response.status_code


def register_error_handler(
    app: Flask,
    handler: ApiExceptionHandler,
    *,
    locale_resolver: Callable[[], str],
    debug_mode: bool = False,
) -> None:
    @app.errorhandler(RequestValidationError)
    def _handle_validation(exc: RequestValidationError):
        logger.info(
            f"Validation failed on {request.method} {request.path}: "
            f"{[v.message_key for v in exc.violations]}"
        )
        return to_flask_response(handler.handle_validation_error(exc, locale_resolver()))

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        # Redirects raised by routing are not errors.
        if exc.code is None or exc.code < 400:
            return exc

        logger.info(f"HTTP {exc.code} on {request.method} {request.path}")
        response, status = to_flask_response(handler.handle_service_error(exc, locale_resolver()))
        for name, value in exc.get_headers():
            if name.lower() != "content-type":
                response.headers[name] = value
        return response, status

    @app.errorhandler(Exception)
    def _handle_failure(exc: Exception):
        if isinstance(exc, ServiceError):
            logger.warning(
                f"Handled service error {exc.category} on {request.method} {request.path}"
            )
        elif debug_mode:
            logger.exception(f"Unhandled exception: {request.method} {request.path}")
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        return to_flask_response(handler.handle_service_error(exc, locale_resolver()))


__all__ = ["register_error_handler", "to_flask_response"]
