# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Translation of arbitrary exceptions into error codes.

Each feature area contributes ``ExceptionToErrorCode`` strategies for the
failures it knows about. ``ErrorCodeResolver`` receives all of them, in a
fixed order, once at startup and picks the first strategy able to handle a
given exception.

``to_error_code`` must only be called after ``can_handle`` returned ``True``
for the same exception. The resolver is the only intended caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from geeks_api.shared.logging import logger

from .base import category_of
from .codes import UNKNOWN_ERROR_CODE, ErrorCode


@runtime_checkable
class ExceptionToErrorCode(Protocol):
    def can_handle(self, exception: BaseException) -> bool: ...

    def to_error_code(self, exception: BaseException) -> ErrorCode: ...


@dataclass(frozen=True, slots=True)
class CategoryErrorCodeMapper:
    """Maps every failure tagged with ``category`` to a fixed error code."""

    category: str
    error_code: ErrorCode

    def can_handle(self, exception: BaseException) -> bool:
        return category_of(exception) == self.category

    def to_error_code(self, exception: BaseException) -> ErrorCode:
        return self.error_code


class ErrorCodeResolver:
    """Finds the error code for an exception using the registered mappers.

    Mappers are consulted in registration order and the first one whose
    ``can_handle`` returns ``True`` wins. When two mappers accept the same
    exception the later one is never asked. Exceptions nobody handles resolve
    to ``UNKNOWN_ERROR_CODE``; ``resolve`` itself never raises.
    """

    def __init__(self, mappers: Iterable[ExceptionToErrorCode]) -> None:
        self._mappers: tuple[ExceptionToErrorCode, ...] = tuple(mappers)

    @property
    def mappers(self) -> tuple[ExceptionToErrorCode, ...]:
        return self._mappers

    def resolve(self, exception: BaseException) -> ErrorCode:
        for mapper in self._mappers:
            if mapper.can_handle(exception):
                error_code = mapper.to_error_code(exception)
                logger.debug(
                    f"errors.resolve: {type(exception).__name__} -> {error_code.code} "
                    f"via {type(mapper).__name__}"
                )
                return error_code
        logger.debug(f"errors.resolve: no mapper for {type(exception).__name__}")
        return UNKNOWN_ERROR_CODE


__all__ = ["CategoryErrorCodeMapper", "ErrorCodeResolver", "ExceptionToErrorCode"]
