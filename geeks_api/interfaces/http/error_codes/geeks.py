# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from geeks_api.domain.geeks.exceptions import GeekAlreadyExistsError
from geeks_api.shared.errors import CategoryErrorCodeMapper, ErrorCodeEnum


class GeeksApiErrorCode(ErrorCodeEnum):
    GEEK_ALREADY_EXISTS = ("geeks-1", HTTPStatus.BAD_REQUEST)


class GeeksValidationKey:
    FIRST_NAME_REQUIRED = "geeks-2"
    LAST_NAME_REQUIRED = "geeks-3"


EXCEPTION_MAPPERS = (
    CategoryErrorCodeMapper(
        category=GeekAlreadyExistsError.category,
        error_code=GeeksApiErrorCode.GEEK_ALREADY_EXISTS,
    ),
)


__all__ = ["EXCEPTION_MAPPERS", "GeeksApiErrorCode", "GeeksValidationKey"]
