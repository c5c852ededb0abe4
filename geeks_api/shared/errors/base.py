# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, cast


class ServiceError(Exception):
    """Base class for failures raised by domain services.

    Subclasses declare a class level ``category``. Exception mappers match on
    that tag instead of the concrete exception type, so a feature area can
    translate its failures without importing the classes that raise them.
    """

    category: ClassVar[str] = "service_error"

    def __init__(
        self,
        message: str | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_message = message or cast(str, getattr(self, "category", "service_error"))
        super().__init__(resolved_message)
        self.context: Mapping[str, Any] | None = context


def category_of(exception: BaseException) -> str | None:
    value = getattr(exception, "category", None)
    return value if isinstance(value, str) else None


__all__ = ["ServiceError", "category_of"]
