# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import NoReturn

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError


@dataclass(frozen=True, slots=True)
class Violation:
    """A single field or object level validation failure.

    ``message_key`` doubles as the error code reported to the client and as
    the key into the message catalog.
    """

    message_key: str
    field: str | None = None


class RequestValidationError(Exception):
    def __init__(self, violations: Iterable[Violation]) -> None:
        self.violations: tuple[Violation, ...] = tuple(violations)
        if not self.violations:
            raise ValueError("A validation error needs at least one violation")
        super().__init__(", ".join(v.message_key for v in self.violations))

    @classmethod
    def from_pydantic(
        cls, exc: PydanticValidationError, model: type[BaseModel] | None = None
    ) -> RequestValidationError:
        """Builds violations in pydantic's error order.

        With ``model`` given, the leading location part is reported under the
        field's alias. Pydantic reports defaults filled by ``validate_default``
        under the attribute name even when the field has an alias.
        """
        violations = []
        for error in exc.errors():
            loc = list(error.get("loc", ()))
            if model is not None and loc and isinstance(loc[0], str):
                field_info = model.model_fields.get(loc[0])
                if field_info is not None and field_info.alias:
                    loc[0] = field_info.alias
            field_path = ".".join(str(part) for part in loc if part is not None)
            violations.append(
                Violation(
                    message_key=str(error.get("type", "value_error")),
                    field=field_path or None,
                )
            )
        return cls(violations)


def raise_validation_error(
    exc: PydanticValidationError, model: type[BaseModel] | None = None
) -> NoReturn:
    raise RequestValidationError.from_pydantic(exc, model) from exc


__all__ = [
    "RequestValidationError",
    "Violation",
    "raise_validation_error",
]
