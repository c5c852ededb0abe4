# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from geeks_api.interfaces.http.error_codes.geeks import GeeksValidationKey


class CreateGeekRequestDTO(BaseModel):
    # Missing fields are reported by the validators below, never as "missing".
    first_name: str | None = Field(None, alias="firstName", validate_default=True)
    last_name: str | None = Field(None, alias="lastName", validate_default=True)

    model_config = ConfigDict(validate_by_name=True)

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, value: str | None) -> str:
        if value is None:
            raise PydanticCustomError(
                GeeksValidationKey.FIRST_NAME_REQUIRED,
                "First name is required",
                {},
            )
        return value

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, value: str | None) -> str:
        if value is None:
            raise PydanticCustomError(
                GeeksValidationKey.LAST_NAME_REQUIRED,
                "Last name is required",
                {},
            )
        return value


class GeekDTO(BaseModel):
    id: str
    first_name: str = Field(serialization_alias="firstName")
    last_name: str = Field(serialization_alias="lastName")
