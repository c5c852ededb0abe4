"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from geeks_api.application.use_cases.geeks.create_geek import CreateGeekUseCase
from geeks_api.infrastructure.messages.catalog import CatalogMessageResolver
from geeks_api.infrastructure.repositories.geeks.in_memory_geek_repository import (
    InMemoryGeekRepository,
)
from geeks_api.interfaces.http.controllers.geeks_controller import GeeksController
from geeks_api.interfaces.http.error_codes import common as common_error_codes
from geeks_api.interfaces.http.error_codes import geeks as geeks_error_codes
from geeks_api.shared.config import AppConfig, load_config
from geeks_api.shared.errors import (
    ApiExceptionHandler,
    ErrorCodeResolver,
    ExceptionToErrorCode,
    MessageResolver,
)


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    @cached_property
    def exception_mappers(self) -> tuple[ExceptionToErrorCode, ...]:
        # Order matters: the first mapper accepting an exception wins.
        return (
            *geeks_error_codes.EXCEPTION_MAPPERS,
            *common_error_codes.EXCEPTION_MAPPERS,
        )

    @cached_property
    def error_code_resolver(self) -> ErrorCodeResolver:
        return ErrorCodeResolver(self.exception_mappers)

    @cached_property
    def message_resolver(self) -> MessageResolver:
        i18n = self.config.i18n
        return CatalogMessageResolver.from_directory(
            i18n.messages_dir, default_locale=i18n.default_locale
        )

    @cached_property
    def api_exception_handler(self) -> ApiExceptionHandler:
        return ApiExceptionHandler(self.error_code_resolver, self.message_resolver)

    @cached_property
    def geek_repository(self) -> InMemoryGeekRepository:
        return InMemoryGeekRepository()

    @cached_property
    def create_geek_use_case(self) -> CreateGeekUseCase:
        return CreateGeekUseCase(geeks=self.geek_repository)

    @cached_property
    def geeks_controller(self) -> GeeksController:
        return GeeksController(create_use_case=self.create_geek_use_case)


container = Container()
