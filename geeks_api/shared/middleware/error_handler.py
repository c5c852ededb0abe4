# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from geeks_api.shared.config import AppConfig
from geeks_api.shared.errors import ApiExceptionHandler, register_error_handler
from geeks_api.shared.middleware.locale import locale_resolver


def configure_error_handling(app: Flask, handler: ApiExceptionHandler, config: AppConfig) -> None:
    app.json.ensure_ascii = False  # type: ignore[attr-defined]
    register_error_handler(
        app,
        handler,
        locale_resolver=locale_resolver(config.i18n),
        debug_mode=config.debug_logging,
    )
