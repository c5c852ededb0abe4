# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import has_request_context, request

from geeks_api.shared.config import I18nConfig


def locale_resolver(i18n: I18nConfig) -> Callable[[], str]:
    """Best ``Accept-Language`` match among ``i18n.supported_locales``."""

    def _resolve() -> str:
        if not has_request_context():
            return i18n.default_locale
        return request.accept_languages.best_match(
            i18n.supported_locales, default=i18n.default_locale
        )

    return _resolve


__all__ = ["locale_resolver"]
