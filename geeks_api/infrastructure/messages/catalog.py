# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from geeks_api.shared.errors import NoSuchMessageError
from geeks_api.shared.logging import logger


def normalize_locale(locale: str) -> str:
    return locale.strip().replace("_", "-").lower()


class CatalogMessageResolver:
    """Message resolver backed by one flat ``code -> text`` catalog per locale.

    A lookup for ``fa-IR`` tries ``fa-ir``, then ``fa``, then the default
    locale. Catalogs are copied into read-only mappings on construction.
    """

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, str]],
        *,
        default_locale: str = "en",
    ) -> None:
        self._catalogs: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {
                normalize_locale(locale): MappingProxyType(dict(messages))
                for locale, messages in catalogs.items()
            }
        )
        self._default_locale = normalize_locale(default_locale)

    @classmethod
    def from_directory(
        cls, directory: Path, *, default_locale: str = "en"
    ) -> CatalogMessageResolver:
        catalogs: dict[str, dict[str, str]] = {}
        for path in sorted(Path(directory).glob("*.json")):
            with path.open(encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError(f"Message catalog {path} must contain a JSON object")
            catalogs[path.stem] = {str(k): str(v) for k, v in loaded.items()}
        logger.info(
            f"messages.load: {len(catalogs)} catalogs from {directory} "
            f"({', '.join(sorted(catalogs)) or 'none'})"
        )
        return cls(catalogs, default_locale=default_locale)

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._catalogs)

    def lookup(self, code: str, locale: str) -> str:
        for candidate in self._candidates(locale):
            catalog = self._catalogs.get(candidate)
            if catalog is not None and code in catalog:
                return catalog[code]
        raise NoSuchMessageError(code, locale)

    def _candidates(self, locale: str) -> list[str]:
        normalized = normalize_locale(locale) if locale else self._default_locale
        candidates = [normalized]
        language = normalized.split("-", 1)[0]
        if language not in candidates:
            candidates.append(language)
        if self._default_locale not in candidates:
            candidates.append(self._default_locale)
        return candidates


__all__ = ["CatalogMessageResolver", "normalize_locale"]
