# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol


class NoSuchMessageError(LookupError):
    def __init__(self, code: str, locale: str) -> None:
        super().__init__(f"No message found under code '{code}' for locale '{locale}'")
        self.code = code
        self.locale = locale


class MessageResolver(Protocol):
    """Looks up localized text for an error code.

    Implementations raise ``NoSuchMessageError`` when neither the requested
    locale nor any of their fallback locales has an entry for ``code``.
    """

    def lookup(self, code: str, locale: str) -> str: ...


__all__ = ["MessageResolver", "NoSuchMessageError"]
