# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Geek


class GeekRepository(Protocol):
    def find_by_name(self, first_name: str, last_name: str) -> Geek | None: ...
    def add(self, geek: Geek) -> Geek: ...
