# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading

from geeks_api.domain.geeks.entities import Geek


class InMemoryGeekRepository:
    def __init__(self) -> None:
        self._geeks: dict[str, Geek] = {}
        self._lock = threading.Lock()

    def find_by_name(self, first_name: str, last_name: str) -> Geek | None:
        probe = Geek(id="", first_name=first_name, last_name=last_name)
        with self._lock:
            return next((g for g in self._geeks.values() if g.same_name_as(probe)), None)

    def add(self, geek: Geek) -> Geek:
        with self._lock:
            self._geeks[geek.id] = geek
        return geek

    def count(self) -> int:
        with self._lock:
            return len(self._geeks)
