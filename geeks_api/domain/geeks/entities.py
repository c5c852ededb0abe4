# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Geek:

    id: str
    first_name: str
    last_name: str

    def same_name_as(self, other: Geek) -> bool:
        return (
            self.first_name.casefold() == other.first_name.casefold()
            and self.last_name.casefold() == other.last_name.casefold()
        )
