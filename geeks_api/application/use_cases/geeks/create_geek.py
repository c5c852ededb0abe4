# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from geeks_api.domain.geeks.entities import Geek
from geeks_api.domain.geeks.exceptions import GeekAlreadyExistsError
from geeks_api.domain.geeks.repositories import GeekRepository


class CreateGeekUseCase:
    def __init__(self, *, geeks: GeekRepository) -> None:
        self._geeks = geeks

    def execute(self, first_name: str, last_name: str) -> Geek:
        if self._geeks.find_by_name(first_name, last_name) is not None:
            raise GeekAlreadyExistsError(
                context={"first_name": first_name, "last_name": last_name}
            )
        geek = Geek(id=str(uuid.uuid4()), first_name=first_name, last_name=last_name)
        return self._geeks.add(geek)
