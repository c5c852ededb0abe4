from __future__ import annotations

import pytest

from geeks_api.application.use_cases.geeks.create_geek import CreateGeekUseCase
from geeks_api.domain.geeks.exceptions import GeekAlreadyExistsError
from geeks_api.infrastructure.repositories.geeks.in_memory_geek_repository import (
    InMemoryGeekRepository,
)


@pytest.fixture()
def repository() -> InMemoryGeekRepository:
    return InMemoryGeekRepository()


def test_create_geek_success(repository: InMemoryGeekRepository) -> None:
    use_case = CreateGeekUseCase(geeks=repository)

    geek = use_case.execute("Grace", "Hopper")

    assert geek.first_name == "Grace"
    assert geek.id
    assert repository.find_by_name("grace", "hopper") == geek


def test_create_geek_rejects_same_name(repository: InMemoryGeekRepository) -> None:
    use_case = CreateGeekUseCase(geeks=repository)
    use_case.execute("Grace", "Hopper")

    with pytest.raises(GeekAlreadyExistsError) as exc_info:
        use_case.execute("GRACE", "hopper")

    assert exc_info.value.category == "geeks.already_exists"
    assert exc_info.value.context == {"first_name": "GRACE", "last_name": "hopper"}
    assert repository.count() == 1
