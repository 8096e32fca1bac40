"""Unit tests for DinnerRepositoryStub."""

import json
from datetime import timedelta

import pytest

from convivio.domain.errors.persistence import PersistenceError
from convivio.infrastructure.stubs import DinnerRepositoryStub
from tests.helpers import DINNER_AT, make_dinner


class TestDinnerRepositoryStub:
    async def test_get_returns_a_fresh_copy(self) -> None:
        repository = DinnerRepositoryStub()
        dinner = make_dinner()
        await repository.save(dinner)

        loaded = await repository.get(dinner.id)
        loaded.title = "Changed"

        assert loaded is not dinner
        assert (await repository.get(dinner.id)).title == "Cena d'estate"

    async def test_missing_dinner(self) -> None:
        repository = DinnerRepositoryStub()
        dinner = make_dinner()

        assert await repository.get(dinner.id) is None
        await repository.delete(dinner.id)

    async def test_save_failure(self) -> None:
        repository = DinnerRepositoryStub(fail_on_save=True)
        dinner = make_dinner()

        with pytest.raises(PersistenceError) as exc_info:
            await repository.save(dinner)

        assert exc_info.value.dinner_id == dinner.id
        assert repository.save_count == 0
        assert repository.raw_document(dinner.id) is None

    async def test_list_upcoming_sorted_by_date(self) -> None:
        repository = DinnerRepositoryStub()
        later = make_dinner(date=DINNER_AT + timedelta(days=7), title="Later")
        sooner = make_dinner(title="Sooner")
        past = make_dinner(date=DINNER_AT - timedelta(days=7), title="Past")
        for dinner in (later, sooner, past):
            await repository.save(dinner)

        upcoming = await repository.list_upcoming(DINNER_AT - timedelta(hours=1))

        assert [d.title for d in upcoming] == ["Sooner", "Later"]

    async def test_raw_document_is_json(self) -> None:
        repository = DinnerRepositoryStub()
        dinner = make_dinner()
        await repository.save(dinner)

        data = json.loads(repository.raw_document(dinner.id))

        assert data["id"] == str(dinner.id)
        assert data["status"] == "planning"

    async def test_clear(self) -> None:
        repository = DinnerRepositoryStub()
        dinner = make_dinner()
        await repository.save(dinner)

        repository.clear()

        assert await repository.get(dinner.id) is None
        assert repository.save_count == 0
