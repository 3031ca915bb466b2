"""Tests for the SQL repositories with SQLite async."""

from __future__ import annotations

import pytest
from sqlalchemy import Text

from lawvely.db.engine import DatabaseManager
from lawvely.db.models import LegislationRow
from lawvely.repositories.protocols import LegislationRepository, PreferenceRepository
from lawvely.repositories.sql.legislation import SqlLegislationRepository
from lawvely.repositories.sql.preferences import SqlPreferenceRepository

from tests.conftest import make_record


@pytest.fixture
async def db():
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
def legislation(db) -> SqlLegislationRepository:
    return SqlLegislationRepository(db)


@pytest.fixture
def preferences(db) -> SqlPreferenceRepository:
    return SqlPreferenceRepository(db)


async def test_save_and_get(legislation):
    await legislation.save(make_record())
    found = await legislation.get("animal-welfare-act-2006")
    assert found is not None
    assert found.title == "Animal Welfare Act 2006"
    assert found.categories == ["Animal Welfare"]
    assert found.legislation_date == "8 November 2006"


async def test_get_missing(legislation):
    assert await legislation.get("missing") is None


async def test_save_upserts(legislation):
    await legislation.save(make_record(categories=["Health"]))
    await legislation.save(make_record(categories=["Justice", "Health"]))
    assert await legislation.count() == 1
    found = await legislation.get("animal-welfare-act-2006")
    assert found.categories == ["Justice", "Health"]


async def test_list_all(legislation):
    await legislation.save(make_record("b-act", title="B Act"))
    await legislation.save(make_record("a-act", title="A Act"))
    assert [r.id for r in await legislation.list_all()] == ["a-act", "b-act"]


async def test_search(legislation):
    await legislation.save(make_record())
    await legislation.save(make_record("ivory-act-2018", title="Ivory Act 2018", sub_sections="Ivory trade."))
    assert [r.id for r in await legislation.search(" IVORY ")] == ["ivory-act-2018"]
    assert len(await legislation.search("act")) == 2
    assert await legislation.search("100%") == []


async def test_list_by_category(legislation):
    await legislation.save(make_record(categories=["Animal Welfare", "Trade"]))
    await legislation.save(make_record("finance-act", title="Finance Act", categories=["Finance"]))
    assert [r.id for r in await legislation.list_by_category("Trade")] == ["animal-welfare-act-2006"]


async def test_count(legislation):
    assert await legislation.count() == 0
    await legislation.save(make_record())
    await legislation.save(make_record("ivory-act-2018", title="Ivory Act 2018"))
    assert await legislation.count() == 2


async def test_reload_keeps_utc_timestamp(legislation):
    record = make_record()
    await legislation.save(record)
    found = await legislation.get(record.id)
    assert found.timestamp.tzinfo is not None
    assert found.timestamp == record.timestamp
    assert found.to_api()["timestamp"] == record.to_api()["timestamp"]


async def test_long_legislation_date(legislation):
    wordy = "made on 15 December 1992 and came into force on 1 January 1993 " * 3
    await legislation.save(make_record().model_copy(update={"legislation_date": wordy}))
    found = await legislation.get("animal-welfare-act-2006")
    assert found.legislation_date == wordy


async def test_preferences_default(preferences):
    prefs = await preferences.get_preferences("u1")
    assert prefs.categories == []
    assert prefs.saved == []


async def test_preferences_round_trip(preferences):
    await preferences.set_categories("u1", ["Finance", "Housing"])
    await preferences.save_legislation("u1", "a")
    await preferences.save_legislation("u1", "b")
    await preferences.save_legislation("u1", "a")
    prefs = await preferences.get_preferences("u1")
    assert prefs.categories == ["Finance", "Housing"]
    assert prefs.saved == ["a", "b"]


async def test_remove_saved(preferences):
    await preferences.save_legislation("u1", "a")
    await preferences.save_legislation("u1", "b")
    await preferences.remove_saved("u1", "a")
    assert (await preferences.get_preferences("u1")).saved == ["b"]


def test_legislation_date_column_is_unbounded():
    assert isinstance(LegislationRow.__table__.c.legislation_date.type, Text)


async def test_satisfy_protocols(legislation, preferences):
    assert isinstance(legislation, LegislationRepository)
    assert isinstance(preferences, PreferenceRepository)
