"""Tests for the seeding command."""

from __future__ import annotations

import json

import lawvely.seed as seed
from lawvely.core.config import Settings
from lawvely.legislation.pipeline import SeedReport

from tests.conftest import FakeLLM, routed_reply

URL = "https://www.legislation.gov.uk/ukpga/2006/45/contents"
MISSING_URL = "https://www.legislation.gov.uk/ukpga/1900/1/contents"


def test_parse_args_defaults():
    args = seed.parse_args([])
    assert args.urls == []
    assert args.database_url is None
    assert args.log_level is None


def test_parse_args_overrides():
    args = seed.parse_args([URL, "--database-url", "sqlite+aiosqlite:///x.db", "--log-level", "debug"])
    assert args.urls == [URL]
    assert args.database_url == "sqlite+aiosqlite:///x.db"
    assert args.log_level == "debug"


async def test_run_seed_in_memory(monkeypatch, httpx_mock, capsys):
    llm = FakeLLM(routed_reply())
    monkeypatch.setattr(seed, "create_llm_client", lambda config: llm)
    httpx_mock.add_response(url=URL, text="An Act to protect animals.", headers={"content-type": "text/plain"})
    httpx_mock.add_response(url=MISSING_URL, status_code=404)

    report = await seed.run_seed(Settings(), [URL, MISSING_URL])

    assert report.stored == ["animal-welfare-act-2006"]
    assert list(report.failed) == [MISSING_URL]
    assert llm.closed
    printed = json.loads(capsys.readouterr().out)
    assert printed["animal-welfare-act-2006"]["categories"] == ["Animal Welfare", "Justice"]


async def test_run_seed_sql(monkeypatch, httpx_mock, capsys):
    monkeypatch.setattr(seed, "create_llm_client", lambda config: FakeLLM(routed_reply()))
    httpx_mock.add_response(url=URL, text="An Act to protect animals.", headers={"content-type": "text/plain"})
    settings = Settings()
    settings.db.database_url = "sqlite+aiosqlite:///:memory:"

    report = await seed.run_seed(settings, [URL])

    assert report.stored == ["animal-welfare-act-2006"]
    assert capsys.readouterr().out == ""


def test_main_exit_codes(monkeypatch):
    async def stored(settings, urls):
        return SeedReport(stored=["a"])

    async def nothing(settings, urls):
        return SeedReport(failed={url: "HTTP 404" for url in urls})

    monkeypatch.setattr(seed, "run_seed", stored)
    assert seed.main([URL]) == 0

    monkeypatch.setattr(seed, "run_seed", nothing)
    assert seed.main([URL]) == 1
