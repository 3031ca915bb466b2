"""Seed the legislation store from a list of source URLs.

Usage::

    lawvely-seed                          # seed the configured default URLs
    lawvely-seed URL [URL ...]            # seed specific URLs
    lawvely-seed --database-url sqlite+aiosqlite:///lawvely.db URL

Without a database URL the records are summarised into an in-memory store
and printed as JSON instead of being persisted.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from lawvely.classification.classifier import CategoryClassifier
from lawvely.core.config import Settings
from lawvely.db.engine import DatabaseManager
from lawvely.legislation.pipeline import LegislationPipeline, SeedReport
from lawvely.legislation.store import LegislationStore
from lawvely.llm.client import create_llm_client
from lawvely.sources.fetch import LegislationFetcher
from lawvely.summarization.dates import DateExtractor
from lawvely.summarization.summary import SummaryGenerator

logger = logging.getLogger("lawvely.seed")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Summarise legislation and store it for the Lawvely API."
    )
    parser.add_argument(
        "urls",
        nargs="*",
        help="Legislation URLs to ingest. Defaults to LAWVELY_SOURCE_SEED_URLS.",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy async URL; overrides LAWVELY_DB_DATABASE_URL.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level; overrides LAWVELY_LOG_LEVEL.",
    )
    return parser.parse_args(argv)


async def run_seed(settings: Settings, urls: list[str]) -> SeedReport:
    """Ingest ``urls`` into the store configured by ``settings``."""
    llm = create_llm_client(settings.llm)
    fetcher = LegislationFetcher(settings.source)
    db: DatabaseManager | None = None

    if settings.db.database_url:
        from lawvely.repositories.sql.legislation import SqlLegislationRepository

        db = DatabaseManager.from_config(settings.db)
        await db.create_all()
        store = SqlLegislationRepository(db)
    else:
        logger.warning("No database URL configured; records will not be persisted")
        store = LegislationStore()

    pipeline = LegislationPipeline(
        fetcher=fetcher,
        summaries=SummaryGenerator(llm),
        classifier=CategoryClassifier(llm),
        dates=DateExtractor(llm),
        store=store,
    )
    try:
        report = await pipeline.seed(urls)
        if isinstance(store, LegislationStore):
            print(json.dumps({r.id: r.to_api() for r in store.list_all()}, indent=2))
        return report
    finally:
        await llm.close()
        await fetcher.close()
        if db is not None:
            await db.close()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = Settings()
    if args.database_url:
        settings.db.database_url = args.database_url
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    urls = args.urls or settings.source.seed_urls
    if not urls:
        logger.error("No URLs to seed")
        return 1

    report = asyncio.run(run_seed(settings, urls))
    for url, reason in report.failed.items():
        logger.warning("Skipped %s: %s", url, reason)
    return 0 if report.stored else 1


if __name__ == "__main__":
    sys.exit(main())
