"""Ingestion pipeline: fetch, summarise, classify, date and store legislation."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError

from lawvely.classification.classifier import CategoryClassifier
from lawvely.core.errors import LawvelyError, StorageError, SummarizationError
from lawvely.legislation.models import LegislationSummary, create_slug
from lawvely.repositories import resolve
from lawvely.sources.fetch import LegislationFetcher
from lawvely.summarization.dates import DateExtractor
from lawvely.summarization.summary import SummaryGenerator

logger = logging.getLogger(__name__)


class SeedReport(BaseModel):
    """Outcome of a batch ingest."""

    stored: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)


class LegislationPipeline:
    """Turns a legislation URL into a stored ``LegislationSummary``.

    Args:
        fetcher: Downloads the raw legislation text.
        summaries: Produces the title and both summaries.
        classifier: Assigns taxonomy categories.
        dates: Extracts the enactment date.
        store: Legislation store or repository; sync and async both work.
    """

    def __init__(
        self,
        fetcher: LegislationFetcher,
        summaries: SummaryGenerator,
        classifier: CategoryClassifier,
        dates: DateExtractor,
        store: Any,
    ) -> None:
        self._fetcher = fetcher
        self._summaries = summaries
        self._classifier = classifier
        self._dates = dates
        self._store = store

    async def summarize(self, url: str) -> LegislationSummary:
        """Build a record for ``url`` without storing it.

        Raises:
            LawvelyError: Any step failed; no partial record is produced.
        """
        text = await self._fetcher.fetch(url)
        generated = await self._summaries.generate_summaries(text)

        slug = create_slug(generated.title)
        if not slug:
            raise SummarizationError(f"Model returned an unusable title for {url}")

        categories, legislation_date = await asyncio.gather(
            self._classifier.classify(generated.title, generated.summary_of_sub_sections),
            self._dates.extract_date(text),
        )

        return LegislationSummary(
            id=slug,
            title=generated.title,
            url=url,
            summary_of_legislation=generated.summary_of_legislation,
            summary_of_sub_sections=generated.summary_of_sub_sections,
            categories=categories,
            legislation_date=legislation_date,
            timestamp=datetime.now(timezone.utc),
        )

    async def ingest(self, url: str) -> LegislationSummary:
        """Summarise ``url`` and save the record."""
        record = await self.summarize(url)
        await self._save(record)
        logger.info("Stored legislation: %s", record.title)
        return record

    async def seed(self, urls: list[str]) -> SeedReport:
        """Ingest every URL, skipping the ones that fail."""
        report = SeedReport()
        results = await asyncio.gather(*(self._try_summarize(url) for url in urls))

        for url, result in zip(urls, results):
            if isinstance(result, LawvelyError):
                report.failed[url] = str(result)
                continue
            try:
                await self._save(result)
            except StorageError as exc:
                logger.error("Error storing legislation from %s: %s", url, exc)
                report.failed[url] = str(exc)
                continue
            report.stored.append(result.id)
            logger.info("Stored legislation: %s", result.title)

        logger.info(
            "Seeding complete: %d stored, %d failed",
            len(report.stored), len(report.failed),
        )
        return report

    async def _save(self, record: LegislationSummary) -> None:
        try:
            await resolve(self._store.save(record))
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to store {record.id!r}: {exc}") from exc

    async def _try_summarize(self, url: str) -> LegislationSummary | LawvelyError:
        try:
            return await self.summarize(url)
        except LawvelyError as exc:
            logger.error("Error summarizing legislation at %s: %s", url, exc)
            return exc
