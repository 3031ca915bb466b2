"""SQL legislation summary repository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import func, literal, select

from lawvely.db.engine import DatabaseManager
from lawvely.db.models import LegislationRow
from lawvely.legislation.models import LegislationSummary


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlLegislationRepository:
    """SQLAlchemy-backed legislation summary storage."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def save(self, record: LegislationSummary) -> LegislationSummary:
        async with self._db.session() as db:
            row = LegislationRow(
                id=record.id,
                title=record.title,
                url=record.url,
                summary_of_legislation=record.summary_of_legislation,
                summary_of_sub_sections=record.summary_of_sub_sections,
                categories=list(record.categories),
                legislation_date=record.legislation_date,
                timestamp=record.timestamp,
            )
            await db.merge(row)
            await db.commit()
        return record

    async def get(self, legislation_id: str) -> LegislationSummary | None:
        async with self._db.session() as db:
            row = await db.get(LegislationRow, legislation_id)
            if row is None:
                return None
            return self._row_to_record(row)

    async def list_all(self) -> list[LegislationSummary]:
        async with self._db.session() as db:
            result = await db.execute(select(LegislationRow).order_by(LegislationRow.id))
            return [self._row_to_record(r) for r in result.scalars().all()]

    async def search(self, query: str) -> list[LegislationSummary]:
        needle = query.strip().lower()
        content = func.lower(
            LegislationRow.title
            + literal(" ")
            + LegislationRow.summary_of_legislation
            + literal(" ")
            + LegislationRow.summary_of_sub_sections
        )
        async with self._db.session() as db:
            result = await db.execute(
                select(LegislationRow)
                .where(content.contains(needle, autoescape=True))
                .order_by(LegislationRow.id)
            )
            return [self._row_to_record(r) for r in result.scalars().all()]

    async def list_by_category(self, category: str) -> list[LegislationSummary]:
        # JSON containment differs between SQLite and Postgres; filter here
        return [r for r in await self.list_all() if category in r.categories]

    async def count(self) -> int:
        async with self._db.session() as db:
            result = await db.execute(select(func.count()).select_from(LegislationRow))
            return result.scalar_one()

    @staticmethod
    def _row_to_record(row: LegislationRow) -> LegislationSummary:
        return LegislationSummary(
            id=row.id,
            title=row.title,
            url=row.url,
            summary_of_legislation=row.summary_of_legislation,
            summary_of_sub_sections=row.summary_of_sub_sections,
            categories=list(row.categories or []),
            legislation_date=row.legislation_date,
            timestamp=_as_utc(row.timestamp),
        )
