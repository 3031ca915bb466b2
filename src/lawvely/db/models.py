"""SQLAlchemy ORM models for all persistent tables."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.dialects.postgresql import JSONB as PG_JSONB
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from lawvely.db.base import Base


def _jsonb() -> type:
    """Return JSONB for Postgres, plain JSON for SQLite."""
    return JSON().with_variant(PG_JSONB(), "postgresql")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LegislationRow(Base):
    __tablename__ = "legislation_summaries"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(Text)
    url: Mapped[str] = mapped_column(Text)
    summary_of_legislation: Mapped[str] = mapped_column(Text)
    summary_of_sub_sections: Mapped[str] = mapped_column(Text)
    categories: Mapped[list] = mapped_column(_jsonb(), default=list)
    legislation_date: Mapped[str] = mapped_column(Text)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("ix_legislation_summaries_timestamp", "timestamp"),
    )


class UserPreferenceRow(Base):
    __tablename__ = "user_preferences"

    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    categories: Mapped[list] = mapped_column(_jsonb(), default=list)
    saved: Mapped[list] = mapped_column(_jsonb(), default=list)
