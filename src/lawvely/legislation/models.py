"""Legislation record and user preference models."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from lawvely.summarization.dates import NO_DATE

_NON_WORD_RE = re.compile(r"\W+", re.ASCII)


def create_slug(title: str) -> str:
    """Lower-case ``title`` and join its words with single hyphens."""
    return _NON_WORD_RE.sub("-", title.lower()).strip("-")


class LegislationSummary(BaseModel):
    """A summarised piece of legislation, keyed by the slug of its title."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    url: str
    summary_of_legislation: str = Field(alias="summaryOfLegislation")
    summary_of_sub_sections: str = Field(alias="summaryOfSubSections")
    categories: list[str] = Field(min_length=1)
    legislation_date: str = Field(default=NO_DATE, alias="legislationDate")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def searchable_text(self) -> str:
        return f"{self.title} {self.summary_of_legislation} {self.summary_of_sub_sections}"

    def to_api(self) -> dict:
        """Serialise with the camelCase field names clients expect."""
        return self.model_dump(mode="json", by_alias=True)


class UserPreferences(BaseModel):
    """Categories a user follows and the legislation ids they track."""

    user_id: str
    categories: list[str] = Field(default_factory=list)
    saved: list[str] = Field(default_factory=list)
