"""Legislation records, stores and the ingestion pipeline."""

from lawvely.legislation.models import LegislationSummary, UserPreferences, create_slug
from lawvely.legislation.store import LegislationStore, PreferenceStore

__all__ = [
    "LegislationStore",
    "LegislationSummary",
    "PreferenceStore",
    "UserPreferences",
    "create_slug",
]
