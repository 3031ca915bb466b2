"""In-memory legislation and user preference stores."""

from __future__ import annotations

from lawvely.legislation.models import LegislationSummary, UserPreferences


class LegislationStore:
    """In-memory store for legislation summaries keyed by slug."""

    def __init__(self) -> None:
        self._records: dict[str, LegislationSummary] = {}

    def save(self, record: LegislationSummary) -> LegislationSummary:
        self._records[record.id] = record
        return record

    def get(self, legislation_id: str) -> LegislationSummary | None:
        return self._records.get(legislation_id)

    def list_all(self) -> list[LegislationSummary]:
        return list(self._records.values())

    def search(self, query: str) -> list[LegislationSummary]:
        """Case-insensitive substring search over title and both summaries."""
        needle = query.strip().lower()
        return [r for r in self._records.values() if needle in r.searchable_text().lower()]

    def list_by_category(self, category: str) -> list[LegislationSummary]:
        return [r for r in self._records.values() if category in r.categories]

    def count(self) -> int:
        return len(self._records)


class PreferenceStore:
    """In-memory store for per-user preferences."""

    def __init__(self) -> None:
        self._prefs: dict[str, UserPreferences] = {}

    def get_preferences(self, user_id: str) -> UserPreferences:
        prefs = self._prefs.get(user_id)
        if prefs is None:
            return UserPreferences(user_id=user_id)
        return prefs.model_copy(deep=True)

    def set_categories(self, user_id: str, categories: list[str]) -> UserPreferences:
        prefs = self._prefs.setdefault(user_id, UserPreferences(user_id=user_id))
        prefs.categories = list(categories)
        return prefs.model_copy(deep=True)

    def save_legislation(self, user_id: str, legislation_id: str) -> UserPreferences:
        prefs = self._prefs.setdefault(user_id, UserPreferences(user_id=user_id))
        if legislation_id not in prefs.saved:
            prefs.saved.append(legislation_id)
        return prefs.model_copy(deep=True)

    def remove_saved(self, user_id: str, legislation_id: str) -> UserPreferences:
        prefs = self._prefs.setdefault(user_id, UserPreferences(user_id=user_id))
        prefs.saved = [s for s in prefs.saved if s != legislation_id]
        return prefs.model_copy(deep=True)
