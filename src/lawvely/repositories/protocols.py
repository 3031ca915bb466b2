"""Protocol definitions for the repository interfaces.

Each protocol mirrors the public methods of the corresponding in-memory
store, so both sync (in-memory) and async (SQL) implementations satisfy
the same interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lawvely.legislation.models import LegislationSummary, UserPreferences


@runtime_checkable
class LegislationRepository(Protocol):
    """Protocol for legislation summary storage."""

    def save(self, record: LegislationSummary) -> LegislationSummary: ...

    def get(self, legislation_id: str) -> LegislationSummary | None: ...

    def list_all(self) -> list[LegislationSummary]: ...

    def search(self, query: str) -> list[LegislationSummary]: ...

    def list_by_category(self, category: str) -> list[LegislationSummary]: ...

    def count(self) -> int: ...

@runtime_checkable
class PreferenceRepository(Protocol):
    """Protocol for per-user preference storage."""

    def get_preferences(self, user_id: str) -> UserPreferences: ...

    def set_categories(self, user_id: str, categories: list[str]) -> UserPreferences: ...

    def save_legislation(self, user_id: str, legislation_id: str) -> UserPreferences: ...

    def remove_saved(self, user_id: str, legislation_id: str) -> UserPreferences: ...
