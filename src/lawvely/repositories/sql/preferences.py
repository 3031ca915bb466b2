"""SQL user preference repository."""

from __future__ import annotations

from lawvely.db.engine import DatabaseManager
from lawvely.db.models import UserPreferenceRow
from lawvely.legislation.models import UserPreferences


class SqlPreferenceRepository:
    """SQLAlchemy-backed per-user preferences."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def get_preferences(self, user_id: str) -> UserPreferences:
        async with self._db.session() as db:
            row = await db.get(UserPreferenceRow, user_id)
            if row is None:
                return UserPreferences(user_id=user_id)
            return self._row_to_prefs(row)

    async def set_categories(self, user_id: str, categories: list[str]) -> UserPreferences:
        async with self._db.session() as db:
            row = await self._get_or_create(db, user_id)
            row.categories = list(categories)
            await db.commit()
            return self._row_to_prefs(row)

    async def save_legislation(self, user_id: str, legislation_id: str) -> UserPreferences:
        async with self._db.session() as db:
            row = await self._get_or_create(db, user_id)
            saved = list(row.saved or [])
            if legislation_id not in saved:
                saved.append(legislation_id)
            # JSON columns only register reassignment, not in-place mutation
            row.saved = saved
            await db.commit()
            return self._row_to_prefs(row)

    async def remove_saved(self, user_id: str, legislation_id: str) -> UserPreferences:
        async with self._db.session() as db:
            row = await self._get_or_create(db, user_id)
            row.saved = [s for s in (row.saved or []) if s != legislation_id]
            await db.commit()
            return self._row_to_prefs(row)

    @staticmethod
    async def _get_or_create(db, user_id: str) -> UserPreferenceRow:
        row = await db.get(UserPreferenceRow, user_id)
        if row is None:
            row = UserPreferenceRow(user_id=user_id, categories=[], saved=[])
            db.add(row)
        return row

    @staticmethod
    def _row_to_prefs(row: UserPreferenceRow) -> UserPreferences:
        return UserPreferences(
            user_id=row.user_id,
            categories=list(row.categories or []),
            saved=list(row.saved or []),
        )
