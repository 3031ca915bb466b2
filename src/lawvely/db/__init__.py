"""Database layer for Lawvely: SQLAlchemy 2.0 async."""

from __future__ import annotations

from lawvely.db.base import Base
from lawvely.db.engine import DatabaseManager

__all__ = ["Base", "DatabaseManager"]
