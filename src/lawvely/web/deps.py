"""Store lookups and error mapping shared by the API routers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError

from lawvely.repositories import resolve

logger = logging.getLogger(__name__)


def get_legislation_store(request: Request) -> Any:
    store = getattr(request.app.state, "legislation_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Legislation store not available")
    return store


def get_preference_store(request: Request) -> Any:
    store = getattr(request.app.state, "preference_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Preference store not available")
    return store


async def load(awaitable_or_value: Any, action: str) -> Any:
    """Resolve a store call, turning database failures into a 500."""
    try:
        return await resolve(awaitable_or_value)
    except SQLAlchemyError:
        logger.exception("Error %s", action)
        raise HTTPException(status_code=500, detail="Failed to fetch data")
