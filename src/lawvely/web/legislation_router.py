"""Legislation summary API: listing, search, category filters and ingest."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from lawvely.auth.middleware import require_user
from lawvely.core.errors import LawvelyError, StorageError
from lawvely.legislation.models import LegislationSummary
from lawvely.web.deps import get_legislation_store, load

logger = logging.getLogger(__name__)

router = APIRouter()


class IngestRequest(BaseModel):
    """Request body for summarising a new piece of legislation."""

    url: str


def _keyed(records: list[LegislationSummary]) -> dict[str, dict[str, Any]]:
    return {record.id: record.to_api() for record in records}


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("/api/categories")
async def api_list_categories(request: Request) -> list[str]:
    """List the category taxonomy in declaration order."""
    return list(request.app.state.classifier.taxonomy)


@router.get("/api/legislationSummaries")
async def api_list_legislation(
    request: Request,
    category: str | None = None,
) -> dict[str, dict[str, Any]]:
    """List all legislation summaries keyed by id, optionally by category."""
    store = get_legislation_store(request)
    if category:
        records = await load(store.list_by_category(category), "listing legislation by category")
    else:
        records = await load(store.list_all(), "listing legislation")
    if not records:
        raise HTTPException(status_code=404, detail="no legislation found")
    return _keyed(records)


@router.get("/api/legislationSummaries/search")
async def api_search_legislation(
    request: Request,
    query: str | None = None,
) -> dict[str, dict[str, Any]]:
    """Case-insensitive search over titles and summaries."""
    if query is None or not query.strip():
        raise HTTPException(status_code=400, detail="invalid or missing search query")
    store = get_legislation_store(request)
    records = await load(store.search(query), "searching legislation")
    if not records:
        raise HTTPException(status_code=404, detail="no legislation found")
    return _keyed(records)


@router.get("/api/legislationSummaries/category/{category}")
async def api_legislation_by_category(
    category: str, request: Request
) -> dict[str, dict[str, Any]]:
    """List legislation tagged with ``category``."""
    store = get_legislation_store(request)
    records = await load(store.list_by_category(category), "listing legislation by category")
    if not records:
        raise HTTPException(status_code=404, detail="No legislation found for this category")
    return _keyed(records)


@router.get("/api/legislationSummaries/{legislation_id}")
async def api_get_legislation(legislation_id: str, request: Request) -> dict[str, Any]:
    """Get a single legislation summary."""
    store = get_legislation_store(request)
    record = await load(store.get(legislation_id), f"fetching legislation {legislation_id!r}")
    if record is None:
        raise HTTPException(
            status_code=404,
            detail=f"Legislation summary with ID {legislation_id} not found.",
        )
    return record.to_api()


@router.post("/api/legislationSummaries", status_code=201)
async def api_ingest_legislation(
    body: IngestRequest,
    request: Request,
    user_id: str = Depends(require_user),
) -> dict[str, Any]:
    """Fetch, summarise, categorise and store the legislation at ``url``."""
    pipeline = request.app.state.pipeline
    logger.info("User %s requested ingest of %s", user_id, body.url)
    try:
        record = await pipeline.ingest(body.url)
    except StorageError:
        logger.exception("Storing %s failed", body.url)
        raise HTTPException(status_code=500, detail="Failed to store legislation")
    except LawvelyError as exc:
        logger.error("Ingest of %s failed: %s", body.url, exc)
        raise HTTPException(status_code=502, detail=str(exc))
    return record.to_api()
