"""Sign-in plus per-user category preferences and saved legislation."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from lawvely.auth.middleware import require_user
from lawvely.auth.models import AuthCredentials
from lawvely.web.deps import get_legislation_store, get_preference_store, load

router = APIRouter()


class PreferencesUpdate(BaseModel):
    """Request body replacing a user's followed categories."""

    categories: list[str]


@router.post("/api/auth/login")
async def api_login(body: AuthCredentials, request: Request) -> dict[str, Any]:
    """Exchange fixture credentials for a bearer token."""
    provider = request.app.state.auth_provider
    result = provider.authenticate(body)
    if not result.success:
        raise HTTPException(status_code=401, detail=result.error or "Authentication failed")
    return {
        "token": result.token,
        "user_id": result.user_id,
        "display_name": result.display_name,
    }


@router.get("/api/users/me/preferences")
async def api_get_preferences(
    request: Request, user_id: str = Depends(require_user)
) -> dict[str, Any]:
    store = get_preference_store(request)
    prefs = await load(store.get_preferences(user_id), f"loading preferences for {user_id!r}")
    return prefs.model_dump()


@router.put("/api/users/me/preferences")
async def api_set_preferences(
    body: PreferencesUpdate,
    request: Request,
    user_id: str = Depends(require_user),
) -> dict[str, Any]:
    """Replace the categories the user follows."""
    taxonomy = request.app.state.classifier.taxonomy
    unknown = [c for c in body.categories if c not in taxonomy]
    if unknown:
        raise HTTPException(status_code=400, detail=f"Unknown categories: {unknown}")
    store = get_preference_store(request)
    prefs = await load(
        store.set_categories(user_id, body.categories),
        f"updating categories for {user_id!r}",
    )
    return prefs.model_dump()


@router.get("/api/users/me/saved")
async def api_list_saved(
    request: Request, user_id: str = Depends(require_user)
) -> list[dict[str, Any]]:
    """Saved legislation in the order it was saved; vanished records are skipped."""
    prefs = await load(
        get_preference_store(request).get_preferences(user_id),
        f"loading preferences for {user_id!r}",
    )
    legislation = get_legislation_store(request)
    saved: list[dict[str, Any]] = []
    for legislation_id in prefs.saved:
        record = await load(
            legislation.get(legislation_id), f"fetching legislation {legislation_id!r}"
        )
        if record is not None:
            saved.append(record.to_api())
    return saved


@router.post("/api/users/me/saved/{legislation_id}")
async def api_save_legislation(
    legislation_id: str,
    request: Request,
    user_id: str = Depends(require_user),
) -> dict[str, Any]:
    """Start tracking a piece of legislation."""
    record = await load(
        get_legislation_store(request).get(legislation_id),
        f"fetching legislation {legislation_id!r}",
    )
    if record is None:
        raise HTTPException(
            status_code=404,
            detail=f"Legislation summary with ID {legislation_id} not found.",
        )
    store = get_preference_store(request)
    prefs = await load(
        store.save_legislation(user_id, legislation_id),
        f"saving {legislation_id!r} for {user_id!r}",
    )
    return prefs.model_dump()


@router.delete("/api/users/me/saved/{legislation_id}")
async def api_remove_saved(
    legislation_id: str,
    request: Request,
    user_id: str = Depends(require_user),
) -> dict[str, Any]:
    store = get_preference_store(request)
    prefs = await load(
        store.remove_saved(user_id, legislation_id),
        f"removing {legislation_id!r} for {user_id!r}",
    )
    return prefs.model_dump()
