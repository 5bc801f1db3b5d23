"""
Health endpoint for API v1.

Reports liveness together with the number of stored persons, which
is handy when checking that sample data was loaded.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from person_api.app.core.store import PersonStore, get_store

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health(store: PersonStore = Depends(get_store)) -> Dict[str, Any]:
    return {"status": "ok", "persons": len(store)}
