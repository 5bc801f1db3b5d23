"""
Top‑level router for version 1 of the API.

Both routers live under ``/person``; the order router defines its
own ``/person/{person_id}/order/{category}`` path.
"""

from fastapi import APIRouter

from .endpoints import health, person_orders, persons

router = APIRouter()

router.include_router(persons.router, prefix="/person", tags=["person"])
# Full path is declared on the route itself, so no prefix here.
router.include_router(person_orders.router, tags=["orders"])
router.include_router(health.router, tags=["health"])
