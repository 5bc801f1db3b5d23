"""
Order endpoints for API v1.

Orders are only reachable through their owning person.  The
``category`` path segment selects the view: ``open`` or ``recent``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from person_api.app.core.exceptions import PersonNotFoundError, PersonValidationError
from person_api.app.core.store import PersonStore, get_store
from person_api.app.schemas.order import Order
from person_api.app.services.person_order_service import PersonOrderService

router = APIRouter()


def get_person_order_service(store: PersonStore = Depends(get_store)) -> PersonOrderService:
    return PersonOrderService(store)


@router.get("/person/{person_id}/order/{category}", response_model=List[Order])
async def get_orders(
    person_id: int,
    category: str,
    service: PersonOrderService = Depends(get_person_order_service),
) -> List[Order]:
    """Return the open or most recent orders of a person.

    Returns 404 if the person does not exist and 400 for any category
    other than ``open`` or ``recent``.
    """
    try:
        return await service.get_orders(person_id, category)
    except PersonValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except PersonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
