"""
Read‑only views over a person's orders.

Two categories are supported: ``open`` (orders whose status is
exactly ``"open"``, in stored order) and ``recent`` (newest first by
order date, at most ``RECENT_ORDERS_LIMIT`` entries).  Anything else
is rejected with ``PersonValidationError``.
"""

import logging
from typing import Callable, Dict, List

from ..core.exceptions import PersonNotFoundError, PersonValidationError
from ..core.store import PersonStore
from ..schemas.order import Order


logger = logging.getLogger(__name__)

OPEN_STATUS = "open"
RECENT_ORDERS_LIMIT = 10


def _open_orders(orders: List[Order]) -> List[Order]:
    return [order for order in orders if order.status == OPEN_STATUS]


def _recent_orders(orders: List[Order]) -> List[Order]:
    # sorted() is stable, so orders sharing a date keep their stored order.
    return sorted(orders, key=lambda order: order.order_date, reverse=True)[:RECENT_ORDERS_LIMIT]


CATEGORIES: Dict[str, Callable[[List[Order]], List[Order]]] = {
    "open": _open_orders,
    "recent": _recent_orders,
}


class PersonOrderService:
    """Service answering order queries for a single person."""

    def __init__(self, store: PersonStore) -> None:
        self.store = store

    async def get_orders(self, person_id: int, category: str) -> List[Order]:
        """Return the orders of ``person_id`` selected by ``category``.

        Raises ``PersonValidationError`` for an unknown category and
        ``PersonNotFoundError`` when the person does not exist.
        """
        select = CATEGORIES.get(category)
        if select is None:
            raise PersonValidationError(
                f"Unknown order category '{category}'; expected one of: {', '.join(CATEGORIES)}"
            )
        person = self.store.get(person_id)
        if person is None:
            logger.debug("Orders requested for missing person %s", person_id)
            raise PersonNotFoundError(person_id)
        return select(person.orders)
