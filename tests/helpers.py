import asyncio
from datetime import datetime, timedelta, timezone

from person_api.app.schemas.order import Order


T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def run(coro):
    """Drive an async service call to completion."""
    return asyncio.run(coro)


def make_order(order_id, status="open", days=0, **extra):
    return Order(id=order_id, status=status, order_date=T0 + timedelta(days=days), **extra)
