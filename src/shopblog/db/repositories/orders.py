"""
shopblog.db.repositories.orders

Repository for `Order` entities.

Responsibilities:
- Insert orders against an existing user and item.
- Query orders by user or by item.

Missing users/items are not checked here: the foreign keys on `orders`
reject the insert and the `IntegrityError` reaches the caller.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import select

from shopblog.db.models import Order
from shopblog.db.repositories.base import Repo


class OrderRepo(Repo[Order]):
    model = Order

    async def create(
        self,
        *,
        user_id: int,
        item_id: int,
        total_price: Decimal | None,
        status: str | None,
    ) -> Order:
        order = Order(user_id=user_id, item_id=item_id, total_price=total_price, status=status)
        self._session.add(order)
        await self._session.flush()
        return order

    async def for_item(self, item_id: int) -> list[Order]:
        stmt = select(Order).where(Order.item_id == item_id).order_by(Order.id)
        return list((await self._session.execute(stmt)).scalars().all())
