from __future__ import annotations

from decimal import Decimal

from shopblog.db.models import Item
from shopblog.db.repositories.base import Repo


class ItemRepo(Repo[Item]):
    model = Item

    async def create(
        self,
        *,
        name: str | None,
        price: Decimal | None,
        quantity: int | None,
    ) -> Item:
        item = Item(name=name, price=price, quantity=quantity)
        self._session.add(item)
        await self._session.flush()
        return item
