from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from shopblog.api.deps import db_session
from shopblog.api.schemas import OrderCreate, OrderRead, OrderUpdate
from shopblog.db.models import Order
from shopblog.db.repositories.orders import OrderRepo

router = APIRouter(prefix="/orders", tags=["orders"])


async def _get_or_404(repo: OrderRepo, order_id: int) -> Order:
    order = await repo.get(order_id)
    if order is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Order not found")
    return order


@router.get("", response_model=list[OrderRead])
async def list_orders(
    limit: int = 100, offset: int = 0, session: AsyncSession = Depends(db_session)
) -> list[Order]:
    return await OrderRepo(session).list(limit=limit, offset=offset)


@router.post("", response_model=OrderRead, status_code=HTTP_201_CREATED)
async def create_order(body: OrderCreate, session: AsyncSession = Depends(db_session)) -> Order:
    # Unknown user_id/item_id fail on flush (IntegrityError -> 409).
    order = await OrderRepo(session).create(
        user_id=body.user_id,
        item_id=body.item_id,
        total_price=body.total_price,
        status=body.status,
    )
    await session.commit()
    return order


@router.get("/{order_id}", response_model=OrderRead)
async def show_order(order_id: int, session: AsyncSession = Depends(db_session)) -> Order:
    return await _get_or_404(OrderRepo(session), order_id)


@router.api_route("/{order_id}", methods=["PATCH", "PUT"], response_model=OrderRead)
async def update_order(
    order_id: int, body: OrderUpdate, session: AsyncSession = Depends(db_session)
) -> Order:
    repo = OrderRepo(session)
    order = await repo.update(
        await _get_or_404(repo, order_id), **body.model_dump(exclude_unset=True)
    )
    await session.commit()
    return order


@router.delete("/{order_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_order(order_id: int, session: AsyncSession = Depends(db_session)) -> Response:
    repo = OrderRepo(session)
    await repo.delete(await _get_or_404(repo, order_id))
    await session.commit()
    return Response(status_code=HTTP_204_NO_CONTENT)
