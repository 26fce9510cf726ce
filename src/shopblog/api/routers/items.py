from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from shopblog.api.deps import db_session
from shopblog.api.schemas import ItemCreate, ItemRead, ItemUpdate
from shopblog.db.models import Item
from shopblog.db.repositories.items import ItemRepo

router = APIRouter(prefix="/items", tags=["items"])


async def _get_or_404(repo: ItemRepo, item_id: int) -> Item:
    item = await repo.get(item_id)
    if item is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Item not found")
    return item


@router.get("", response_model=list[ItemRead])
async def list_items(
    limit: int = 100, offset: int = 0, session: AsyncSession = Depends(db_session)
) -> list[Item]:
    return await ItemRepo(session).list(limit=limit, offset=offset)


@router.post("", response_model=ItemRead, status_code=HTTP_201_CREATED)
async def create_item(body: ItemCreate, session: AsyncSession = Depends(db_session)) -> Item:
    item = await ItemRepo(session).create(name=body.name, price=body.price, quantity=body.quantity)
    await session.commit()
    return item


@router.get("/{item_id}", response_model=ItemRead)
async def show_item(item_id: int, session: AsyncSession = Depends(db_session)) -> Item:
    return await _get_or_404(ItemRepo(session), item_id)


@router.api_route("/{item_id}", methods=["PATCH", "PUT"], response_model=ItemRead)
async def update_item(
    item_id: int, body: ItemUpdate, session: AsyncSession = Depends(db_session)
) -> Item:
    repo = ItemRepo(session)
    item = await repo.update(await _get_or_404(repo, item_id), **body.model_dump(exclude_unset=True))
    await session.commit()
    return item


@router.delete("/{item_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_item(item_id: int, session: AsyncSession = Depends(db_session)) -> Response:
    repo = ItemRepo(session)
    await repo.delete(await _get_or_404(repo, item_id))
    await session.commit()
    return Response(status_code=HTTP_204_NO_CONTENT)
