from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from shopblog.api.deps import db_session
from shopblog.api.schemas import CategoryCreate, CategoryRead, CategoryUpdate
from shopblog.db.models import Category
from shopblog.db.repositories.categories import CategoryRepo

router = APIRouter(prefix="/categories", tags=["categories"])


async def _get_or_404(repo: CategoryRepo, category_id: int) -> Category:
    category = await repo.get(category_id)
    if category is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.get("", response_model=list[CategoryRead])
async def list_categories(
    limit: int = 100, offset: int = 0, session: AsyncSession = Depends(db_session)
) -> list[Category]:
    return await CategoryRepo(session).list(limit=limit, offset=offset)


@router.post("", response_model=CategoryRead, status_code=HTTP_201_CREATED)
async def create_category(
    body: CategoryCreate, session: AsyncSession = Depends(db_session)
) -> Category:
    category = await CategoryRepo(session).create(name=body.name)
    await session.commit()
    return category


@router.get("/{category_id}", response_model=CategoryRead)
async def show_category(category_id: int, session: AsyncSession = Depends(db_session)) -> Category:
    return await _get_or_404(CategoryRepo(session), category_id)


@router.api_route("/{category_id}", methods=["PATCH", "PUT"], response_model=CategoryRead)
async def update_category(
    category_id: int, body: CategoryUpdate, session: AsyncSession = Depends(db_session)
) -> Category:
    repo = CategoryRepo(session)
    category = await repo.update(
        await _get_or_404(repo, category_id), **body.model_dump(exclude_unset=True)
    )
    await session.commit()
    return category


@router.delete("/{category_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_category(category_id: int, session: AsyncSession = Depends(db_session)) -> Response:
    # Join rows pointing at the category are left in place.
    repo = CategoryRepo(session)
    await repo.delete(await _get_or_404(repo, category_id))
    await session.commit()
    return Response(status_code=HTTP_204_NO_CONTENT)
