"""
shopblog.api.routers.posts

Post resource endpoints.

Responsibilities:
- Standard list/show/create/update/delete for posts.
- Append categories given as `category_ids` (inserts join rows; never removes).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from shopblog.api.deps import db_session
from shopblog.api.schemas import PostCreate, PostRead, PostUpdate
from shopblog.db.models import Category, Post
from shopblog.db.repositories.categories import CategoryRepo
from shopblog.db.repositories.posts import PostRepo

router = APIRouter(prefix="/posts", tags=["posts"])


async def _get_or_404(repo: PostRepo, post_id: int) -> Post:
    post = await repo.get(post_id)
    if post is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Post not found")
    return post


async def _load_categories(session: AsyncSession, category_ids: list[int]) -> list[Category]:
    repo = CategoryRepo(session)
    categories: list[Category] = []
    for category_id in category_ids:
        category = await repo.get(category_id)
        if category is None:
            raise HTTPException(status_code=422, detail=f"Category {category_id} not found")
        categories.append(category)
    return categories


async def _to_read(repo: PostRepo, post: Post) -> PostRead:
    categories = await repo.categories_for_post(post.id)
    return PostRead(
        id=post.id,
        user_id=post.user_id,
        title=post.title,
        content=post.content,
        created_at=post.created_at,
        updated_at=post.updated_at,
        category_ids=[c.id for c in categories],
    )


@router.get("", response_model=list[PostRead])
async def list_posts(
    limit: int = 100, offset: int = 0, session: AsyncSession = Depends(db_session)
) -> list[PostRead]:
    repo = PostRepo(session)
    return [await _to_read(repo, p) for p in await repo.list(limit=limit, offset=offset)]


@router.post("", response_model=PostRead, status_code=HTTP_201_CREATED)
async def create_post(body: PostCreate, session: AsyncSession = Depends(db_session)) -> PostRead:
    repo = PostRepo(session)
    categories = await _load_categories(session, body.category_ids)
    post = await repo.create(user_id=body.user_id, title=body.title, content=body.content)
    if categories:
        await repo.add_categories(post, categories)
    await session.commit()
    return await _to_read(repo, post)


@router.get("/{post_id}", response_model=PostRead)
async def show_post(post_id: int, session: AsyncSession = Depends(db_session)) -> PostRead:
    repo = PostRepo(session)
    return await _to_read(repo, await _get_or_404(repo, post_id))


@router.api_route("/{post_id}", methods=["PATCH", "PUT"], response_model=PostRead)
async def update_post(
    post_id: int, body: PostUpdate, session: AsyncSession = Depends(db_session)
) -> PostRead:
    repo = PostRepo(session)
    post = await _get_or_404(repo, post_id)
    values = body.model_dump(exclude_unset=True, exclude={"category_ids"})
    post = await repo.update(post, **values)
    if body.category_ids:
        linked = {c.id for c in await repo.categories_for_post(post.id)}
        new_ids = [cid for cid in dict.fromkeys(body.category_ids) if cid not in linked]
        await repo.add_categories(post, await _load_categories(session, new_ids))
    await session.commit()
    return await _to_read(repo, post)


@router.delete("/{post_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_post(post_id: int, session: AsyncSession = Depends(db_session)) -> Response:
    # Comments and categorizations of the post are not deleted with it.
    repo = PostRepo(session)
    await repo.delete(await _get_or_404(repo, post_id))
    await session.commit()
    return Response(status_code=HTTP_204_NO_CONTENT)
