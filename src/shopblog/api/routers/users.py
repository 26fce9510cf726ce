from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from shopblog.api.deps import db_session
from shopblog.api.schemas import UserCreate, UserRead, UserUpdate
from shopblog.db.models import User
from shopblog.db.repositories.users import UserRepo

router = APIRouter(prefix="/users", tags=["users"])


async def _get_or_404(repo: UserRepo, user_id: int) -> User:
    user = await repo.get(user_id)
    if user is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("", response_model=list[UserRead])
async def list_users(
    limit: int = 100, offset: int = 0, session: AsyncSession = Depends(db_session)
) -> list[User]:
    return await UserRepo(session).list(limit=limit, offset=offset)


@router.post("", response_model=UserRead, status_code=HTTP_201_CREATED)
async def create_user(body: UserCreate, session: AsyncSession = Depends(db_session)) -> User:
    user = await UserRepo(session).create(name=body.name, email=body.email)
    await session.commit()
    return user


@router.get("/{user_id}", response_model=UserRead)
async def show_user(user_id: int, session: AsyncSession = Depends(db_session)) -> User:
    return await _get_or_404(UserRepo(session), user_id)


@router.api_route("/{user_id}", methods=["PATCH", "PUT"], response_model=UserRead)
async def update_user(
    user_id: int, body: UserUpdate, session: AsyncSession = Depends(db_session)
) -> User:
    repo = UserRepo(session)
    user = await repo.update(await _get_or_404(repo, user_id), **body.model_dump(exclude_unset=True))
    await session.commit()
    return user


@router.delete("/{user_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, session: AsyncSession = Depends(db_session)) -> Response:
    # Refused by the storage layer while orders/posts/comments still reference the user.
    repo = UserRepo(session)
    await repo.delete(await _get_or_404(repo, user_id))
    await session.commit()
    return Response(status_code=HTTP_204_NO_CONTENT)
