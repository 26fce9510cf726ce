"""
shopblog.db.repositories.users

Repository for `User` entities.

Responsibilities:
- Create/fetch users.
- Traverse the user's posts, orders and authored comments.
"""

from __future__ import annotations

from sqlalchemy import select

from shopblog.db.models import Comment, Order, Post, User
from shopblog.db.repositories.base import Repo


class UserRepo(Repo[User]):
    model = User

    async def create(self, *, name: str | None, email: str | None) -> User:
        user = User(name=name, email=email)
        self._session.add(user)
        await self._session.flush()
        return user

    async def posts_for_user(self, user_id: int) -> list[Post]:
        stmt = select(Post).join(Post.user).where(User.id == user_id).order_by(Post.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def orders_for_user(self, user_id: int) -> list[Order]:
        stmt = select(Order).join(Order.user).where(User.id == user_id).order_by(Order.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def comments_by_user(self, user_id: int) -> list[Comment]:
        stmt = select(Comment).join(Comment.user).where(User.id == user_id).order_by(Comment.id)
        return list((await self._session.execute(stmt)).scalars().all())
