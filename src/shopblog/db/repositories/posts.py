"""
shopblog.db.repositories.posts

Repository for `Post` entities.

Responsibilities:
- Create/fetch posts.
- Append categories to a post (inserts Categorization rows).
- Traverse a post's categories and join rows.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select

from shopblog.db.models import Categorization, Category, Post
from shopblog.db.repositories.base import Repo


class PostRepo(Repo[Post]):
    model = Post

    async def create(self, *, user_id: int, title: str | None, content: str | None) -> Post:
        post = Post(user_id=user_id, title=title, content=content)
        self._session.add(post)
        await self._session.flush()
        return post

    async def add_categories(
        self, post: Post, categories: Iterable[Category]
    ) -> list[Categorization]:
        # `post.categories << category`: one join row per appended category.
        rows = [Categorization(post_id=post.id, category_id=c.id) for c in categories]
        self._session.add_all(rows)
        await self._session.flush()
        return rows

    async def categories_for_post(self, post_id: int) -> list[Category]:
        stmt = (
            select(Category)
            .join(Category.categorizations)
            .where(Categorization.post_id == post_id)
            .order_by(Categorization.id)
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def categorizations_for_post(self, post_id: int) -> list[Categorization]:
        stmt = (
            select(Categorization)
            .where(Categorization.post_id == post_id)
            .order_by(Categorization.id)
        )
        return list((await self._session.execute(stmt)).scalars().all())
