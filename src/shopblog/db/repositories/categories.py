from __future__ import annotations

from sqlalchemy import select

from shopblog.db.models import Categorization, Category, Post
from shopblog.db.repositories.base import Repo


class CategoryRepo(Repo[Category]):
    model = Category

    async def create(self, *, name: str | None) -> Category:
        category = Category(name=name)
        self._session.add(category)
        await self._session.flush()
        return category

    async def posts_for_category(self, category_id: int) -> list[Post]:
        # Inverse side of `PostRepo.categories_for_post`.
        stmt = (
            select(Post)
            .join(Post.categorizations)
            .where(Categorization.category_id == category_id)
            .order_by(Categorization.id)
        )
        return list((await self._session.execute(stmt)).scalars().all())


class CategorizationRepo(Repo[Categorization]):
    model = Categorization
