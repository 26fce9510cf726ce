"""
shopblog.db.seeds

Sample data for local development.

Responsibilities:
- Insert the fixed sample rows in dependency order (parents before children)
  so every required reference resolves.
- Provide the `shopblog-seed` console entrypoint.

Running the seed twice inserts every row twice; nothing here checks for
existing data.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from shopblog.db.init_db import init_db
from shopblog.db.models import Categorization, Category, Comment, Item, Order, Post, User
from shopblog.db.repositories.categories import CategoryRepo
from shopblog.db.repositories.comments import CommentRepo
from shopblog.db.repositories.items import ItemRepo
from shopblog.db.repositories.orders import OrderRepo
from shopblog.db.repositories.posts import PostRepo
from shopblog.db.repositories.users import UserRepo
from shopblog.db.session import create_engine, create_sessionmaker, session_scope
from shopblog.observability.logging import configure_logging, get_logger
from shopblog.settings import Settings, get_settings

log = get_logger(__name__)


@dataclass(slots=True)
class SeedResult:
    users: list[User] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)
    posts: list[Post] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    categorizations: list[Categorization] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {
            "users": len(self.users),
            "items": len(self.items),
            "orders": len(self.orders),
            "posts": len(self.posts),
            "comments": len(self.comments),
            "categories": len(self.categories),
            "categorizations": len(self.categorizations),
        }


async def seed(session: AsyncSession) -> SeedResult:
    """Insert the sample rows. The caller commits."""

    result = SeedResult()
    users = UserRepo(session)
    items = ItemRepo(session)
    orders = OrderRepo(session)
    posts = PostRepo(session)
    comments = CommentRepo(session)
    categories = CategoryRepo(session)

    # Users
    user1 = await users.create(name="John Doe", email="john@example.com")
    user2 = await users.create(name="Jane Smith", email="jane@example.com")
    user3 = await users.create(name="No comments", email="nocomment@example.com")
    result.users += [user1, user2, user3]

    # Items
    item1 = await items.create(name="Laptop", price=Decimal("1000"), quantity=1)
    item2 = await items.create(name="Mouse", price=Decimal("25"), quantity=2)
    result.items += [item1, item2]

    # Orders
    result.orders += [
        await orders.create(
            user_id=user1.id, total_price=Decimal("100"), status="completed", item_id=item1.id
        ),
        await orders.create(
            user_id=user1.id, total_price=Decimal("50"), status="pending", item_id=item2.id
        ),
    ]

    # Posts
    post1 = await posts.create(
        user_id=user1.id, title="Learning Rails", content="Active Record is amazing!"
    )
    post2 = await posts.create(
        user_id=user2.id, title="Tips for Ruby", content="Use irb for quick testing."
    )
    result.posts += [post1, post2]

    # Comments
    result.comments += [
        await comments.create(commentable=post1, user_id=user2.id, content="Great post!"),
        await comments.create(commentable=post2, user_id=user1.id, content="Thanks for sharing!"),
    ]

    # Categories
    programming = await categories.create(name="Programming")
    tips = await categories.create(name="Tips")
    result.categories += [programming, tips]
    result.categorizations += await posts.add_categories(post1, [programming])
    result.categorizations += await posts.add_categories(post2, [programming, tips])

    log.info("seeded", **result.counts())
    return result


async def run(settings: Settings) -> SeedResult:
    engine = create_engine(settings)
    try:
        if settings.auto_create_tables:
            await init_db(engine)
        async with session_scope(create_sessionmaker(engine)) as session:
            return await seed(session)
    finally:
        await engine.dispose()


def main() -> None:
    settings = get_settings()
    configure_logging(service_name=settings.service_name, level=settings.log_level)
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
