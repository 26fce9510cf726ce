"""
tests.test_associations

Integrity and traversal behavior of the relational schema.

Responsibilities:
- Orders require an existing user and item (storage-enforced).
- Post <-> Category many-to-many is visible from both sides.
- Polymorphic comments resolve to their commentable, and dangle after it is deleted.
- Deleting a post cascades to nothing.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shopblog.db.commentable import (
    UnknownCommentableType,
    commentable_model,
    commentable_ref,
    commentable_types,
)
from shopblog.db.models import Item, Post, User
from shopblog.db.repositories.categories import CategorizationRepo, CategoryRepo
from shopblog.db.repositories.comments import CommentRepo
from shopblog.db.repositories.items import ItemRepo
from shopblog.db.repositories.orders import OrderRepo
from shopblog.db.repositories.posts import PostRepo
from shopblog.db.repositories.users import UserRepo


async def _user_and_item(session: AsyncSession) -> tuple[User, Item]:
    user = await UserRepo(session).create(name="John Doe", email="john@example.com")
    item = await ItemRepo(session).create(name="Laptop", price=Decimal("1000"), quantity=1)
    await session.commit()
    return user, item


async def _post(session: AsyncSession, user: User, title: str = "Learning Rails") -> Post:
    post = await PostRepo(session).create(user_id=user.id, title=title, content="...")
    await session.commit()
    return post


@pytest.mark.asyncio
async def test_order_references_existing_user_and_item(session: AsyncSession) -> None:
    user, item = await _user_and_item(session)
    order = await OrderRepo(session).create(
        user_id=user.id, item_id=item.id, total_price=Decimal("100"), status="completed"
    )
    await session.commit()

    assert await UserRepo(session).get(order.user_id) is not None
    assert await ItemRepo(session).get(order.item_id) is not None
    assert [o.id for o in await UserRepo(session).orders_for_user(user.id)] == [order.id]
    assert [o.id for o in await OrderRepo(session).for_item(item.id)] == [order.id]


@pytest.mark.asyncio
async def test_order_with_missing_user_fails(session: AsyncSession) -> None:
    _, item = await _user_and_item(session)
    with pytest.raises(IntegrityError):
        await OrderRepo(session).create(
            user_id=9999, item_id=item.id, total_price=Decimal("1"), status="pending"
        )
    await session.rollback()
    assert await OrderRepo(session).count() == 0


@pytest.mark.asyncio
async def test_order_with_missing_item_fails(session: AsyncSession) -> None:
    user, _ = await _user_and_item(session)
    with pytest.raises(IntegrityError):
        await OrderRepo(session).create(
            user_id=user.id, item_id=9999, total_price=Decimal("1"), status="pending"
        )
    await session.rollback()
    assert await OrderRepo(session).count() == 0


@pytest.mark.asyncio
async def test_order_without_user_violates_not_null(session: AsyncSession) -> None:
    _, item = await _user_and_item(session)
    with pytest.raises(IntegrityError):
        await OrderRepo(session).create(
            user_id=None, item_id=item.id, total_price=None, status=None  # type: ignore[arg-type]
        )
    await session.rollback()


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["completed", "pending", "lost in the mail", ""])
async def test_order_status_is_free_text(session: AsyncSession, status: str) -> None:
    user, item = await _user_and_item(session)
    order = await OrderRepo(session).create(
        user_id=user.id, item_id=item.id, total_price=Decimal("5"), status=status
    )
    await session.commit()

    reloaded = await OrderRepo(session).get(order.id)
    assert reloaded is not None
    assert reloaded.status == status


@pytest.mark.asyncio
async def test_timestamps_are_set_on_insert_and_update(session: AsyncSession) -> None:
    user, item = await _user_and_item(session)
    assert user.created_at is not None
    assert user.updated_at is not None

    # Backdate the row so a refreshed timestamp cannot compare equal.
    stale = datetime(2000, 1, 1)
    await ItemRepo(session).update(item, created_at=stale, updated_at=stale)
    await session.commit()

    await ItemRepo(session).update(item, quantity=3)
    await session.commit()
    await session.refresh(item)
    assert item.quantity == 3
    assert item.created_at == stale
    assert item.updated_at > stale


@pytest.mark.asyncio
async def test_categories_are_visible_from_both_sides(session: AsyncSession) -> None:
    user, _ = await _user_and_item(session)
    post1 = await _post(session, user)
    post2 = await _post(session, user, title="Tips for Ruby")
    categories = CategoryRepo(session)
    programming = await categories.create(name="Programming")
    tips = await categories.create(name="Tips")

    posts = PostRepo(session)
    await posts.add_categories(post1, [programming])
    await posts.add_categories(post2, [programming, tips])
    await session.commit()

    assert [c.name for c in await posts.categories_for_post(post1.id)] == ["Programming"]
    assert [c.name for c in await posts.categories_for_post(post2.id)] == ["Programming", "Tips"]
    assert [p.id for p in await categories.posts_for_category(programming.id)] == [
        post1.id,
        post2.id,
    ]
    assert [p.id for p in await categories.posts_for_category(tips.id)] == [post2.id]


@pytest.mark.asyncio
async def test_declared_relationships_load_through_join(session: AsyncSession) -> None:
    user, _ = await _user_and_item(session)
    post = await _post(session, user)
    tag = await CategoryRepo(session).create(name="Programming")
    await PostRepo(session).add_categories(post, [tag])
    await CommentRepo(session).create(commentable=post, user_id=user.id, content="Great post!")
    await session.commit()

    assert [c.id for c in await post.awaitable_attrs.categories] == [tag.id]
    assert [p.id for p in await tag.awaitable_attrs.posts] == [post.id]
    assert [c.content for c in await post.awaitable_attrs.comments] == ["Great post!"]
    assert [p.id for p in await user.awaitable_attrs.posts] == [post.id]
    assert [p.id for p in await UserRepo(session).posts_for_user(user.id)] == [post.id]


@pytest.mark.asyncio
async def test_comment_resolves_to_commentable(session: AsyncSession) -> None:
    user, _ = await _user_and_item(session)
    post = await _post(session, user)
    comments = CommentRepo(session)
    comment = await comments.create(commentable=post, user_id=user.id, content="Great post!")
    await session.commit()

    assert (comment.commentable_type, comment.commentable_id) == ("Post", post.id)
    assert await comments.commentable_of(comment) is post
    assert [c.id for c in await comments.comments_for(post)] == [comment.id]
    assert [c.id for c in await UserRepo(session).comments_by_user(user.id)] == [comment.id]


@pytest.mark.asyncio
async def test_comment_dangles_after_commentable_is_deleted(session: AsyncSession) -> None:
    user, _ = await _user_and_item(session)
    post = await _post(session, user)
    comments = CommentRepo(session)
    comment = await comments.create(commentable=post, user_id=user.id, content="Great post!")
    await session.commit()

    await PostRepo(session).delete(post)
    await session.commit()

    still_there = await comments.get(comment.id)
    assert still_there is not None
    assert still_there.commentable_id == post.id
    assert await comments.commentable_of(still_there) is None


@pytest.mark.asyncio
async def test_deleting_post_leaves_categorizations(session: AsyncSession) -> None:
    user, _ = await _user_and_item(session)
    post = await _post(session, user)
    other = await _post(session, user, title="Other")
    categories = CategoryRepo(session)
    tag = await categories.create(name="Programming")
    posts = PostRepo(session)
    (row,) = await posts.add_categories(post, [tag])
    await posts.add_categories(other, [tag])
    await session.commit()

    await posts.delete(post)
    await session.commit()

    orphan = await CategorizationRepo(session).get(row.id)
    assert orphan is not None
    assert orphan.post_id == post.id
    assert await CategorizationRepo(session).count() == 2
    assert [c.id for c in await posts.categorizations_for_post(post.id)] == [row.id]
    # The orphan row no longer reaches a post through the association.
    assert [p.id for p in await categories.posts_for_category(tag.id)] == [other.id]


@pytest.mark.asyncio
async def test_new_post_does_not_inherit_deleted_posts_rows(session: AsyncSession) -> None:
    user, _ = await _user_and_item(session)
    post = await _post(session, user)
    tag = await CategoryRepo(session).create(name="Programming")
    posts = PostRepo(session)
    await posts.add_categories(post, [tag])
    comments = CommentRepo(session)
    await comments.create(commentable=post, user_id=user.id, content="Great post!")
    await session.commit()

    old_id = post.id
    await posts.delete(post)
    await session.commit()

    fresh = await _post(session, user, title="Tips for Ruby")
    assert fresh.id != old_id
    assert await posts.categories_for_post(fresh.id) == []
    assert await comments.comments_for(fresh) == []
    assert [p.id for p in await CategoryRepo(session).posts_for_category(tag.id)] == []


@pytest.mark.asyncio
async def test_deleting_category_leaves_categorizations(session: AsyncSession) -> None:
    user, _ = await _user_and_item(session)
    post = await _post(session, user)
    categories = CategoryRepo(session)
    tag = await categories.create(name="Tips")
    await PostRepo(session).add_categories(post, [tag])
    await session.commit()

    await categories.delete(tag)
    await session.commit()

    assert await CategorizationRepo(session).count() == 1
    assert await PostRepo(session).categories_for_post(post.id) == []


@pytest.mark.asyncio
async def test_deleting_referenced_user_is_refused(session: AsyncSession) -> None:
    user, item = await _user_and_item(session)
    await OrderRepo(session).create(
        user_id=user.id, item_id=item.id, total_price=Decimal("1"), status="pending"
    )
    await session.commit()

    with pytest.raises(IntegrityError):
        await UserRepo(session).delete(user)
    await session.rollback()


def test_commentable_registry() -> None:
    assert commentable_types() == ["Post"]
    assert commentable_model("Post") is Post
    with pytest.raises(UnknownCommentableType):
        commentable_model("Order")


def test_commentable_ref_rejects_non_commentable() -> None:
    with pytest.raises(UnknownCommentableType):
        commentable_ref(Item(id=1))
    with pytest.raises(ValueError):
        commentable_ref(Post())
