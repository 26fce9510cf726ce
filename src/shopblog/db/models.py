"""
shopblog.db.models

Relational schema for the shop/blog sample.

Responsibilities:
- Define ORM models and their associations:
  - User: authors posts and comments, places orders
  - Post: belongs to a user, receives polymorphic comments, tagged with categories
  - Comment: belongs to an author and to one commentable (tag + id)
  - Category / Categorization: many-to-many with Post through the join entity
  - Item / Order: orders reference a user and an item through enforced foreign keys
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shopblog.db.base import Base, TimestampMixin
from shopblog.db.commentable import Commentable


class User(TimestampMixin, Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String)
    email: Mapped[str | None] = mapped_column(String)

    posts: Mapped[list[Post]] = relationship(back_populates="user", passive_deletes="all")
    orders: Mapped[list[Order]] = relationship(back_populates="user", passive_deletes="all")
    comments: Mapped[list[Comment]] = relationship(back_populates="user", passive_deletes="all")


class Post(Commentable, TimestampMixin, Base):
    __tablename__ = "posts"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str | None] = mapped_column(String)
    content: Mapped[str | None] = mapped_column(Text)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    user: Mapped[User] = relationship(back_populates="posts")
    # passive_deletes="all": deleting a post leaves its join rows untouched.
    categorizations: Mapped[list[Categorization]] = relationship(
        primaryjoin="Post.id == foreign(Categorization.post_id)",
        back_populates="post",
        passive_deletes="all",
    )
    categories: Mapped[list[Category]] = relationship(
        secondary="categorizations",
        primaryjoin="Post.id == foreign(Categorization.post_id)",
        secondaryjoin="Category.id == foreign(Categorization.category_id)",
        viewonly=True,
        order_by="Category.id",
    )


class Comment(TimestampMixin, Base):
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(primary_key=True)
    content: Mapped[str | None] = mapped_column(Text)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    # Polymorphic reference: no foreign key, the target table is data.
    commentable_type: Mapped[str] = mapped_column(String, nullable=False)
    commentable_id: Mapped[int] = mapped_column(nullable=False)

    user: Mapped[User] = relationship(back_populates="comments")

    __table_args__ = (
        Index("ix_comments_commentable", "commentable_type", "commentable_id"),
        {"sqlite_autoincrement": True},
    )


class Category(TimestampMixin, Base):
    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String)

    categorizations: Mapped[list[Categorization]] = relationship(
        primaryjoin="Category.id == foreign(Categorization.category_id)",
        back_populates="category",
        passive_deletes="all",
    )
    posts: Mapped[list[Post]] = relationship(
        secondary="categorizations",
        primaryjoin="Category.id == foreign(Categorization.category_id)",
        secondaryjoin="Post.id == foreign(Categorization.post_id)",
        viewonly=True,
        order_by="Post.id",
    )


class Categorization(TimestampMixin, Base):
    """Join row between a Post and a Category."""

    __tablename__ = "categorizations"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    # Plain indexed references: the database does not cascade or block deletes.
    post_id: Mapped[int] = mapped_column(nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(nullable=False, index=True)

    post: Mapped[Post | None] = relationship(
        primaryjoin="foreign(Categorization.post_id) == Post.id",
        back_populates="categorizations",
    )
    category: Mapped[Category | None] = relationship(
        primaryjoin="foreign(Categorization.category_id) == Category.id",
        back_populates="categorizations",
    )


class Item(TimestampMixin, Base):
    __tablename__ = "items"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String)
    price: Mapped[Decimal | None] = mapped_column(Numeric)
    quantity: Mapped[int | None] = mapped_column()

    orders: Mapped[list[Order]] = relationship(back_populates="item", passive_deletes="all")


class Order(TimestampMixin, Base):
    __tablename__ = "orders"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    total_price: Mapped[Decimal | None] = mapped_column(Numeric)
    # Free text; no set of allowed values is enforced anywhere.
    status: Mapped[str | None] = mapped_column(String)
    item_id: Mapped[int] = mapped_column(ForeignKey("items.id"), nullable=False, index=True)

    user: Mapped[User] = relationship(back_populates="orders")
    item: Mapped[Item] = relationship(back_populates="orders")


# --- Module Notes -----------------------------------------------------------
# No relationship here configures a delete cascade. Deleting a parent row either
# leaves dependents in place (comments, categorizations) or is refused by the
# storage layer's foreign keys (orders, posts, comments -> users).
# Every table sets `sqlite_autoincrement`: SQLite would otherwise hand a deleted
# row's id to the next insert, and leftover comments and categorizations would
# attach themselves to the new row.
