"""
shopblog.db.commentable

Polymorphic "commentable" association.

Responsibilities:
- Let any model opt in to receiving comments via the `Commentable` mixin.
- Keep a registry of discriminator tag -> model class.
- Resolve a comment's (commentable_type, commentable_id) pair back to a row.

The pair is not a real foreign key: the database cannot check it, so a
comment keeps pointing at its target after that row is deleted. Resolution
returns `None` for such dangling references.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Mapped, declared_attr, relationship

if TYPE_CHECKING:
    from shopblog.db.models import Comment

_registry: dict[str, type[Any]] = {}


class UnknownCommentableType(LookupError):
    def __init__(self, commentable_type: str) -> None:
        super().__init__(f"{commentable_type!r} is not a commentable type")
        self.commentable_type = commentable_type


class Commentable:
    """
    Mixin for models that can be the target of a Comment.

    The discriminator stored in `comments.commentable_type` is the class name
    (e.g. ``"Post"``).
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _registry[cls.commentable_tag()] = cls

    @classmethod
    def commentable_tag(cls) -> str:
        return cls.__name__

    @declared_attr
    def comments(cls) -> Mapped[list[Comment]]:
        # Read-only accessor: comments are attached by setting the pair on the
        # Comment itself (see `commentable_ref`).
        tag = cls.commentable_tag()
        return relationship(
            "Comment",
            primaryjoin=(
                f"and_(foreign(Comment.commentable_id) == {cls.__name__}.id, "
                f"Comment.commentable_type == '{tag}')"
            ),
            viewonly=True,
            order_by="Comment.id",
        )


def commentable_types() -> list[str]:
    return sorted(_registry)


def commentable_model(commentable_type: str) -> type[Any]:
    try:
        return _registry[commentable_type]
    except KeyError:
        raise UnknownCommentableType(commentable_type) from None


def commentable_ref(target: Any) -> tuple[str, int]:
    """Return the (commentable_type, commentable_id) pair for a persisted target."""
    tag = type(target).commentable_tag() if isinstance(target, Commentable) else None
    if tag is None or tag not in _registry:
        raise UnknownCommentableType(type(target).__name__)
    if target.id is None:
        raise ValueError(f"{tag} must be flushed before it can be commented on")
    return tag, target.id


async def resolve_commentable(session: AsyncSession, comment: Comment) -> Any | None:
    model = commentable_model(comment.commentable_type)
    return await session.get(model, comment.commentable_id)


# --- Module Notes -----------------------------------------------------------
# Only Post opts in today; adding `Commentable` to another model is enough for
# its rows to be accepted by `CommentRepo.create` and the comments router.
