"""
shopblog.db.repositories.comments

Repository for `Comment` entities.

Responsibilities:
- Attach comments to any commentable row (polymorphic tag + id).
- List the comments of a commentable.
- Resolve a comment back to its commentable (or `None` when dangling).
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select

from shopblog.db.commentable import commentable_model, commentable_ref, resolve_commentable
from shopblog.db.models import Comment
from shopblog.db.repositories.base import Repo


class CommentRepo(Repo[Comment]):
    model = Comment

    async def create(self, *, commentable: Any, user_id: int, content: str | None) -> Comment:
        commentable_type, commentable_id = commentable_ref(commentable)
        comment = Comment(
            commentable_type=commentable_type,
            commentable_id=commentable_id,
            user_id=user_id,
            content=content,
        )
        self._session.add(comment)
        await self._session.flush()
        return comment

    async def find_commentable(self, commentable_type: str, commentable_id: int) -> Any | None:
        # Raises UnknownCommentableType for tags no model has registered.
        model = commentable_model(commentable_type)
        return await self._session.get(model, commentable_id)

    async def comments_for(self, commentable: Any) -> list[Comment]:
        commentable_type, commentable_id = commentable_ref(commentable)
        stmt = (
            select(Comment)
            .where(
                Comment.commentable_type == commentable_type,
                Comment.commentable_id == commentable_id,
            )
            .order_by(Comment.id)
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def commentable_of(self, comment: Comment) -> Any | None:
        return await resolve_commentable(self._session, comment)
