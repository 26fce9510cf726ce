"""
shopblog.api.routers.comments

Comment resource endpoints.

Responsibilities:
- Standard list/show/create/update/delete for comments.
- Check that (commentable_type, commentable_id) names an existing row before
  inserting, since the database cannot.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from shopblog.api.deps import db_session
from shopblog.api.schemas import CommentCreate, CommentRead, CommentUpdate
from shopblog.db.models import Comment
from shopblog.db.repositories.comments import CommentRepo

router = APIRouter(prefix="/comments", tags=["comments"])


async def _get_or_404(repo: CommentRepo, comment_id: int) -> Comment:
    comment = await repo.get(comment_id)
    if comment is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Comment not found")
    return comment


@router.get("", response_model=list[CommentRead])
async def list_comments(
    limit: int = 100, offset: int = 0, session: AsyncSession = Depends(db_session)
) -> list[Comment]:
    return await CommentRepo(session).list(limit=limit, offset=offset)


@router.post("", response_model=CommentRead, status_code=HTTP_201_CREATED)
async def create_comment(
    body: CommentCreate, session: AsyncSession = Depends(db_session)
) -> Comment:
    repo = CommentRepo(session)
    # Unknown types raise UnknownCommentableType (-> 422 via the app handler).
    target = await repo.find_commentable(body.commentable_type, body.commentable_id)
    if target is None:
        raise HTTPException(
            status_code=422,
            detail=f"{body.commentable_type} {body.commentable_id} not found",
        )
    comment = await repo.create(commentable=target, user_id=body.user_id, content=body.content)
    await session.commit()
    return comment


@router.get("/{comment_id}", response_model=CommentRead)
async def show_comment(comment_id: int, session: AsyncSession = Depends(db_session)) -> Comment:
    # Served even when the commentable has since been deleted.
    return await _get_or_404(CommentRepo(session), comment_id)


@router.api_route("/{comment_id}", methods=["PATCH", "PUT"], response_model=CommentRead)
async def update_comment(
    comment_id: int, body: CommentUpdate, session: AsyncSession = Depends(db_session)
) -> Comment:
    repo = CommentRepo(session)
    comment = await repo.update(
        await _get_or_404(repo, comment_id), **body.model_dump(exclude_unset=True)
    )
    await session.commit()
    return comment


@router.delete("/{comment_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: int, session: AsyncSession = Depends(db_session)) -> Response:
    repo = CommentRepo(session)
    await repo.delete(await _get_or_404(repo, comment_id))
    await session.commit()
    return Response(status_code=HTTP_204_NO_CONTENT)
