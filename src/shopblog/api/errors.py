"""
shopblog.api.errors

Mapping of storage-layer errors to HTTP responses.

Responsibilities:
- Surface constraint violations (missing referenced row, NOT NULL) as 409.
- Surface unknown polymorphic tags as 422.

Nothing is retried or repaired; the client sees the driver's message.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.status import HTTP_409_CONFLICT

from shopblog.db.commentable import UnknownCommentableType
from shopblog.observability.logging import get_logger

log = get_logger(__name__)


async def integrity_error_handler(_: Request, exc: IntegrityError) -> JSONResponse:
    # The failed transaction is rolled back when `deps.db_session` closes the session.
    detail = str(exc.orig) if exc.orig is not None else str(exc)
    log.warning("integrity_error", detail=detail)
    return JSONResponse(status_code=HTTP_409_CONFLICT, content={"detail": detail})


async def unknown_commentable_handler(_: Request, exc: UnknownCommentableType) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IntegrityError, integrity_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(UnknownCommentableType, unknown_commentable_handler)  # type: ignore[arg-type]
