"""
shopblog.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness check (`/healthz`).
- Provide readiness check (`/readyz`): the DB answers and every table the
  models declare exists (in prod that means migrations have been applied).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from shopblog.api.deps import db_session
from shopblog.db.base import Base

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz", response_model=None)
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, Any] | JSONResponse:
    present = await session.run_sync(
        lambda sync_session: set(inspect(sync_session.connection()).get_table_names())
    )
    missing = sorted(set(Base.metadata.tables) - present)
    if missing:
        return JSONResponse(status_code=503, content={"status": "unready", "missing_tables": missing})
    return {"status": "ready", "tables": len(Base.metadata.tables)}
