"""
shopblog.api.__main__

Entrypoint for running the FastAPI application via `python -m shopblog.api`
(or the `shopblog-api` console script).
"""

from __future__ import annotations

import uvicorn
from sqlalchemy.engine import make_url

from shopblog.api.app import create_app
from shopblog.observability.logging import get_logger
from shopblog.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)
    log.info(
        "serving",
        host=settings.api_host,
        port=settings.api_port,
        database=make_url(settings.database_url).render_as_string(hide_password=True),
        auto_create_tables=settings.auto_create_tables,
    )

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
