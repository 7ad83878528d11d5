from __future__ import annotations

import logging

import uvicorn

from app.core.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    from app.main import app

    settings = get_settings()
    logger.info("Server running on port %d", settings.port)
    logger.info("Visit: http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
