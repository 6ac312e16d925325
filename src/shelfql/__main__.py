"""Run the book server with uvicorn: ``python -m shelfql``."""

import logging

import uvicorn

from shelfql.core.entities.cache_config import Settings
from shelfql.server import create_app

logger = logging.getLogger("shelfql")


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings)
    logger.info("Server listening at http://%s:%s/", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
