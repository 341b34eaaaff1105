#!/usr/bin/env python3
"""Serve the comments API with uvicorn.

Logfire and logging are configured before uvicorn imports the app, so a
failing import or a bad DATABASE__URL still reaches the logs.
"""

import sys

import logfire
import uvicorn

from lostfound.config import Settings
from lostfound.util.logging import setup_logging
from lostfound.util.observability import configure_logfire

APP_FACTORY = "lostfound.interface.api.app:create_app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting comments API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
    except Exception as e:
        logfire.error(
            "Comments API failed to start",
            error_type=type(e).__name__,
            _exc_info=e,
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
