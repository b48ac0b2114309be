#!/usr/bin/env python3
"""Start the API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from breakloop.config import Settings
from breakloop.util.logging import setup_logging
from breakloop.util.observability import configure_logfire

APP = "breakloop.interface.api.app:app"


def main() -> int:
    """Configure logging and observability, then serve until stopped."""
    settings = Settings()

    setup_logging(settings)
    # Before importing the app, so instrumentation has somewhere to report
    configure_logfire(settings)

    logfire.info(
        "Starting Breakloop social API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            APP,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
