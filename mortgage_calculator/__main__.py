"""Run the service: python -m mortgage_calculator"""

import logging

import uvicorn

from mortgage_calculator.config import settings
from mortgage_calculator.infrastructure.observability.logging import setup_logging


def main() -> None:
    setup_logging(settings.log_level)
    logging.info(
        f"Starting server on port {settings.port}",
        extra={"host": settings.host, "port": settings.port},
    )
    uvicorn.run(
        "mortgage_calculator.api.main:app",
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.timeout_keep_alive_seconds,
        log_config=None,
    )


if __name__ == "__main__":
    main()
