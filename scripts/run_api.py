from __future__ import annotations

import logging

import uvicorn

from addresscompare.config import settings


def _configure_logging() -> None:
    # Root defaults
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    # Access lines duplicate what the handlers already log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def main() -> None:
    _configure_logging()
    logging.getLogger(__name__).info("Starting API on %s:%s (env=%s)", settings.HOST, settings.PORT, settings.ENV)

    uvicorn.run(
        "addresscompare.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENV == "dev",
        log_config=None,
    )


if __name__ == "__main__":
    main()
