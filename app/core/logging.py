from __future__ import annotations

import logging

from app.core.config import Settings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level.upper())
    # httpx logs every request at INFO; the fetch client logs its own outcomes.
    logging.getLogger("httpx").setLevel(logging.WARNING)
