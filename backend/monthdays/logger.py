import logging
import sys

from .config import settings


def setup_logging(level: str | None = None, stream=None) -> logging.Logger:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=stream or sys.stdout,
    )
    return logging.getLogger("monthdays")
