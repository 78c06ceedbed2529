"""Logging setup (console + optional rotating file)."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from tripsim.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None, log_dir: str | None = None) -> list[logging.Handler]:
    """Install root handlers. Returns the handlers that were installed."""
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    directory = settings.log_dir if log_dir is None else log_dir

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if directory:
        path = Path(directory)
        path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                path / "tripsim.log",
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    # Quiet noisy libraries
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return handlers
