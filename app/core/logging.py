"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; the root handler is
configured once here when the application starts.
"""

import logging

from app.core.config import settings

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger (idempotent)."""
    resolved = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, resolved, logging.INFO), format=_LOG_FORMAT)
    # SQL echo is noisy; keep it behind DEBUG.
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
