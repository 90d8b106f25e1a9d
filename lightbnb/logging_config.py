"""
Logging setup for processes embedding the data-access layer.
"""

from typing import Optional
from lightbnb.config import Settings, get_settings
import logging


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings; debug mode forces DEBUG level."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    # Engine-level SQL (pool pings, Database.ping) is logged here; Database.query echoes its own statements
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.debug else logging.WARNING)
