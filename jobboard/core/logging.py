# jobboard/core/logging.py
import logging

from jobboard.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = None) -> None:
    """Configure root logging once for the API process."""
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    # motor/pymongo heartbeat chatter is noisy at DEBUG
    logging.getLogger("pymongo").setLevel(max(log_level, logging.INFO))
