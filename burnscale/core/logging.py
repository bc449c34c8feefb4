import logging
import sys

from burnscale.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Libraries that are chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")

_configured = False


def configure_logging(level: str | None = None) -> None:
    """
    Install a single stream handler on the root logger.
    Safe to call more than once (create_app runs on every test client).
    """
    global _configured
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    _configured = True
