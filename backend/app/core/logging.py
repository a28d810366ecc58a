import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str | None = None) -> None:
    """Install one stream handler on the root logger; repeat calls only reset the level."""
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())
    if _handler not in root.handlers:
        root.addHandler(_handler)
