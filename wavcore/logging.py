# wavcore/logging.py
import logging

from wavcore.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Attach a stream handler to the root logger (once) at the given level."""
    root = logging.getLogger()
    lvl = (level or settings.log_level).upper()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(lvl)
