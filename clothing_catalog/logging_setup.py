# clothing_catalog/logging_setup.py
import logging
from typing import Optional

from rich.logging import RichHandler

_LEVEL_MAP = {
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_configured = False


def init_logging(level: Optional[str] = None) -> None:
    """Send every logger through one RichHandler on the root logger.

    Safe to call more than once; only the first call installs the handler,
    later calls only change the level.
    """
    global _configured
    if level is None:
        from .config import get_settings
        level = get_settings().log_level
    resolved = _LEVEL_MAP.get(str(level).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(resolved)
    if _configured:
        return

    handler = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
    root.addHandler(handler)
    _configured = True
