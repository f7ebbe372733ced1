"""
Logging setup shared by the API service and the frontend.

Both tiers log through the root logger, so records from
``jokes_api.*`` and ``jokes_frontend`` end up side by side when
``run.py`` hosts them in one process.  ``setup_logging`` reads the
level and the optional log file from :class:`Settings`; ``LOG_FILE``
therefore applies to whichever tier is running.

The handlers installed here carry the name ``jokes``.  A second call
finds them and leaves the configuration alone, while handlers added by
someone else (pytest, an embedding application) do not count.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

HANDLER_NAME = "jokes"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _installed(root: logging.Logger) -> bool:
    return any(handler.get_name() == HANDLER_NAME for handler in root.handlers)


def setup_logging(config: Settings) -> bool:
    """Attach the console (and file) handlers to the root logger.

    Returns ``True`` when handlers were installed by this call and
    ``False`` when an earlier call had already done it.  An unknown
    ``LOG_LEVEL`` falls back to ``INFO``.
    """
    root = logging.getLogger()
    if _installed(root):
        return False

    root.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True
