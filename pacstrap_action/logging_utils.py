from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Marks handlers installed here so a second call replaces them.
_HANDLER_ATTR = "_pacstrap_action_handler"


def _tagged(handler: logging.Handler, fmt: str, level: int) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    handler.setLevel(level)
    setattr(handler, _HANDLER_ATTR, True)
    return handler


def configure_logging(*, verbose: bool = False, log_path: Optional[str] = None) -> Optional[str]:
    """Log to the console, and optionally keep a full transcript in a file.

    The console shows INFO (DEBUG with verbose). The log file, when given,
    always records DEBUG, so unlabeled tool output ends up there too. A log
    file that can't be opened is reported on the console and skipped.

    Returns the log file path in use, or None.
    """

    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, _HANDLER_ATTR, False):
            root.removeHandler(h)
            h.close()

    root.setLevel(logging.DEBUG)
    root.addHandler(_tagged(logging.StreamHandler(), CONSOLE_FORMAT, logging.DEBUG if verbose else logging.INFO))

    logger = logging.getLogger(__name__)
    if log_path is None:
        return None

    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        logger.warning("Couldn't open log file %s, logging to console only: %s", log_path, e)
        return None

    root.addHandler(_tagged(file_handler, FILE_FORMAT, logging.DEBUG))
    logger.debug("Logging to %s", log_path)
    return log_path
