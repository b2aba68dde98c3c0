from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def get_logger(
    name: str = "knnlab", level: str = "INFO", log_file: Optional[str] = None
) -> logging.Logger:
    """
    Return a configured logger with a console handler (and an optional file handler).

    Handlers are attached once per logger name, so repeated calls only update the level.
    Child loggers such as "knnlab.boundary" propagate into the handlers set up here.
    """
    log = logging.getLogger(name)
    lvl = getattr(logging, str(level).upper(), logging.INFO)
    log.setLevel(lvl)
    if log.handlers:
        for h in log.handlers:
            h.setLevel(lvl)
        return log

    fmt = logging.Formatter(LOG_FORMAT)
    # Console
    ch = logging.StreamHandler()
    ch.setLevel(lvl)
    ch.setFormatter(fmt)
    log.addHandler(ch)
    # File
    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setLevel(lvl)
        fh.setFormatter(fmt)
        log.addHandler(fh)
    return log
