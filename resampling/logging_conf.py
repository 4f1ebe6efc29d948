"""Logging setup for the walkthrough entry point.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed here, by the application.
"""

from __future__ import annotations

import logging
from typing import IO, Mapping

__all__ = ["LOG_FORMAT", "configure_logging"]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream: IO[str] | None = None,
    module_levels: Mapping[str, int | str] | None = None,
) -> None:
    """Configure the root logger with a single stream handler.

    Parameters
    ----------
    level:
        Level for the root logger and its handler.
    stream:
        Target for the ``StreamHandler``; ``sys.stderr`` by default.
    module_levels:
        Mapping ``logger -> level`` for finer control, e.g.
        ``{"resampling.statistics": "DEBUG"}``.
    """

    if isinstance(level, str):
        level = level.upper()

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(level)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    root_logger.addHandler(handler)

    # matplotlib is chatty at DEBUG (font manager)
    logging.getLogger("matplotlib").setLevel(logging.WARNING)

    if module_levels:
        for logger_name, logger_level in module_levels.items():
            logging.getLogger(logger_name).setLevel(logger_level)
