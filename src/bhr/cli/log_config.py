"""Logging setup for a single CLI run.

Library modules only create ``logging.getLogger(__name__)`` loggers;
the handler is attached here, to the ``bhr`` package logger, by the CLI
entry point.
"""

from __future__ import annotations

import logging

_FORMAT: str = "%(name)s: %(message)s"


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the ``bhr`` logger.

    Uses Rich's handler when Rich is installed, a plain stream handler
    otherwise.  *verbose* lowers the threshold from WARNING to DEBUG.
    Calling it again replaces the previous handler.
    """
    handler: logging.Handler
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s " + _FORMAT))
    else:
        from bhr.cli.console import get_rich_console

        handler = RichHandler(console=get_rich_console(), show_path=False)
        handler.setFormatter(logging.Formatter(_FORMAT))

    logger = logging.getLogger("bhr")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
