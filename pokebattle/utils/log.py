"""Logging setup for the command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from pokebattle.utils.config import config


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route ``pokebattle`` log records through a rich handler.

    Library code only creates module loggers; handlers are installed here,
    once, by the CLI entry point.
    """
    level = logging.DEBUG if verbose else getattr(logging, config.log_level.upper(), logging.WARNING)
    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("pokebattle")
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False
