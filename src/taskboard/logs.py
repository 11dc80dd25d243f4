"""Logging setup that keeps records off the TUI screen."""

import logging

from textual.logging import TextualHandler

from taskboard.config import Config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(config: Config) -> None:
    """Route logs to the Textual devtools console and, optionally, a file."""
    level = getattr(logging, config.log_level, None)
    if not isinstance(level, int):
        level = logging.WARNING
    handlers: list[logging.Handler] = [TextualHandler()]
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    logging.basicConfig(
        format=LOG_FORMAT,
        level=level,
        handlers=handlers,
        force=True,
    )
