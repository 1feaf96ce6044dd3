"""Unified logger for story_card.

All modules obtain loggers through UnifiedLogger.get_logger(__name__) so that
handlers are configured in one place. Output goes to stderr because stdout
carries the MCP STDIO transport.
"""

import logging
import sys
from typing import Optional

from story_card.config import ServerConfig


ROOT_LOGGER_NAME = "story_card"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class UnifiedLogger:
    """Process-wide logging setup for the story_card logger hierarchy."""

    _handler: Optional[logging.Handler] = None

    @classmethod
    def initialize_default(cls, config: ServerConfig) -> None:
        """Attach a stderr handler to the story_card logger.

        Calling it again only updates the level.
        """
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(config.log_level.upper())

        if cls._handler is None:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            root.addHandler(handler)
            root.propagate = False
            cls._handler = handler

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Return a logger inside the story_card hierarchy."""
        if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        return logging.getLogger(name)

    @classmethod
    async def close(cls) -> None:
        """Flush and detach the handler installed by initialize_default."""
        if cls._handler is None:
            return
        root = logging.getLogger(ROOT_LOGGER_NAME)
        cls._handler.flush()
        root.removeHandler(cls._handler)
        root.propagate = True
        cls._handler = None
