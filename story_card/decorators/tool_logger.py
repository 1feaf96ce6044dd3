"""Logging decorator for MCP tools."""

import functools
import time
from typing import Any, Awaitable, Callable, Dict

from story_card.config import ServerConfig
from story_card.log_system.unified_logger import UnifiedLogger


def tool_logger(
    func: Callable[..., Awaitable[Dict[str, Any]]],
    config: ServerConfig,
) -> Callable[..., Awaitable[Dict[str, Any]]]:
    """Log the start, outcome and duration of each tool call."""
    logger = UnifiedLogger.get_logger(f"{config.name}.tools")

    @functools.wraps(func)
    async def wrapper(*args, **kwargs) -> Dict[str, Any]:
        logger.debug(f"Tool {func.__name__} started")
        start = time.perf_counter()
        result = await func(*args, **kwargs)
        elapsed = time.perf_counter() - start

        if isinstance(result, dict) and not result.get("success", True):
            logger.warning(f"Tool {func.__name__} failed in {elapsed:.2f}s: {result.get('error')}")
        else:
            logger.info(f"Tool {func.__name__} completed in {elapsed:.2f}s")
        return result

    return wrapper
