"""Exception handling decorator for MCP tools."""

import functools
from typing import Any, Awaitable, Callable, Dict

from story_card.log_system.unified_logger import UnifiedLogger


def exception_handler(func: Callable[..., Awaitable[Dict[str, Any]]]) -> Callable[..., Awaitable[Dict[str, Any]]]:
    """Turn unexpected exceptions raised by a tool into an error payload.

    Tools report expected failures themselves; anything else is logged with
    its traceback and returned as {"success": False, "error": ...}.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs) -> Dict[str, Any]:
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            logger = UnifiedLogger.get_logger(func.__module__)
            logger.exception(f"Unhandled error in {func.__name__}")
            return {
                "success": False,
                "error": f"{type(e).__name__}: {e}",
            }

    return wrapper
