"""Logging for story_card."""

from .unified_logger import UnifiedLogger

__all__ = ["UnifiedLogger"]
