"""Data models for story_card."""

from .schemas import CardLayout, CardTheme, DisplayPost, ExtractedPost

__all__ = ["CardLayout", "CardTheme", "DisplayPost", "ExtractedPost"]
