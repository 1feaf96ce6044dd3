"""Data models for story_card.

This module defines the scraped post record, the display record handed to
the card renderer, and the theme/layout choices.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ExtractedPost:
    """Metadata extracted from a blog post page."""

    title: str
    excerpt: str
    featured_image: str
    published_at: str
    read_time: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DisplayPost:
    """An ExtractedPost plus the author details shown on the card."""

    title: str
    excerpt: str
    featured_image: str
    published_at: str
    read_time: str
    author: str
    author_avatar: str = ""

    @classmethod
    def from_extracted(
        cls,
        post: ExtractedPost,
        author: str,
        author_avatar: str = "",
        featured_image: Optional[str] = None,
    ) -> "DisplayPost":
        """Build a DisplayPost, optionally replacing the featured image."""
        return cls(
            title=post.title,
            excerpt=post.excerpt,
            featured_image=post.featured_image if featured_image is None else featured_image,
            published_at=post.published_at,
            read_time=post.read_time,
            author=author,
            author_avatar=author_avatar,
        )

    @property
    def initials(self) -> str:
        """First letter of each space-separated part of the author name."""
        return "".join(part[0] for part in self.author.split(" ") if part)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class CardTheme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    GRADIENT = "gradient"


class CardLayout(str, Enum):
    STANDARD = "standard"
    OVERLAY = "overlay"
    MINIMAL = "minimal"
