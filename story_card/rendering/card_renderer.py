"""Story card HTML renderer.

Cards are rendered as standalone HTML documents with inline CSS so that the
exporter can rasterise them without any external assets.
"""

from dataclasses import dataclass
from html import escape
from typing import Dict, Union

from story_card.models.schemas import CardLayout, CardTheme, DisplayPost


CARD_WIDTH = 360


@dataclass(frozen=True)
class ThemeStyle:
    card: str
    text: str
    muted: str
    border: str
    avatar_background: str
    avatar_text: str
    export_background: str


THEME_STYLES: Dict[CardTheme, ThemeStyle] = {
    CardTheme.LIGHT: ThemeStyle(
        card="#ffffff",
        text="#111827",
        muted="#6b7280",
        border="#e5e7eb",
        avatar_background="#f3f4f6",
        avatar_text="#4b5563",
        export_background="#ffffff",
    ),
    CardTheme.DARK: ThemeStyle(
        card="#111827",
        text="#ffffff",
        muted="#9ca3af",
        border="#374151",
        avatar_background="#374151",
        avatar_text="#d1d5db",
        export_background="#111827",
    ),
    CardTheme.GRADIENT: ThemeStyle(
        card="linear-gradient(to bottom right, #9333ea, #ec4899, #fb923c)",
        text="#ffffff",
        muted="rgba(255, 255, 255, 0.8)",
        border="rgba(255, 255, 255, 0.3)",
        avatar_background="#f3f4f6",
        avatar_text="#4b5563",
        export_background="#7c3aed",
    ),
}

# Overlay cards always sit on a darkened photo
OVERLAY_STYLE = ThemeStyle(
    card="#000000",
    text="#ffffff",
    muted="rgba(255, 255, 255, 0.7)",
    border="rgba(255, 255, 255, 0.3)",
    avatar_background="rgba(255, 255, 255, 0.2)",
    avatar_text="#ffffff",
    export_background="#000000",
)

BASE_CSS = """
* { box-sizing: border-box; margin: 0; padding: 0; }
body { font-family: -apple-system, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif; }
.story-card { position: relative; width: %(width)dpx; overflow: hidden; border-radius: 12px; }
.story-card .media { position: relative; width: 100%%; overflow: hidden; }
.story-card .media img { display: block; width: 100%%; height: 100%%; object-fit: cover; }
.story-card .placeholder { width: 100%%; height: 100%%; background: #d1d5db; }
.story-card h2 { font-size: 24px; font-weight: 700; line-height: 1.25; }
.story-card .excerpt { margin-top: 12px; font-size: 14px; line-height: 1.6; }
.story-card .divider { height: 1px; margin: 16px 0 12px; }
.story-card .byline { display: flex; align-items: center; gap: 12px; }
.story-card .avatar { width: 40px; height: 40px; border-radius: 50%%; overflow: hidden;
  display: flex; align-items: center; justify-content: center; font-size: 14px; font-weight: 600; }
.story-card .avatar img { width: 100%%; height: 100%%; object-fit: cover; }
.story-card .author { font-size: 14px; font-weight: 600; }
.story-card .meta { display: flex; gap: 12px; font-size: 12px; }
"""


def resolve_theme(theme: Union[CardTheme, str]) -> CardTheme:
    try:
        return CardTheme(theme)
    except ValueError:
        choices = ", ".join(item.value for item in CardTheme)
        raise ValueError(f"Unknown theme: {theme!r} (expected one of {choices})")


def resolve_layout(layout: Union[CardLayout, str]) -> CardLayout:
    try:
        return CardLayout(layout)
    except ValueError:
        choices = ", ".join(item.value for item in CardLayout)
        raise ValueError(f"Unknown layout: {layout!r} (expected one of {choices})")


def export_background(theme: Union[CardTheme, str]) -> str:
    """Background colour used behind the card when exporting."""
    return THEME_STYLES[resolve_theme(theme)].export_background


def _image(post: DisplayPost) -> str:
    if not post.featured_image:
        return '<div class="placeholder"></div>'
    return f'<img src="{escape(post.featured_image)}" alt="{escape(post.title)}">'


def _avatar(post: DisplayPost, style: ThemeStyle, extra_css: str = "") -> str:
    css = f"background: {style.avatar_background}; color: {style.avatar_text};{extra_css}"
    if post.author_avatar:
        inner = f'<img src="{escape(post.author_avatar)}" alt="{escape(post.author)}">'
    else:
        inner = escape(post.initials)
    return f'<div class="avatar" style="{css}">{inner}</div>'


def _byline(post: DisplayPost, style: ThemeStyle, avatar_css: str = "") -> str:
    return (
        f'<div class="divider" style="background: {style.border};"></div>'
        f'<div class="byline">{_avatar(post, style, avatar_css)}'
        f'<div><p class="author" style="color: {style.text};">{escape(post.author)}</p>'
        f'<div class="meta" style="color: {style.muted};">'
        f'<span class="date">{escape(post.published_at)}</span>'
        f'<span class="read-time">{escape(post.read_time)}</span>'
        f"</div></div></div>"
    )


def _render_standard(post: DisplayPost, style: ThemeStyle) -> str:
    return (
        f'<div class="story-card layout-standard" style="background: {style.card};">'
        f'<div class="media" style="aspect-ratio: 16 / 9;">{_image(post)}</div>'
        f'<div style="padding: 24px;">'
        f'<h2 style="color: {style.text};">{escape(post.title)}</h2>'
        f'<p class="excerpt" style="color: {style.muted};">{escape(post.excerpt)}</p>'
        f"{_byline(post, style)}"
        f"</div></div>"
    )


def _render_overlay(post: DisplayPost) -> str:
    style = OVERLAY_STYLE
    return (
        f'<div class="story-card layout-overlay">'
        f'<div class="media" style="aspect-ratio: 9 / 16;">{_image(post)}'
        f'<div style="position: absolute; inset: 0; background: linear-gradient(to top, '
        f'rgba(0, 0, 0, 0.9), rgba(0, 0, 0, 0.5), transparent);"></div>'
        f'<div style="position: absolute; left: 0; right: 0; bottom: 0; padding: 24px;">'
        f'<h2 style="color: {style.text};">{escape(post.title)}</h2>'
        f'<p class="excerpt" style="color: rgba(255, 255, 255, 0.8);">{escape(post.excerpt)}</p>'
        f"{_byline(post, style, ' border: 2px solid rgba(255, 255, 255, 0.3);')}"
        f"</div></div></div>"
    )


def _render_minimal(post: DisplayPost, style: ThemeStyle) -> str:
    return (
        f'<div class="story-card layout-minimal" style="background: {style.card};">'
        f'<div class="media" style="aspect-ratio: 16 / 9;">{_image(post)}</div>'
        f'<div style="padding: 24px; text-align: center;">'
        f'<h2 style="color: {style.text};">{escape(post.title)}</h2>'
        f'<p class="author" style="margin-top: 12px; color: {style.muted};">{escape(post.author)}</p>'
        f'<p class="date" style="font-size: 12px; color: {style.muted};">{escape(post.published_at)}</p>'
        f"</div></div>"
    )


def render_card(
    post: DisplayPost,
    theme: Union[CardTheme, str] = CardTheme.LIGHT,
    layout: Union[CardLayout, str] = CardLayout.STANDARD,
) -> str:
    """Render a post as a standalone HTML document holding one .story-card.

    Args:
        post: Post to render
        theme: Colour theme (light, dark or gradient)
        layout: Card layout (standard, overlay or minimal)

    Returns:
        HTML document as a string

    Raises:
        ValueError: for an unknown theme or layout
    """
    theme = resolve_theme(theme)
    layout = resolve_layout(layout)
    style = THEME_STYLES[theme]

    if layout is CardLayout.OVERLAY:
        card = _render_overlay(post)
    elif layout is CardLayout.MINIMAL:
        card = _render_minimal(post, style)
    else:
        card = _render_standard(post, style)

    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(post.title)}</title>"
        f"<style>{BASE_CSS % {'width': CARD_WIDTH}}</style>"
        "</head>"
        f'<body style="background: {style.export_background};">{card}</body></html>'
    )
