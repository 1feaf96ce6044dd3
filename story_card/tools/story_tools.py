"""Story card MCP tools.

This module provides MCP tools for scraping blog posts and producing story
cards from them.

NOTE: Never use Optional parameters in MCP tools - they break MCP clients.
Use empty string "" for optional strings.
"""

from pathlib import Path
from typing import Any, Dict
from mcp.server.fastmcp import Context

from story_card.config import get_config
from story_card.log_system.unified_logger import UnifiedLogger
from story_card.rendering.card_renderer import (
    export_background,
    render_card as render_card_html,
    resolve_layout,
    resolve_theme,
)
from story_card.rendering.exporter import ExportError, export_card_png, export_path
from story_card.services.image_embedder import build_display_post
from story_card.services.post_scraper import scrape_post
from story_card.services.relay_fetcher import FetchFailure


async def fetch_post(url: str, ctx: Context = None) -> Dict[str, Any]:
    """Fetch a blog post and extract its story card metadata.

    The page is fetched through public relay services and the title, excerpt,
    featured image, publish date and read time are extracted from common
    Ghost theme markup and Open Graph tags. Fields that cannot be found are
    returned empty ("Untitled Post" for the title).

    Args:
        url: Full URL of the blog post
        ctx: MCP Context object (injected automatically)

    Returns:
        Dictionary with:
        - success: bool
        - post: object with title, excerpt, featured_image, published_at, read_time
        - error: string if success is False
    """
    logger = UnifiedLogger.get_logger(__name__)
    logger.info(f"fetch_post called: url={url}")

    try:
        post = await scrape_post(url)
    except (ValueError, FetchFailure) as e:
        return {
            "success": False,
            "error": str(e),
        }

    return {
        "success": True,
        "post": post.to_dict(),
    }


async def render_card(
    url: str,
    theme: str = "light",
    layout: str = "standard",
    ctx: Context = None,
) -> Dict[str, Any]:
    """Fetch a blog post and render it as a story card HTML document.

    The featured image is embedded as a data URL so the HTML is
    self-contained.

    Args:
        url: Full URL of the blog post
        theme: Card colour theme: "light", "dark" or "gradient"
        layout: Card layout: "standard", "overlay" or "minimal"
        ctx: MCP Context object (injected automatically)

    Returns:
        Dictionary with:
        - success: bool
        - post: the extracted post metadata
        - html: standalone HTML document of the card
        - error: string if success is False
    """
    logger = UnifiedLogger.get_logger(__name__)
    logger.info(f"render_card called: url={url}, theme={theme}, layout={layout}")

    config = get_config()

    try:
        card_theme = resolve_theme(theme)
        card_layout = resolve_layout(layout)
        post = await scrape_post(url, config)
        display_post = await build_display_post(post, config)
        html = render_card_html(display_post, card_theme, card_layout)
    except (ValueError, FetchFailure) as e:
        return {
            "success": False,
            "error": str(e),
        }

    return {
        "success": True,
        "post": post.to_dict(),
        "html": html,
    }


async def export_card(
    url: str,
    theme: str = "light",
    layout: str = "standard",
    output_dir: str = "",
    ctx: Context = None,
) -> Dict[str, Any]:
    """Fetch a blog post and export its story card as a PNG image.

    Args:
        url: Full URL of the blog post
        theme: Card colour theme: "light", "dark" or "gradient"
        layout: Card layout: "standard", "overlay" or "minimal"
        output_dir: Directory for the PNG (empty string uses the configured output directory)
        ctx: MCP Context object (injected automatically)

    Returns:
        Dictionary with:
        - success: bool
        - post: the extracted post metadata
        - path: absolute path of the written PNG
        - error: string if success is False
    """
    logger = UnifiedLogger.get_logger(__name__)
    logger.info(f"export_card called: url={url}, theme={theme}, layout={layout}, output_dir={output_dir}")

    config = get_config()
    target_dir = Path(output_dir).expanduser() if output_dir else config.output_dir

    try:
        card_theme = resolve_theme(theme)
        card_layout = resolve_layout(layout)
        post = await scrape_post(url, config)
        output_path = export_path(target_dir, post.title)
        display_post = await build_display_post(post, config)
        html = render_card_html(display_post, card_theme, card_layout)
        path = await export_card_png(
            html,
            output_path,
            export_background(card_theme),
            pixel_ratio=config.export_pixel_ratio,
        )
    except (ValueError, FetchFailure, ExportError) as e:
        return {
            "success": False,
            "error": str(e),
        }

    return {
        "success": True,
        "post": post.to_dict(),
        "path": str(path.resolve()),
    }


# List of story tools for registration
story_tools = [
    fetch_post,
    render_card,
    export_card,
]
