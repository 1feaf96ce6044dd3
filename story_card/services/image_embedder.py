"""Image embedding service.

Featured images are fetched through an image relay and inlined as data URLs
so the exported card does not depend on cross-origin image loading.
"""

import base64
import httpx
from filetype import guess
from typing import Optional
from urllib.parse import quote

from story_card.config import ServerConfig, get_config
from story_card.log_system.unified_logger import UnifiedLogger
from story_card.models.schemas import DisplayPost, ExtractedPost


FALLBACK_MIME = "application/octet-stream"


def detect_mime_type(data: bytes, content_type: Optional[str]) -> str:
    """Guess a MIME type from the byte signature, then the Content-Type header."""
    kind = guess(data)
    if kind:
        return kind.mime
    if content_type:
        mime = content_type.split(";")[0].strip().lower()
        if mime:
            return mime
    return FALLBACK_MIME


async def image_url_to_data_url(url: str, config: Optional[ServerConfig] = None) -> str:
    """Convert a remote image URL into a base64 data URL.

    Args:
        url: Image URL (empty, data: and root-relative URLs are returned as-is)
        config: Optional server configuration

    Returns:
        data: URL on success, otherwise the original url
    """
    if not url or url.startswith("data:") or url.startswith("/"):
        return url

    if config is None:
        config = get_config()

    logger = UnifiedLogger.get_logger(__name__)
    relay_url = config.image_relay_template.format(url=quote(url, safe=""))

    async with httpx.AsyncClient(
        follow_redirects=True,
        timeout=config.relay_timeout,
        headers={"User-Agent": config.user_agent},
    ) as client:
        try:
            response = await client.get(relay_url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Failed to fetch image {url}: {e}")
            return url

    data = response.content
    if not data:
        logger.warning(f"Image relay returned no data for {url}")
        return url

    mime = detect_mime_type(data, response.headers.get("Content-Type"))
    encoded = base64.b64encode(data).decode("ascii")
    logger.info(f"Embedded image {url} ({mime}, {len(data)} bytes)")
    return f"data:{mime};base64,{encoded}"


async def build_display_post(post: ExtractedPost, config: Optional[ServerConfig] = None) -> DisplayPost:
    """Attach default author details and an embedded featured image."""
    if config is None:
        config = get_config()

    featured_image = await image_url_to_data_url(post.featured_image, config)
    return DisplayPost.from_extracted(
        post,
        author=config.default_author,
        author_avatar=config.default_author_avatar,
        featured_image=featured_image,
    )
