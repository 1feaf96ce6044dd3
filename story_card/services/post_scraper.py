"""Post scraper service.

This module turns a blog post URL into an ExtractedPost: relay fetch, parse,
field extraction, date formatting and read time estimation.
"""

from typing import Optional

from story_card.config import ServerConfig, get_config
from story_card.log_system.unified_logger import UnifiedLogger
from story_card.models.schemas import ExtractedPost
from story_card.services.document import ParsedDocument
from story_card.services.field_extractor import extract_fields
from story_card.services.read_time import estimate_read_time
from story_card.services.relay_fetcher import fetch_via_relay


async def scrape_post(url: str, config: Optional[ServerConfig] = None) -> ExtractedPost:
    """Scrape a blog post's metadata.

    Fetching is all-or-nothing; once the HTML is in hand every field is
    best-effort, so a page without any recognised markup still produces a
    complete record.

    Args:
        url: URL of the blog post
        config: Optional server configuration

    Returns:
        ExtractedPost for the page

    Raises:
        ValueError: if url is empty
        FetchFailure: if no relay could fetch the page
    """
    if not url or not url.strip():
        raise ValueError("Please enter a URL")

    if config is None:
        config = get_config()

    logger = UnifiedLogger.get_logger(__name__)
    url = url.strip()

    html = await fetch_via_relay(url, config=config)

    document = ParsedDocument(html)
    fields = extract_fields(document)

    post = ExtractedPost(
        title=fields.title,
        excerpt=fields.excerpt,
        featured_image=fields.featured_image,
        published_at=fields.published_at,
        read_time=estimate_read_time(fields.body_text, config.words_per_minute),
    )

    logger.info(f"Scraped post '{post.title}' ({post.read_time}) from {url}")
    return post
