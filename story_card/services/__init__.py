"""Services for story_card."""

from .date_formatter import format_date
from .document import ParsedDocument
from .field_extractor import extract_fields
from .image_embedder import build_display_post, image_url_to_data_url
from .post_scraper import scrape_post
from .read_time import estimate_read_time
from .relay_fetcher import fetch_via_relay, FetchFailure, RelayError, RELAY_ENDPOINTS

__all__ = [
    "format_date",
    "ParsedDocument",
    "extract_fields",
    "build_display_post",
    "image_url_to_data_url",
    "scrape_post",
    "estimate_read_time",
    "fetch_via_relay",
    "FetchFailure",
    "RelayError",
    "RELAY_ENDPOINTS",
]
