"""Relay fetcher service.

This module retrieves a page's HTML through third-party relay services,
trying each relay in order until one returns a usable document.
"""

import httpx
from typing import Callable, List, Optional, Sequence
from urllib.parse import quote

from story_card.config import ServerConfig, get_config
from story_card.log_system.unified_logger import UnifiedLogger


RelayEndpoint = Callable[[str], str]


def _codetabs(url: str) -> str:
    return f"https://api.codetabs.com/v1/proxy?quest={quote(url, safe='')}"


def _allorigins(url: str) -> str:
    return f"https://api.allorigins.win/raw?url={quote(url, safe='')}"


def _corsproxy(url: str) -> str:
    return f"https://corsproxy.io/?{quote(url, safe='')}"


# Order defines fallback priority
RELAY_ENDPOINTS: Sequence[RelayEndpoint] = (
    _codetabs,
    _allorigins,
    _corsproxy,
)

HTML_ACCEPT = "text/html,application/xhtml+xml"


class RelayError(Exception):
    """A single relay endpoint failed to return a usable document."""

    def __init__(self, endpoint_url: str, reason: str):
        super().__init__(f"{reason} ({endpoint_url})")
        self.endpoint_url = endpoint_url
        self.reason = reason


class FetchFailure(Exception):
    """Every relay endpoint was tried and none returned a usable document."""

    def __init__(self, message: str, errors: Optional[List[RelayError]] = None):
        super().__init__(message)
        self.errors = errors or []


async def fetch_via_relay(
    url: str,
    endpoints: Sequence[RelayEndpoint] = RELAY_ENDPOINTS,
    config: Optional[ServerConfig] = None,
) -> str:
    """Fetch a page's HTML through the first relay that succeeds.

    Relays are awaited one after another so the winner is always the
    highest-priority working relay. Each attempt is bounded by
    config.relay_timeout.

    Args:
        url: URL of the page to fetch
        endpoints: Ordered relay endpoints to try
        config: Optional server configuration

    Returns:
        Raw HTML of the page

    Raises:
        FetchFailure: if every relay failed
    """
    if config is None:
        config = get_config()

    logger = UnifiedLogger.get_logger(__name__)
    logger.info(f"Fetching {url} via {len(endpoints)} relays")

    errors: List[RelayError] = []

    async with httpx.AsyncClient(
        follow_redirects=True,
        timeout=config.relay_timeout,
        headers={"User-Agent": config.user_agent, "Accept": HTML_ACCEPT},
    ) as client:
        for endpoint in endpoints:
            relay_url = endpoint(url)

            try:
                response = await client.get(relay_url)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                errors.append(RelayError(relay_url, f"HTTP {status}"))
                logger.warning(f"Relay returned HTTP {status}: {relay_url}")
                continue
            except httpx.HTTPError as e:
                errors.append(RelayError(relay_url, f"{type(e).__name__}: {e}"))
                logger.warning(f"Relay request failed: {relay_url}: {e}")
                continue

            html = response.text
            # Some relays answer 200 with an empty or placeholder body
            if not html or len(html) <= config.min_document_length:
                errors.append(RelayError(relay_url, f"Response too short ({len(html or '')} chars)"))
                logger.warning(f"Relay returned a too-short body: {relay_url}")
                continue

            logger.info(f"Fetched {len(html)} chars via {relay_url}")
            return html

    if errors:
        last_error = errors[-1]
        logger.error(f"All relays failed for {url}: {last_error}")
        raise FetchFailure(f"All relays failed for {url}: {last_error}", errors) from last_error

    logger.error(f"All relays failed for {url}")
    raise FetchFailure("All relays failed", errors)
