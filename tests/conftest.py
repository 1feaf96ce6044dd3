"""Shared test helpers for story_card."""

from contextlib import contextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from story_card.config import ServerConfig


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def config(tmp_path):
    """Default configuration writing exports into a temporary directory."""
    return ServerConfig(output_dir=tmp_path / "cards")


def make_response(status_code: int = 200, text: str = "", content: bytes = b"", headers=None):
    """Build a mock httpx response whose raise_for_status mirrors the status."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.content = content
    response.headers = headers or {}

    if status_code >= 400:
        response.raise_for_status = MagicMock(
            side_effect=httpx.HTTPStatusError(
                f"HTTP {status_code}",
                request=MagicMock(),
                response=response,
            )
        )
    else:
        response.raise_for_status = MagicMock()
    return response


@contextmanager
def patch_async_client(target: str, get):
    """Patch httpx.AsyncClient at `target` so that client.get is `get`."""
    with patch(target) as mock_client:
        mock_instance = AsyncMock()
        mock_instance.get = get
        mock_instance.__aenter__ = AsyncMock(return_value=mock_instance)
        mock_instance.__aexit__ = AsyncMock(return_value=None)
        mock_client.return_value = mock_instance
        yield mock_client


def html_page(head: str = "", body: str = "") -> str:
    return f"<html><head>{head}</head><body>{body}</body></html>"
