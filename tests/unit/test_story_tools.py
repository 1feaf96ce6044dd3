"""Unit tests for the story card MCP tools and their decorators."""

import pytest
import types
from pathlib import Path
from unittest.mock import AsyncMock, patch

from story_card.config import ServerConfig, load_config
from story_card.decorators.exception_handler import exception_handler
from story_card.decorators.tool_logger import tool_logger
from story_card.models.schemas import DisplayPost, ExtractedPost
from story_card.rendering.exporter import ExportError
from story_card.services.relay_fetcher import FetchFailure
from story_card.tools.story_tools import export_card, fetch_post, render_card


pytestmark = pytest.mark.anyio

TOOLS = "story_card.tools.story_tools"

POST = ExtractedPost(
    title="My Post",
    excerpt="",
    featured_image="https://cdn.example.com/cover.jpg",
    published_at="01 March 2024",
    read_time="3 min read",
)
DISPLAY_POST = DisplayPost.from_extracted(POST, author="Levent Bekdemir", featured_image="data:image/png;base64,AAAA")


@pytest.fixture
def tool_config(config):
    with patch(f"{TOOLS}.get_config", return_value=config):
        yield config


class TestFetchPost:
    """Tests for the fetch_post tool."""

    async def test_success(self):
        with patch(f"{TOOLS}.scrape_post", AsyncMock(return_value=POST)):
            result = await fetch_post("https://blog.example.com/my-post/")

        assert result == {"success": True, "post": POST.to_dict()}

    async def test_fetch_failure_reported(self):
        failure = FetchFailure("All relays failed for https://blog.example.com/my-post/: HTTP 500")

        with patch(f"{TOOLS}.scrape_post", AsyncMock(side_effect=failure)):
            result = await fetch_post("https://blog.example.com/my-post/")

        assert result["success"] is False
        assert "HTTP 500" in result["error"]

    async def test_empty_url_reported(self):
        result = await fetch_post("")

        assert result == {"success": False, "error": "Please enter a URL"}


class TestRenderCard:
    """Tests for the render_card tool."""

    async def test_returns_html(self, tool_config):
        with patch(f"{TOOLS}.scrape_post", AsyncMock(return_value=POST)), \
             patch(f"{TOOLS}.build_display_post", AsyncMock(return_value=DISPLAY_POST)):
            result = await render_card("https://blog.example.com/my-post/", theme="dark", layout="overlay")

        assert result["success"] is True
        assert result["post"]["title"] == "My Post"
        assert "layout-overlay" in result["html"]
        assert "data:image/png;base64,AAAA" in result["html"]

    async def test_invalid_theme_rejected_before_fetch(self, tool_config):
        scrape = AsyncMock(return_value=POST)
        embed = AsyncMock(return_value=DISPLAY_POST)

        with patch(f"{TOOLS}.scrape_post", scrape), patch(f"{TOOLS}.build_display_post", embed):
            result = await render_card("https://blog.example.com/my-post/", theme="sepia")

        assert result["success"] is False
        assert "Unknown theme" in result["error"]
        scrape.assert_not_awaited()
        embed.assert_not_awaited()

    async def test_invalid_layout_rejected_before_fetch(self, tool_config):
        scrape = AsyncMock(return_value=POST)

        with patch(f"{TOOLS}.scrape_post", scrape):
            result = await render_card("https://blog.example.com/my-post/", layout="grid")

        assert result["success"] is False
        assert "Unknown layout" in result["error"]
        scrape.assert_not_awaited()


class TestExportCard:
    """Tests for the export_card tool."""

    async def test_exports_to_output_dir(self, tool_config, tmp_path):
        export = AsyncMock(side_effect=lambda html, path, background, pixel_ratio: path)

        with patch(f"{TOOLS}.scrape_post", AsyncMock(return_value=POST)), \
             patch(f"{TOOLS}.build_display_post", AsyncMock(return_value=DISPLAY_POST)), \
             patch(f"{TOOLS}.export_card_png", export):
            result = await export_card("https://blog.example.com/my-post/", theme="gradient", output_dir=str(tmp_path))

        assert result["success"] is True
        assert result["path"] == str((tmp_path / "my-post-story.png").resolve())
        html, path, background = export.call_args.args
        assert background == "#7c3aed"
        assert export.call_args.kwargs["pixel_ratio"] == tool_config.export_pixel_ratio

    async def test_defaults_to_configured_output_dir(self, tool_config):
        export = AsyncMock(side_effect=lambda html, path, background, pixel_ratio: path)

        with patch(f"{TOOLS}.scrape_post", AsyncMock(return_value=POST)), \
             patch(f"{TOOLS}.build_display_post", AsyncMock(return_value=DISPLAY_POST)), \
             patch(f"{TOOLS}.export_card_png", export):
            result = await export_card("https://blog.example.com/my-post/")

        assert Path(result["path"]).parent == tool_config.output_dir.resolve()

    @pytest.mark.parametrize("title", ["../../escaped dir/x", "/tmp/pwn"])
    async def test_hostile_title_stays_in_output_dir(self, tool_config, tmp_path, title):
        hostile = ExtractedPost(**{**POST.to_dict(), "title": title})
        output_dir = tmp_path / "a" / "b"
        export = AsyncMock(side_effect=lambda html, path, background, pixel_ratio: path)

        with patch(f"{TOOLS}.scrape_post", AsyncMock(return_value=hostile)), \
             patch(f"{TOOLS}.build_display_post", AsyncMock(return_value=DISPLAY_POST)), \
             patch(f"{TOOLS}.export_card_png", export):
            result = await export_card("https://blog.example.com/my-post/", output_dir=str(output_dir))

        assert result["success"] is True
        written = export.call_args.args[1]
        assert written.parent == output_dir.resolve()
        assert Path(result["path"]).parent == output_dir.resolve()

    async def test_invalid_theme_skips_export(self, tool_config):
        scrape = AsyncMock(return_value=POST)
        export = AsyncMock()

        with patch(f"{TOOLS}.scrape_post", scrape), patch(f"{TOOLS}.export_card_png", export):
            result = await export_card("https://blog.example.com/my-post/", theme="sepia")

        assert result["success"] is False
        scrape.assert_not_awaited()
        export.assert_not_awaited()

    async def test_export_error_reported(self, tool_config):
        with patch(f"{TOOLS}.scrape_post", AsyncMock(return_value=POST)), \
             patch(f"{TOOLS}.build_display_post", AsyncMock(return_value=DISPLAY_POST)), \
             patch(f"{TOOLS}.export_card_png", AsyncMock(side_effect=ExportError("Failed to export image: boom"))):
            result = await export_card("https://blog.example.com/my-post/")

        assert result == {"success": False, "error": "Failed to export image: boom"}


class TestDecorators:
    """Tests for the tool decorator chain."""

    async def test_exception_handler_converts_errors(self):
        async def broken_tool(url: str):
            raise RuntimeError("boom")

        result = await exception_handler(broken_tool)("https://x")

        assert result == {"success": False, "error": "RuntimeError: boom"}

    async def test_decorators_preserve_result_and_name(self):
        async def good_tool(url: str):
            return {"success": True, "url": url}

        decorated = exception_handler(tool_logger(good_tool, ServerConfig()))

        assert decorated.__name__ == "good_tool"
        assert await decorated("https://x") == {"success": True, "url": "https://x"}


class TestConfig:
    """Tests for environment-driven configuration."""

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STORY_CARD_RELAY_TIMEOUT", "2.5")
        monkeypatch.setenv("STORY_CARD_WORDS_PER_MINUTE", "250")
        monkeypatch.setenv("STORY_CARD_DEFAULT_AUTHOR", "Grace Hopper")
        monkeypatch.setenv("STORY_CARD_OUTPUT_DIR", str(tmp_path))

        config = load_config()

        assert config.relay_timeout == 2.5
        assert config.words_per_minute == 250
        assert config.default_author == "Grace Hopper"
        assert config.output_dir == tmp_path
        assert config.min_document_length == 100

    def test_invalid_number(self, monkeypatch):
        monkeypatch.setenv("STORY_CARD_RELAY_TIMEOUT", "soon")

        with pytest.raises(ValueError, match="STORY_CARD_RELAY_TIMEOUT"):
            load_config()


class TestToolsPackage:
    """Tests for the tools package layout."""

    def test_submodule_attribute_is_the_module(self):
        import story_card.tools
        import story_card.tools.story_tools as story_tools_module

        assert isinstance(story_card.tools.story_tools, types.ModuleType)
        assert story_card.tools.story_tools is story_tools_module
        assert story_tools_module.story_tools == [fetch_post, render_card, export_card]
