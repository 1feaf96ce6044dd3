"""PNG export for rendered story cards.

The card HTML is loaded into headless Chromium and the .story-card element
is screenshotted at a high device scale factor.
"""

import re
from pathlib import Path
from typing import Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from story_card.log_system.unified_logger import UnifiedLogger


CARD_SELECTOR = ".story-card"
VIEWPORT = {"width": 480, "height": 1000}

_WHITESPACE = re.compile(r"\s+")
_UNSAFE_CHARS = re.compile(r"[^\w\-.]+")
_REPEATED_HYPHENS = re.compile(r"-{2,}")

FALLBACK_FILENAME = "story.png"


class ExportError(Exception):
    """Rendering the card to an image failed."""


def export_filename(title: str) -> str:
    """Derive the download filename for a card, e.g. "my-post-story.png".

    Titles come from the scraped page, so path separators and other unsafe
    characters are replaced and leading dots removed.
    """
    slug = _WHITESPACE.sub("-", title.lower())
    slug = _UNSAFE_CHARS.sub("-", slug)
    slug = _REPEATED_HYPHENS.sub("-", slug).lstrip(".-").rstrip("-")
    if not slug:
        return FALLBACK_FILENAME
    return f"{slug}-story.png"


def export_path(output_dir: Union[str, Path], title: str) -> Path:
    """Resolve the PNG path for a card inside output_dir.

    Raises:
        ExportError: if the resolved path would fall outside output_dir
    """
    base = Path(output_dir).expanduser().resolve()
    path = (base / export_filename(title)).resolve()
    if base not in path.parents:
        raise ExportError(f"Refusing to export outside {base}: {path}")
    return path


async def export_card_png(
    html: str,
    output_path: Union[str, Path],
    background_color: str,
    pixel_ratio: int = 3,
) -> Path:
    """Rasterise a rendered card to a PNG file.

    Args:
        html: HTML document produced by render_card
        output_path: Where to write the PNG
        background_color: Page background behind the card
        pixel_ratio: Device scale factor for the screenshot

    Returns:
        Path of the written PNG

    Raises:
        ExportError: if the browser fails to render or capture the card
    """
    logger = UnifiedLogger.get_logger(__name__)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(headless=True)
            try:
                page = await browser.new_page(
                    viewport=VIEWPORT,
                    device_scale_factor=pixel_ratio,
                )
                await page.set_content(html, wait_until="networkidle")
                await page.evaluate(
                    "color => { document.body.style.background = color; }",
                    background_color,
                )
                await page.locator(CARD_SELECTOR).screenshot(path=str(output_path))
            finally:
                await browser.close()
    except PlaywrightError as e:
        logger.error(f"Failed to export card to {output_path}: {e}")
        raise ExportError(f"Failed to export image: {e}") from e

    logger.info(f"Exported card to {output_path}")
    return output_path
