"""Card rendering and export for story_card."""

from .card_renderer import export_background, render_card, THEME_STYLES
from .exporter import export_card_png, export_filename, export_path, ExportError

__all__ = [
    "export_background",
    "render_card",
    "THEME_STYLES",
    "export_card_png",
    "export_filename",
    "export_path",
    "ExportError",
]
