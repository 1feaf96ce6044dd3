"""Server configuration for story_card.

Values come from defaults overridden by STORY_CARD_* environment variables,
e.g. STORY_CARD_RELAY_TIMEOUT=5 or STORY_CARD_LOG_LEVEL=DEBUG.
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional


DEFAULT_IMAGE_RELAY = "https://images.weserv.nl/?url={url}"


@dataclass
class ServerConfig:
    """Settings shared by the scraper, renderer and MCP server."""

    name: str = "story_card"
    log_level: str = "INFO"
    relay_timeout: float = 15.0
    min_document_length: int = 100
    words_per_minute: int = 200
    user_agent: str = "StoryCard/1.0 (Post Scraper)"
    image_relay_template: str = DEFAULT_IMAGE_RELAY
    default_author: str = "Levent Bekdemir"
    default_author_avatar: str = ""
    export_pixel_ratio: int = 3
    output_dir: Path = field(default_factory=lambda: Path.cwd() / "cards")


def load_config() -> ServerConfig:
    """Build a ServerConfig, applying STORY_CARD_<FIELD> environment overrides.

    Returns:
        ServerConfig with overrides applied

    Raises:
        ValueError: if a numeric override cannot be parsed
    """
    config = ServerConfig()

    for f in fields(ServerConfig):
        env_name = f"STORY_CARD_{f.name.upper()}"
        raw = os.environ.get(env_name, "").strip()
        if not raw:
            continue

        default = getattr(config, f.name)
        if isinstance(default, Path):
            value = Path(raw).expanduser()
        elif isinstance(default, (int, float)):
            try:
                value = type(default)(raw)
            except ValueError:
                raise ValueError(f"Invalid value for {env_name}: {raw!r}")
        else:
            value = raw
        setattr(config, f.name, value)

    return config


_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get or create the process-wide configuration."""
    global _config

    if _config is None:
        _config = load_config()
    return _config
