"""Configuration management for the petition toolkit.

Loads and validates YAML configuration with sensible defaults for
field extraction, document rendering and the form catalog.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

RGB = tuple[float, float, float]

DEFAULT_CATEGORY_KEYWORDS: dict[str, list[str]] = {
    "identity": ["license", "id", "passport"],
    "legal": ["marriage", "birth", "death", "court", "order"],
    "financial": ["pay", "tax", "bank", "statement", "w2", "1099"],
    "property": ["deed", "lease", "title", "registration"],
}


class ExtractionConfig(BaseModel):
    """Configuration for candidate extraction and auto-fill."""

    marriage_window_years: int = Field(default=10, ge=1)
    category_keywords: dict[str, list[str]] = Field(
        default_factory=lambda: {
            category: list(words)
            for category, words in DEFAULT_CATEGORY_KEYWORDS.items()
        }
    )


class RenderingConfig(BaseModel):
    """Page geometry, typography and fixed wording for generated PDFs."""

    page_width: float = 612
    page_height: float = 792
    margin_left: float = 50
    indent: float = 70
    line_height: float = 20
    section_gap: float = 20
    heading_gap: float = 30
    bottom_margin: float = 70
    font_name: str = "Helvetica"
    title_font_size: float = 16
    caption_font_size: float = 12
    heading_font_size: float = 14
    body_font_size: float = 10
    footer_font_size: float = 8
    checkbox_size: float = 8
    checkbox_gap: float = 4
    accent_color: RGB = (0.11, 0.25, 0.72)
    text_color: RGB = (0.0, 0.0, 0.0)
    footer_color: RGB = (0.5, 0.5, 0.5)
    default_county: str = "LOS ANGELES"
    attribution: str = "This document was generated by CA Legal Petition Auto-Filler"
    blank_placeholder: str = "_________________________"
    page_compression: bool = True


class CatalogConfig(BaseModel):
    """Location of the form catalog."""

    forms_path: str = "configs/forms.yaml"


class AppConfig(BaseModel):
    """Top-level application configuration."""

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    log_level: str = "INFO"


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.
            Defaults to configs/config.yaml.

    Returns:
        Validated application configuration.
    """
    if path is None:
        path = Path("configs/config.yaml")

    if path.exists():
        logger.info("Loading configuration from %s", path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        return AppConfig(**raw)

    logger.info("No config file found at %s, using defaults", path)
    return AppConfig()
