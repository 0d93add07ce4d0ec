"""Configuration models.

Layer specs (background and foreground) are discriminated unions on ``type``.
Fields the active type needs may be absent here; the renderers reject them
with ``ConfigError`` so a bad layer fails the whole call instead of one asset.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from appicons.core.assets.models import AssetCategory, Platform

# ----------------------------------------------------------------------------
# Background layer
# ----------------------------------------------------------------------------


class ColorBackground(BaseModel):
    """Solid color fill."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["color"] = "color"
    color: str | None = Field(default=None, description="6-digit hex color, '#' optional")


class GradientBackground(BaseModel):
    """Linear or radial gradient with evenly spaced stops.

    Attributes:
        kind: Gradient geometry.
        colors: Hex color stops; at least two are required to render.
        angle: CSS angle in degrees (0 = top to bottom, clockwise). Linear only.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["gradient"] = "gradient"
    kind: Literal["linear", "radial"] = "linear"
    colors: list[str] = Field(default_factory=list)
    angle: float = 0.0


class ImageBackground(BaseModel):
    """Raster image cropped to fill the canvas."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["image"] = "image"
    image_path: Path | None = None


BackgroundSpec = Annotated[
    ColorBackground | GradientBackground | ImageBackground,
    Field(discriminator="type"),
]

# ----------------------------------------------------------------------------
# Foreground layer
# ----------------------------------------------------------------------------

FontSource = Literal["google", "system", "custom"]


class SvgForeground(BaseModel):
    """Vector icon, optionally recolored to a single fill."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["svg"] = "svg"
    svg_path: Path | None = None
    color: str | None = None


class TextForeground(BaseModel):
    """Text glyph run centered on the canvas.

    Attributes:
        text: Text to draw (usually one to three characters).
        font_family: Font family name.
        font_size: Glyph size in pixels. Defaults to 60% of canvas height.
        color: Hex text color.
        font_source: Where to find the font file.
        font_path: Font file path, required for custom fonts.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["text"] = "text"
    text: str = Field(min_length=1)
    font_family: str = "Inter"
    font_size: int | None = Field(default=None, gt=0)
    color: str = "#FFFFFF"
    font_source: FontSource = "google"
    font_path: Path | None = None


class ImageForeground(BaseModel):
    """Raster image fitted inside the canvas."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["image"] = "image"
    image_path: Path | None = None


ForegroundSpec = Annotated[
    SvgForeground | TextForeground | ImageForeground,
    Field(discriminator="type"),
]

# ----------------------------------------------------------------------------
# Generation request
# ----------------------------------------------------------------------------


class GeneratorConfig(BaseModel):
    """One asset generation request.

    Attributes:
        app_name: Display name used by the web manifest and instructions.
        platforms: Platforms to generate for.
        categories: Asset categories to generate.
        background: Background layer.
        foreground: Foreground layer.
        output_dir: Root directory for every written file.
        icon_scale: Foreground scale override for icons (also adaptive and maskable).
        splash_scale: Foreground scale override for splash screens.
        favicon_scale: Foreground scale override for favicons.
        store_scale: Foreground scale override for store artwork.
        dark_background: Explicit background for dark variants. When absent the
            dark background is derived from ``background``.
        max_workers: Upper bound on concurrently rendered assets.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    app_name: str = Field(min_length=1)
    platforms: list[Platform] = Field(min_length=1)
    categories: list[AssetCategory] = Field(min_length=1)
    background: BackgroundSpec
    foreground: ForegroundSpec
    output_dir: Path
    icon_scale: float | None = Field(default=None, gt=0.0, le=1.5)
    splash_scale: float | None = Field(default=None, gt=0.0, le=1.5)
    favicon_scale: float | None = Field(default=None, gt=0.0, le=1.5)
    store_scale: float | None = Field(default=None, gt=0.0, le=1.5)
    dark_background: BackgroundSpec | None = None
    max_workers: int = Field(default=4, ge=1, le=32)


# ----------------------------------------------------------------------------
# Application settings
# ----------------------------------------------------------------------------


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False
    filename: str | None = None


class FontConfig(BaseModel):
    """Font download and cache settings."""

    google_css_url: str = "https://fonts.googleapis.com/css2"
    timeout_seconds: float = Field(default=15.0, gt=0)
    cache_ttl_seconds: float | None = Field(
        default=86400.0, gt=0, description="How long resolved fonts stay cached"
    )


class AppConfig(BaseModel):
    """Application-level configuration (shared across generation runs)."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    fonts: FontConfig = FontConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("appicons.yaml")
