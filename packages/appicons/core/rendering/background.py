"""Background layer rendering.

Produces an opaque, full-bleed RGBA canvas from a solid color, a linear or
radial gradient, or an image cropped to fill.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from appicons.core.assets.errors import ConfigError
from appicons.core.config.models import (
    BackgroundSpec,
    ColorBackground,
    GradientBackground,
    ImageBackground,
)
from appicons.core.rendering.colors import RGB, darken_hex, hex_to_rgb

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------------
# Gradient geometry
# ----------------------------------------------------------------------------


def linear_gradient_points(angle: float) -> tuple[int, int, int, int]:
    """Convert a CSS gradient angle to start/end points.

    0 degrees runs top to bottom and angles grow clockwise. Coordinates are
    percentages of the canvas, rounded to whole percents.

    Args:
        angle: Angle in degrees.

    Returns:
        (x1, y1, x2, y2) in percent.
    """
    rad = math.radians(angle)
    x1 = round(50 + math.sin(rad) * 50)
    y1 = round(50 - math.cos(rad) * 50)
    x2 = round(50 + math.sin(rad + math.pi) * 50)
    y2 = round(50 - math.cos(rad + math.pi) * 50)
    return x1, y1, x2, y2


def gradient_stops(colors: list[str]) -> list[tuple[float, RGB]]:
    """Place colors evenly along a gradient.

    Args:
        colors: Hex colors, at least two.

    Returns:
        (offset percent, rgb) pairs; stop ``i`` sits at ``i / (N - 1) * 100``.

    Raises:
        ConfigError: If fewer than two colors are given or one is invalid.
    """
    if len(colors) < 2:
        raise ConfigError(
            "Gradient background requires at least two colors", {"colors": list(colors)}
        )
    last = len(colors) - 1
    return [(i / last * 100, hex_to_rgb(color)) for i, color in enumerate(colors)]


def _interpolate(t: np.ndarray, stops: list[tuple[float, RGB]]) -> np.ndarray:
    offsets = np.array([offset / 100 for offset, _ in stops])
    channels = np.array([rgb for _, rgb in stops], dtype=np.float64)
    out = np.empty(t.shape + (4,), dtype=np.uint8)
    for channel in range(3):
        out[..., channel] = np.rint(np.interp(t, offsets, channels[:, channel]))
    out[..., 3] = 255
    return out


def _normalized_grid(width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    # Pixel centers in the unit square (object bounding box space)
    xs = (np.arange(width, dtype=np.float64) + 0.5) / width
    ys = (np.arange(height, dtype=np.float64) + 0.5) / height
    return np.meshgrid(xs, ys)


def render_gradient(spec: GradientBackground, width: int, height: int) -> Image.Image:
    """Rasterize a gradient background.

    Linear gradients project each pixel onto the start/end axis; radial
    gradients are centered with a 50% radius. Both pad beyond the end stops.
    """
    stops = gradient_stops(spec.colors)
    gx, gy = _normalized_grid(width, height)

    if spec.kind == "radial":
        t = np.hypot(gx - 0.5, gy - 0.5) / 0.5
    else:
        x1, y1, x2, y2 = (v / 100 for v in linear_gradient_points(spec.angle))
        dx, dy = x2 - x1, y2 - y1
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            t = np.zeros_like(gx)
        else:
            t = ((gx - x1) * dx + (gy - y1) * dy) / length_sq

    pixels = _interpolate(np.clip(t, 0.0, 1.0), stops)
    return Image.fromarray(pixels)


# ----------------------------------------------------------------------------
# Dark variant derivation
# ----------------------------------------------------------------------------


def darken_background(spec: BackgroundSpec) -> BackgroundSpec:
    """Derive the dark-variant background.

    Solid colors and every gradient stop keep 30% of each channel. Image
    backgrounds are returned unchanged.

    Raises:
        ConfigError: If a color cannot be parsed.
    """
    if isinstance(spec, ColorBackground):
        return spec.model_copy(update={"color": darken_hex(spec.color or "")})
    if isinstance(spec, GradientBackground):
        return spec.model_copy(update={"colors": [darken_hex(c) for c in spec.colors]})
    return spec


# ----------------------------------------------------------------------------
# Renderer
# ----------------------------------------------------------------------------


def load_image(path: Path | None, layer: str) -> Image.Image:
    """Open an image file as RGBA.

    Raises:
        ConfigError: If the path is missing or the file cannot be decoded.
    """
    if path is None:
        raise ConfigError(f"Image path is required for {layer} image layers")
    try:
        with Image.open(path) as source:
            return source.convert("RGBA")
    except (OSError, UnidentifiedImageError) as e:
        raise ConfigError(f"Cannot read {layer} image {path}: {e}", {"path": str(path)}) from e


class BackgroundRenderer:
    """Renders background layers to opaque RGBA canvases."""

    def validate(self, spec: BackgroundSpec) -> None:
        """Check that a background layer can be rendered.

        Raises:
            ConfigError: If the layer is misconfigured.
        """
        if isinstance(spec, ColorBackground):
            hex_to_rgb(spec.color)
        elif isinstance(spec, GradientBackground):
            gradient_stops(spec.colors)
        elif isinstance(spec, ImageBackground):
            load_image(spec.image_path, "background").close()

    def render(self, spec: BackgroundSpec, width: int, height: int) -> Image.Image:
        """Render a background layer.

        Args:
            spec: Background layer.
            width: Canvas width in pixels.
            height: Canvas height in pixels.

        Returns:
            RGBA image of exactly width x height.

        Raises:
            ConfigError: If the layer is misconfigured.
        """
        logger.debug("Rendering %s background at %dx%d", spec.type, width, height)
        if isinstance(spec, ColorBackground):
            return Image.new("RGBA", (width, height), (*hex_to_rgb(spec.color), 255))
        if isinstance(spec, GradientBackground):
            return render_gradient(spec, width, height)
        if isinstance(spec, ImageBackground):
            source = load_image(spec.image_path, "background")
            return ImageOps.fit(
                source, (width, height), method=Image.Resampling.LANCZOS, centering=(0.5, 0.5)
            )
        raise ConfigError(f"Unsupported background type: {type(spec).__name__}")
