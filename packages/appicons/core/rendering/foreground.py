"""Foreground layer rendering.

Renders the foreground into a transparent box that the compositing engine
places on top of the background. Vector and raster sources are fitted with
"contain" semantics; text is centered on its measured glyph bounding box.
"""

from __future__ import annotations

import logging
import math
import re
from io import BytesIO
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from appicons.core.assets.errors import ConfigError
from appicons.core.config.models import (
    ForegroundSpec,
    ImageForeground,
    SvgForeground,
    TextForeground,
)
from appicons.core.rendering.background import load_image
from appicons.core.rendering.colors import hex_to_rgb, normalize_hex

logger = logging.getLogger(__name__)

# Default glyph size as a fraction of canvas height
_TEXT_SIZE_RATIO = 0.6

# Placeholder drawn when no font could be resolved
_PLACEHOLDER_INSET = 0.25
_PLACEHOLDER_OPACITY = 0.3

_FILL_ATTRIBUTE = re.compile(r'fill="[^"]*"')


def override_svg_fill(markup: str, color: str) -> str:
    """Replace every ``fill="..."`` attribute with one color.

    Inherited fills and fills set through CSS classes are left alone.
    """
    return _FILL_ATTRIBUTE.sub(f'fill="{color}"', markup)


def center_on_canvas(image: Image.Image, width: int, height: int) -> Image.Image:
    """Paste an image centered on a transparent width x height canvas."""
    canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    x = (width - image.width) // 2
    y = (height - image.height) // 2
    canvas.alpha_composite(image, (x, y))
    return canvas


def contain(image: Image.Image, width: int, height: int) -> Image.Image:
    """Fit an image inside width x height, preserving aspect, transparent padding."""
    source = image.convert("RGBA")
    ratio = min(width / source.width, height / source.height)
    # Thin sources keep at least one pixel on the short side
    size = (
        min(width, max(1, round(source.width * ratio))),
        min(height, max(1, round(source.height * ratio))),
    )
    fitted = source.resize(size, Image.Resampling.LANCZOS)
    return center_on_canvas(fitted, width, height)


def silhouette(image: Image.Image, color: str) -> Image.Image:
    """Recolor every pixel to ``color`` while keeping the alpha channel."""
    pixels = np.array(image.convert("RGBA"))
    pixels[..., :3] = hex_to_rgb(color)
    return Image.fromarray(pixels)


def _rasterize_svg(markup: str, size: int) -> Image.Image:
    # cairosvg needs the native cairo library; import lazily
    import cairosvg

    png = cairosvg.svg2png(bytestring=markup.encode("utf-8"), output_width=size)
    with Image.open(BytesIO(png)) as raster:
        return raster.convert("RGBA")


class ForegroundRenderer:
    """Renders foreground layers to transparent RGBA boxes."""

    def validate(self, spec: ForegroundSpec, font_data: bytes | None = None) -> None:
        """Check that a foreground layer can be rendered.

        Args:
            spec: Foreground layer.
            font_data: Resolved font bytes for text layers.

        Raises:
            ConfigError: If the layer is misconfigured.
        """
        if isinstance(spec, SvgForeground):
            self._read_svg(spec.svg_path)
            if spec.color is not None:
                hex_to_rgb(spec.color)
        elif isinstance(spec, TextForeground):
            hex_to_rgb(spec.color)
            if font_data is not None:
                self._load_font(font_data, spec.font_size or 12)
        elif isinstance(spec, ImageForeground):
            load_image(spec.image_path, "foreground").close()

    def render(
        self,
        spec: ForegroundSpec,
        width: int,
        height: int,
        *,
        font_data: bytes | None = None,
        force_color: str | None = None,
    ) -> Image.Image:
        """Render a foreground layer.

        Args:
            spec: Foreground layer.
            width: Box width in pixels.
            height: Box height in pixels.
            font_data: Resolved font bytes for text layers. None draws a placeholder.
            force_color: Hex color replacing the layer's own colors.

        Returns:
            Transparent RGBA image of exactly width x height.

        Raises:
            ConfigError: If the layer is misconfigured.
        """
        if isinstance(spec, SvgForeground):
            return self._render_svg(spec, width, height, force_color)
        if isinstance(spec, TextForeground):
            return self._render_text(spec, width, height, font_data, force_color)
        if isinstance(spec, ImageForeground):
            image = contain(load_image(spec.image_path, "foreground"), width, height)
            return silhouette(image, force_color) if force_color else image
        raise ConfigError(f"Unsupported foreground type: {type(spec).__name__}")

    # ------------------------------------------------------------------
    # SVG
    # ------------------------------------------------------------------

    def _read_svg(self, path: Path | None) -> str:
        if path is None:
            raise ConfigError("SVG path is required for svg foregrounds")
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read SVG {path}: {e}", {"path": str(path)}) from e

    def _render_svg(
        self, spec: SvgForeground, width: int, height: int, force_color: str | None
    ) -> Image.Image:
        markup = self._read_svg(spec.svg_path)
        color = force_color or spec.color
        if color:
            markup = override_svg_fill(markup, normalize_hex(color))
        raster = _rasterize_svg(markup, max(width, height))
        return contain(raster, width, height)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def _load_font(self, font_data: bytes, size: int) -> ImageFont.FreeTypeFont:
        try:
            return ImageFont.truetype(BytesIO(font_data), size)
        except OSError as e:
            raise ConfigError(f"Cannot load font: {e}") from e

    def _render_text(
        self,
        spec: TextForeground,
        width: int,
        height: int,
        font_data: bytes | None,
        force_color: str | None,
    ) -> Image.Image:
        r, g, b = hex_to_rgb(force_color or spec.color)
        image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(image)

        if font_data is None:
            logger.debug("No font available for %s, drawing placeholder", spec.font_family)
            x0 = width * _PLACEHOLDER_INSET
            y0 = height * _PLACEHOLDER_INSET
            draw.rectangle(
                (x0, y0, x0 + width * 0.5, y0 + height * 0.5),
                fill=(r, g, b, math.floor(255 * _PLACEHOLDER_OPACITY + 0.5)),
            )
            return image

        size = spec.font_size or math.floor(height * _TEXT_SIZE_RATIO)
        font = self._load_font(font_data, size)

        # Center the glyph outline box, not the advance box
        left, top, right, bottom = draw.textbbox((0, 0), spec.text, font=font)
        x = (width - (right - left)) / 2 - left
        y = (height - (bottom - top)) / 2 - top
        draw.text((x, y), spec.text, fill=(r, g, b, 255), font=font)
        return image
