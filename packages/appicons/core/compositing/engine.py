"""Compositing engine.

Combines the background and foreground layers for one spec according to its
composition branch and encodes the result as PNG bytes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from io import BytesIO

from PIL import Image

from appicons.core.assets.models import AssetSpec
from appicons.core.compositing.branches import CompositionBranch, select_branch
from appicons.core.compositing.safe_zone import ScaleSettings, foreground_size, resolve_scale
from appicons.core.config.models import BackgroundSpec, ForegroundSpec
from appicons.core.rendering.background import BackgroundRenderer, darken_background
from appicons.core.rendering.foreground import ForegroundRenderer
from appicons.core.utils.logging import log_performance

logger = logging.getLogger(__name__)

FORCED_FOREGROUND_COLOR = "#FFFFFF"

# Translucent fills replacing the background for clear variants (RGBA)
_CLEAR_LIGHT_FILL = (255, 255, 255, 128)
_CLEAR_DARK_FILL = (0, 0, 0, 128)
_TRANSPARENT = (0, 0, 0, 0)


def encode_png(image: Image.Image) -> bytes:
    """Encode an image as PNG bytes."""
    buffer = BytesIO()
    image.save(buffer, "PNG")
    return buffer.getvalue()


class CompositingEngine:
    """Composes one spec's layers under its branch rules.

    The engine holds only immutable inputs, so a single instance can compose
    specs from several worker threads at once.

    Args:
        background: Background layer.
        foreground: Foreground layer.
        scales: User scale overrides.
        dark_background: Explicit background for dark variants. Derived from
            ``background`` when None.
        font_data: Resolved font bytes for text foregrounds.
        background_renderer: Background renderer (default instance if None).
        foreground_renderer: Foreground renderer (default instance if None).
    """

    def __init__(
        self,
        background: BackgroundSpec,
        foreground: ForegroundSpec,
        *,
        scales: ScaleSettings | None = None,
        dark_background: BackgroundSpec | None = None,
        font_data: bytes | None = None,
        background_renderer: BackgroundRenderer | None = None,
        foreground_renderer: ForegroundRenderer | None = None,
    ) -> None:
        self.background = background
        self.foreground = foreground
        self.scales = scales or ScaleSettings()
        self.dark_background = dark_background
        self.font_data = font_data
        self.background_renderer = background_renderer or BackgroundRenderer()
        self.foreground_renderer = foreground_renderer or ForegroundRenderer()

    @log_performance
    def compose(self, spec: AssetSpec) -> bytes:
        """Compose a spec and return PNG bytes.

        Raises:
            ConfigError: If a layer is misconfigured.
        """
        return encode_png(self.compose_image(spec))

    def compose_image(self, spec: AssetSpec) -> Image.Image:
        """Compose a spec into a width x height RGBA image."""
        branch = select_branch(spec)
        logger.debug("Composing %s via %s branch", spec.name, branch.value)
        return _HANDLERS[branch](self, spec, branch)

    # ------------------------------------------------------------------
    # Branch handlers
    # ------------------------------------------------------------------

    def _standard(self, spec: AssetSpec, branch: CompositionBranch) -> Image.Image:
        canvas = self.background_renderer.render(self.background, spec.width, spec.height)
        return self._place_foreground(canvas, spec, branch)

    def _dark(self, spec: AssetSpec, branch: CompositionBranch) -> Image.Image:
        background = self.dark_background or darken_background(self.background)
        canvas = self.background_renderer.render(background, spec.width, spec.height)
        return self._place_foreground(canvas, spec, branch)

    def _clear(self, spec: AssetSpec, branch: CompositionBranch) -> Image.Image:
        fill = _CLEAR_LIGHT_FILL if branch is CompositionBranch.CLEAR_LIGHT else _CLEAR_DARK_FILL
        canvas = Image.new("RGBA", (spec.width, spec.height), fill)
        return self._place_foreground(canvas, spec, branch)

    def _transparent(self, spec: AssetSpec, branch: CompositionBranch) -> Image.Image:
        canvas = Image.new("RGBA", (spec.width, spec.height), _TRANSPARENT)
        return self._place_foreground(canvas, spec, branch)

    def _background_only(self, spec: AssetSpec, branch: CompositionBranch) -> Image.Image:
        return self.background_renderer.render(self.background, spec.width, spec.height)

    def _place_foreground(
        self, canvas: Image.Image, spec: AssetSpec, branch: CompositionBranch
    ) -> Image.Image:
        size = foreground_size(spec, resolve_scale(spec, branch, self.scales))
        layer = self.foreground_renderer.render(
            self.foreground,
            size,
            size,
            font_data=self.font_data,
            force_color=FORCED_FOREGROUND_COLOR if branch.forces_white() else None,
        )
        canvas.alpha_composite(layer, ((spec.width - size) // 2, (spec.height - size) // 2))
        return canvas


_Handler = Callable[[CompositingEngine, AssetSpec, CompositionBranch], Image.Image]

_HANDLERS: dict[CompositionBranch, _Handler] = {
    CompositionBranch.STANDARD: CompositingEngine._standard,
    CompositionBranch.MASKABLE: CompositingEngine._standard,
    CompositionBranch.DARK: CompositingEngine._dark,
    CompositionBranch.CLEAR_LIGHT: CompositingEngine._clear,
    CompositionBranch.CLEAR_DARK: CompositingEngine._clear,
    CompositionBranch.TINTED: CompositingEngine._transparent,
    CompositionBranch.ADAPTIVE_FOREGROUND: CompositingEngine._transparent,
    CompositionBranch.ADAPTIVE_MONOCHROME: CompositingEngine._transparent,
    CompositionBranch.LAYER_FRONT: CompositingEngine._transparent,
    CompositionBranch.ADAPTIVE_BACKGROUND: CompositingEngine._background_only,
    CompositionBranch.LAYER_BACK: CompositingEngine._background_only,
}

_missing = set(CompositionBranch) - set(_HANDLERS)
if _missing:
    raise RuntimeError(f"Composition branches without a handler: {sorted(b.value for b in _missing)}")
