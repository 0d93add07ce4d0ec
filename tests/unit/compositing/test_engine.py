"""Tests for the compositing engine."""

from __future__ import annotations

from pathlib import Path

import pytest

from appicons.core.assets.errors import ConfigError
from appicons.core.assets.models import AppearanceMode, AssetCategory, AssetSpec, Platform
from appicons.core.compositing.branches import CompositionBranch
from appicons.core.compositing.engine import _HANDLERS, CompositingEngine
from appicons.core.compositing.safe_zone import ScaleSettings
from appicons.core.config.models import ColorBackground, ImageForeground
from tests.helpers import decode_png

_BG = (51, 102, 153, 255)  # #336699
_DARK_BG = (15, 31, 46, 255)
_RED = (255, 0, 0, 255)
_WHITE = (255, 255, 255, 255)


def _spec(
    name: str = "ios/icon-test.png",
    size: tuple[int, int] = (100, 100),
    platform: Platform = Platform.IOS,
    category: AssetCategory = AssetCategory.ICON,
    appearance: AppearanceMode = AppearanceMode.LIGHT,
) -> AssetSpec:
    return AssetSpec(
        name=name,
        width=size[0],
        height=size[1],
        platform=platform,
        category=category,
        appearance=appearance,
    )


@pytest.fixture
def engine(logo_png: Path) -> CompositingEngine:
    return CompositingEngine(
        ColorBackground(color="#336699"), ImageForeground(image_path=logo_png)
    )


class TestStandard:
    def test_png_dimensions(self, engine: CompositingEngine) -> None:
        image = decode_png(engine.compose(_spec(size=(120, 80))))
        assert image.size == (120, 80)

    def test_background_and_centered_foreground(self, engine: CompositingEngine) -> None:
        image = engine.compose_image(_spec())
        # 70% of 100 -> 70px box at (15, 15)
        assert image.getpixel((0, 0)) == _BG
        assert image.getpixel((14, 50)) == _BG
        assert image.getpixel((16, 50)) == _RED
        assert image.getpixel((84, 50)) == _RED
        assert image.getpixel((86, 50)) == _BG

    def test_scale_override(self, logo_png: Path) -> None:
        engine = CompositingEngine(
            ColorBackground(color="#336699"),
            ImageForeground(image_path=logo_png),
            scales=ScaleSettings(icon_scale=0.2),
        )
        image = engine.compose_image(_spec())
        assert image.getpixel((50, 50)) == _RED
        assert image.getpixel((30, 50)) == _BG

    def test_misconfigured_layer_raises(self, tmp_path: Path) -> None:
        engine = CompositingEngine(
            ColorBackground(color="#336699"),
            ImageForeground(image_path=tmp_path / "missing.png"),
        )
        with pytest.raises(ConfigError):
            engine.compose(_spec())


class TestVariants:
    def test_dark_derived(self, engine: CompositingEngine) -> None:
        image = engine.compose_image(_spec(appearance=AppearanceMode.DARK))
        assert image.getpixel((0, 0)) == _DARK_BG
        assert image.getpixel((50, 50)) == _RED

    def test_dark_explicit(self, logo_png: Path) -> None:
        engine = CompositingEngine(
            ColorBackground(color="#336699"),
            ImageForeground(image_path=logo_png),
            dark_background=ColorBackground(color="#101010"),
        )
        image = engine.compose_image(_spec(appearance=AppearanceMode.DARK))
        assert image.getpixel((0, 0)) == (16, 16, 16, 255)

    def test_tinted_is_white_on_transparent(self, engine: CompositingEngine) -> None:
        image = engine.compose_image(_spec(appearance=AppearanceMode.TINTED))
        assert image.getpixel((0, 0))[3] == 0
        assert image.getpixel((50, 50)) == _WHITE

    @pytest.mark.parametrize(
        ("appearance", "fill"),
        [
            (AppearanceMode.CLEAR_LIGHT, (255, 255, 255, 128)),
            (AppearanceMode.CLEAR_DARK, (0, 0, 0, 128)),
        ],
    )
    def test_clear(
        self, engine: CompositingEngine, appearance: AppearanceMode, fill: tuple[int, ...]
    ) -> None:
        image = engine.compose_image(_spec(appearance=appearance))
        assert image.getpixel((0, 0)) == fill
        assert image.getpixel((50, 50)) == _RED


class TestAdaptiveAndLayers:
    def test_adaptive_background_is_full_bleed(self, engine: CompositingEngine) -> None:
        spec = _spec(
            "android/mipmap-mdpi/ic_launcher_background.png",
            (108, 108),
            Platform.ANDROID,
            AssetCategory.ADAPTIVE,
        )
        image = engine.compose_image(spec)
        assert image.getpixel((0, 0)) == _BG
        assert image.getpixel((54, 54)) == _BG

    def test_adaptive_foreground_is_transparent(self, engine: CompositingEngine) -> None:
        spec = _spec(
            "android/mipmap-mdpi/ic_launcher_foreground.png",
            (108, 108),
            Platform.ANDROID,
            AssetCategory.ADAPTIVE,
        )
        image = engine.compose_image(spec)
        assert image.getpixel((0, 0))[3] == 0
        assert image.getpixel((54, 54)) == _RED

    def test_monochrome_is_white(self, engine: CompositingEngine) -> None:
        spec = _spec(
            "android/mipmap-mdpi/ic_launcher_monochrome.png",
            (108, 108),
            Platform.ANDROID,
            AssetCategory.ADAPTIVE,
            AppearanceMode.ANY,
        )
        image = engine.compose_image(spec)
        assert image.getpixel((0, 0))[3] == 0
        assert image.getpixel((54, 54)) == _WHITE

    def test_layer_back_and_front(self, engine: CompositingEngine) -> None:
        back = engine.compose_image(_spec("tvos/icon-back.png", (400, 240), Platform.TVOS))
        front = engine.compose_image(_spec("tvos/icon-front.png", (400, 240), Platform.TVOS))
        assert back.getpixel((200, 120)) == _BG
        assert front.getpixel((0, 0))[3] == 0
        assert front.getpixel((200, 120)) == _RED

    def test_maskable_shrinks_foreground(self, engine: CompositingEngine) -> None:
        spec = _spec(
            "web/icon-maskable-512x512.png",
            (512, 512),
            Platform.WEB,
            AssetCategory.FAVICON,
            AppearanceMode.ANY,
        )
        image = engine.compose_image(spec)
        # 0.7 * 0.8 of 512 -> 286px box at (113, 113)
        assert image.getpixel((110, 256)) == _BG
        assert image.getpixel((116, 256)) == _RED
        assert image.getpixel((0, 0)) == _BG


def test_every_branch_has_a_handler() -> None:
    assert set(_HANDLERS) == set(CompositionBranch)
