"""Tests for foreground scale resolution and safe-zone warnings."""

from __future__ import annotations

import pytest

from appicons.core.assets.catalog import get_all_assets, get_all_variant_assets
from appicons.core.assets.models import AssetCategory, AssetSpec, Platform
from appicons.core.compositing.branches import select_branch
from appicons.core.compositing.safe_zone import (
    ScaleSettings,
    ScaleWarning,
    foreground_size,
    get_detailed_scale_warnings,
    resolve_scale,
    validate_icon_scale,
)

_ALL = {spec.name: spec for spec in get_all_assets() + get_all_variant_assets()}


def _size(name: str, settings: ScaleSettings | None = None) -> int:
    spec = _ALL[name]
    scale = resolve_scale(spec, select_branch(spec), settings or ScaleSettings())
    return foreground_size(spec, scale)


class TestResolveScale:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("ios/icon-1024.png", 716),
            ("ios/splash-1170x2532.png", 292),
            ("web/favicon-32x32.png", 27),
            ("store/ios/app-store-icon.png", 512),
            ("android/mipmap-xxxhdpi/ic_launcher_foreground.png", 259),
            ("web/icon-maskable-512x512.png", 286),
        ],
    )
    def test_defaults(self, name: str, expected: int) -> None:
        assert _size(name) == expected

    def test_user_override(self) -> None:
        settings = ScaleSettings(icon_scale=0.5, splash_scale=0.1, favicon_scale=1.0)
        assert _size("ios/icon-1024.png", settings) == 512
        assert _size("ios/splash-1170x2532.png", settings) == 117
        assert _size("web/favicon-32x32.png", settings) == 32

    def test_adaptive_clamped(self) -> None:
        settings = ScaleSettings(icon_scale=0.9)
        size = _size("android/mipmap-xxxhdpi/ic_launcher_foreground.png", settings)
        assert size == 285
        assert size <= 0.66 * 432

    def test_monochrome_clamped(self) -> None:
        settings = ScaleSettings(icon_scale=1.2)
        assert _size("android/mipmap-xxxhdpi/ic_launcher_monochrome.png", settings) == 285

    def test_maskable_follows_icon_scale(self) -> None:
        assert _size("web/icon-maskable-512x512.png", ScaleSettings(icon_scale=0.5)) == 204
        # favicon_scale does not apply to maskable icons
        assert _size("web/icon-maskable-512x512.png", ScaleSettings(favicon_scale=0.2)) == 286

    def test_maskable_clamped(self) -> None:
        assert _size("web/icon-maskable-512x512.png", ScaleSettings(icon_scale=1.5)) == 409

    def test_circular_and_layered_caps(self) -> None:
        settings = ScaleSettings(icon_scale=1.0)
        assert _size("watchos/icon-1024.png", settings) == 819
        assert _size("visionos/icon-front.png", settings) == 819
        assert _size("tvos/top-shelf.png", settings) == 576
        assert _size("ios/icon-1024.png", settings) == 1024

    def test_foreground_size_floor_and_minimum(self) -> None:
        spec = AssetSpec(
            name="tiny.png", width=16, height=16, platform=Platform.WEB, category=AssetCategory.FAVICON
        )
        assert foreground_size(spec, 0.01) == 1
        assert foreground_size(spec, 0.7) == 11

    def test_override_mapping(self) -> None:
        settings = ScaleSettings(icon_scale=0.3, store_scale=0.4)
        assert settings.override_for(AssetCategory.ADAPTIVE) == 0.3
        assert settings.override_for(AssetCategory.STORE) == 0.4
        assert settings.override_for(AssetCategory.SPLASH) is None


class TestScaleWarnings:
    def test_defaults_never_warn(self, make_config) -> None:
        config = make_config(platforms=list(Platform), categories=list(AssetCategory))
        assert get_detailed_scale_warnings(config) == []

    def test_android_adaptive(self) -> None:
        warnings = validate_icon_scale(0.9, [Platform.ANDROID], [AssetCategory.ADAPTIVE])
        assert len(warnings) == 1
        assert warnings[0].recommended == 0.6
        assert "Android adaptive" in warnings[0].message

    def test_adaptive_not_requested(self) -> None:
        assert validate_icon_scale(0.9, [Platform.ANDROID], [AssetCategory.ICON]) == []

    def test_maskable_and_circular(self) -> None:
        warnings = validate_icon_scale(
            0.85, [Platform.WEB, Platform.WATCHOS], [AssetCategory.FAVICON, AssetCategory.ICON]
        )
        assert [w.recommended for w in warnings] == [0.7, 0.7]

    def test_low_visibility(self) -> None:
        warnings = validate_icon_scale(0.3, [Platform.IOS], [AssetCategory.ICON])
        assert len(warnings) == 1
        assert warnings[0].recommended is None

    def test_other_scales(self, make_config) -> None:
        config = make_config(splash_scale=0.6, favicon_scale=0.5, store_scale=0.9)
        settings = [w.setting for w in get_detailed_scale_warnings(config)]
        assert settings == ["splash_scale", "favicon_scale", "store_scale"]

    def test_splash_too_small(self, make_config) -> None:
        warnings = get_detailed_scale_warnings(make_config(splash_scale=0.05))
        assert len(warnings) == 1
        assert "below" in warnings[0].message

    def test_str(self) -> None:
        warning = ScaleWarning(setting="icon_scale", scale=0.9, message="too big")
        assert str(warning) == "icon_scale=0.90: too big"
