"""Catalog of every asset the generator knows how to produce.

The catalog is a constant table built once at import. Base specs and
appearance variants are kept in separate tables; lookups return fresh lists
so callers may extend them freely.
"""

from __future__ import annotations

from appicons.core.assets.models import AppearanceMode, AssetCategory, AssetSpec, Platform

_I = AssetCategory.ICON
_S = AssetCategory.SPLASH
_A = AssetCategory.ADAPTIVE
_F = AssetCategory.FAVICON
_ST = AssetCategory.STORE


def _spec(
    name: str,
    width: int,
    height: int,
    platform: Platform,
    category: AssetCategory,
    scale: int | None = None,
    appearance: AppearanceMode = AppearanceMode.LIGHT,
) -> AssetSpec:
    return AssetSpec(
        name=name,
        width=width,
        height=height,
        platform=platform,
        category=category,
        scale=scale,
        appearance=appearance,
    )


# ----------------------------------------------------------------------------
# iOS
# ----------------------------------------------------------------------------

# (file stem, points, scale)
_IOS_ICON_SIZES: tuple[tuple[str, float, int], ...] = (
    ("icon-20", 20, 1),
    ("icon-20@2x", 20, 2),
    ("icon-20@3x", 20, 3),
    ("icon-29", 29, 1),
    ("icon-29@2x", 29, 2),
    ("icon-29@3x", 29, 3),
    ("icon-40", 40, 1),
    ("icon-40@2x", 40, 2),
    ("icon-40@3x", 40, 3),
    ("icon-60@2x", 60, 2),
    ("icon-60@3x", 60, 3),
    ("icon-76", 76, 1),
    ("icon-76@2x", 76, 2),
    ("icon-83.5@2x", 83.5, 2),
    ("icon-1024", 1024, 1),
)

_IOS_VARIANT_STEMS = ("icon-60@2x", "icon-60@3x", "icon-76@2x", "icon-83.5@2x", "icon-1024")

_IOS_VARIANT_MODES = (
    AppearanceMode.DARK,
    AppearanceMode.TINTED,
    AppearanceMode.CLEAR_LIGHT,
    AppearanceMode.CLEAR_DARK,
)

_IOS_SPLASH_SIZES: tuple[tuple[int, int], ...] = (
    (1290, 2796),
    (1179, 2556),
    (1170, 2532),
    (1242, 2688),
    (1125, 2436),
    (828, 1792),
    (1242, 2208),
    (750, 1334),
    (640, 1136),
    (2048, 2732),
    (1668, 2388),
    (1668, 2224),
    (1536, 2048),
)


def _ios_icon(stem: str, points: float, scale: int, folder: str = "ios", **kwargs) -> AssetSpec:
    px = int(points * scale)
    return _spec(
        f"{folder}/{stem}.png",
        px,
        px,
        Platform.IOS,
        _I,
        scale=scale if scale > 1 else None,
        **kwargs,
    )


IOS_ICONS: tuple[AssetSpec, ...] = tuple(
    _ios_icon(stem, points, scale) for stem, points, scale in _IOS_ICON_SIZES
)

IOS_ICON_VARIANTS: dict[AppearanceMode, tuple[AssetSpec, ...]] = {
    mode: tuple(
        _ios_icon(stem, points, scale, folder=f"ios/{mode.value}", appearance=mode)
        for stem, points, scale in _IOS_ICON_SIZES
        if stem in _IOS_VARIANT_STEMS
    )
    for mode in _IOS_VARIANT_MODES
}

IOS_SPLASH: tuple[AssetSpec, ...] = tuple(
    _spec(f"ios/splash-{w}x{h}.png", w, h, Platform.IOS, _S) for w, h in _IOS_SPLASH_SIZES
)

# ----------------------------------------------------------------------------
# Android
# ----------------------------------------------------------------------------

_ANDROID_DENSITIES: tuple[tuple[str, int, int, tuple[int, int]], ...] = (
    # density, legacy icon px, adaptive layer px, splash (w, h)
    ("mdpi", 48, 108, (320, 480)),
    ("hdpi", 72, 162, (480, 800)),
    ("xhdpi", 96, 216, (720, 1280)),
    ("xxhdpi", 144, 324, (1080, 1920)),
    ("xxxhdpi", 192, 432, (1440, 2560)),
)

ANDROID_ICONS: tuple[AssetSpec, ...] = tuple(
    _spec(f"android/mipmap-{density}/ic_launcher.png", px, px, Platform.ANDROID, _I)
    for density, px, _, _ in _ANDROID_DENSITIES
)

ANDROID_ADAPTIVE: tuple[AssetSpec, ...] = tuple(
    _spec(f"android/mipmap-{density}/ic_launcher_{layer}.png", px, px, Platform.ANDROID, _A)
    for density, _, px, _ in _ANDROID_DENSITIES
    for layer in ("foreground", "background")
)

ANDROID_MONOCHROME: tuple[AssetSpec, ...] = tuple(
    _spec(
        f"android/mipmap-{density}/ic_launcher_monochrome.png",
        px,
        px,
        Platform.ANDROID,
        _A,
        appearance=AppearanceMode.ANY,
    )
    for density, _, px, _ in _ANDROID_DENSITIES
)

ANDROID_SPLASH: tuple[AssetSpec, ...] = tuple(
    _spec(f"android/drawable-{density}/splash.png", w, h, Platform.ANDROID, _S)
    for density, _, _, (w, h) in _ANDROID_DENSITIES
)

ANDROID_SPLASH_DARK: tuple[AssetSpec, ...] = tuple(
    _spec(
        f"android/drawable-night-{density}/splash.png",
        w,
        h,
        Platform.ANDROID,
        _S,
        appearance=AppearanceMode.DARK,
    )
    for density, _, _, (w, h) in _ANDROID_DENSITIES
)

# ----------------------------------------------------------------------------
# Store listings
# ----------------------------------------------------------------------------

STORE_ANDROID: tuple[AssetSpec, ...] = (
    _spec("store/android/play-store-icon.png", 512, 512, Platform.ANDROID, _ST),
    _spec("store/android/feature-graphic.png", 1024, 500, Platform.ANDROID, _ST),
    _spec("store/android/tv-banner.png", 1280, 720, Platform.ANDROID, _ST),
)

STORE_IOS: tuple[AssetSpec, ...] = (
    _spec("store/ios/app-store-icon.png", 1024, 1024, Platform.IOS, _ST),
)

# ----------------------------------------------------------------------------
# watchOS / tvOS / visionOS
# ----------------------------------------------------------------------------

_WATCHOS_SIZES: tuple[tuple[str, int, int | None], ...] = (
    ("icon-1024", 1024, None),
    ("icon-48@2x", 96, 2),
    ("icon-80@2x", 160, 2),
    ("icon-88@2x", 176, 2),
    ("icon-92@2x", 184, 2),
    ("icon-172@2x", 344, 2),
    ("icon-196@2x", 392, 2),
    ("icon-216@2x", 432, 2),
    ("icon-234@2x", 468, 2),
)

WATCHOS_ICONS: tuple[AssetSpec, ...] = tuple(
    _spec(f"watchos/{stem}.png", px, px, Platform.WATCHOS, _I, scale=scale)
    for stem, px, scale in _WATCHOS_SIZES
)

TVOS_ICONS: tuple[AssetSpec, ...] = (
    _spec("tvos/icon-back.png", 400, 240, Platform.TVOS, _I),
    _spec("tvos/icon-back@2x.png", 800, 480, Platform.TVOS, _I, scale=2),
    _spec("tvos/icon-front.png", 400, 240, Platform.TVOS, _I),
    _spec("tvos/icon-front@2x.png", 800, 480, Platform.TVOS, _I, scale=2),
    _spec("tvos/top-shelf.png", 1920, 720, Platform.TVOS, _I),
    _spec("tvos/top-shelf@2x.png", 3840, 1440, Platform.TVOS, _I, scale=2),
)

VISIONOS_ICONS: tuple[AssetSpec, ...] = (
    _spec("visionos/icon-1024.png", 1024, 1024, Platform.VISIONOS, _I),
    _spec("visionos/icon-back.png", 1024, 1024, Platform.VISIONOS, _I),
    _spec("visionos/icon-front.png", 1024, 1024, Platform.VISIONOS, _I),
)

# ----------------------------------------------------------------------------
# Web
# ----------------------------------------------------------------------------

_APPLE_TOUCH_SIZES = (57, 60, 72, 76, 114, 120, 144, 152, 180)

WEB_FAVICONS: tuple[AssetSpec, ...] = (
    *(_spec(f"web/favicon-{s}x{s}.png", s, s, Platform.WEB, _F) for s in (16, 32, 48)),
    *(_spec(f"web/apple-touch-icon-{s}x{s}.png", s, s, Platform.WEB, _F) for s in _APPLE_TOUCH_SIZES),
    *(_spec(f"web/icon-{s}x{s}.png", s, s, Platform.WEB, _F) for s in (192, 512)),
    *(
        _spec(f"web/icon-maskable-{s}x{s}.png", s, s, Platform.WEB, _F, appearance=AppearanceMode.ANY)
        for s in (192, 512)
    ),
    *(
        _spec(
            f"web/icon-monochrome-{s}x{s}.png",
            s,
            s,
            Platform.WEB,
            _F,
            appearance=AppearanceMode.TINTED,
        )
        for s in (192, 512)
    ),
)

# ----------------------------------------------------------------------------
# Lookups
# ----------------------------------------------------------------------------

_IOS_VARIANTS: tuple[AssetSpec, ...] = tuple(
    spec for specs in IOS_ICON_VARIANTS.values() for spec in specs
)

_WEB_VARIANTS: tuple[AssetSpec, ...] = tuple(
    spec for spec in WEB_FAVICONS if spec.appearance is not AppearanceMode.LIGHT
)

_BY_PLATFORM: dict[Platform, tuple[AssetSpec, ...]] = {
    Platform.IOS: IOS_ICONS + IOS_SPLASH + STORE_IOS,
    Platform.ANDROID: ANDROID_ICONS + ANDROID_ADAPTIVE + ANDROID_SPLASH + STORE_ANDROID,
    Platform.WEB: WEB_FAVICONS,
    Platform.WATCHOS: WATCHOS_ICONS,
    Platform.TVOS: TVOS_ICONS,
    Platform.VISIONOS: VISIONOS_ICONS,
}

_VARIANTS_BY_PLATFORM: dict[Platform, tuple[AssetSpec, ...]] = {
    Platform.IOS: _IOS_VARIANTS,
    Platform.ANDROID: ANDROID_SPLASH_DARK + ANDROID_MONOCHROME,
    Platform.WEB: _WEB_VARIANTS,
    Platform.WATCHOS: (),
    Platform.TVOS: (),
    Platform.VISIONOS: (),
}

_BY_CATEGORY: dict[AssetCategory, tuple[AssetSpec, ...]] = {
    _I: IOS_ICONS + ANDROID_ICONS + WATCHOS_ICONS + TVOS_ICONS + VISIONOS_ICONS,
    _S: IOS_SPLASH + ANDROID_SPLASH,
    _A: ANDROID_ADAPTIVE,
    _F: WEB_FAVICONS,
    _ST: STORE_ANDROID + STORE_IOS,
}

_VARIANTS_BY_CATEGORY: dict[AssetCategory, tuple[AssetSpec, ...]] = {
    _I: _IOS_VARIANTS,
    _S: ANDROID_SPLASH_DARK,
    _A: ANDROID_MONOCHROME,
    _F: _WEB_VARIANTS,
    _ST: (),
}


def get_assets_by_platform(platform: Platform | str) -> list[AssetSpec]:
    """Return every base spec for a platform.

    Raises:
        ValueError: If the platform is unknown.
    """
    return list(_BY_PLATFORM[Platform(platform)])


def get_assets_by_category(category: AssetCategory | str) -> list[AssetSpec]:
    """Return every base spec for a category.

    Raises:
        ValueError: If the category is unknown.
    """
    return list(_BY_CATEGORY[AssetCategory(category)])


def get_variant_assets_by_platform(platform: Platform | str) -> list[AssetSpec]:
    """Return every appearance variant for a platform."""
    return list(_VARIANTS_BY_PLATFORM[Platform(platform)])


def get_variant_assets_by_category(category: AssetCategory | str) -> list[AssetSpec]:
    """Return every appearance variant for a category."""
    return list(_VARIANTS_BY_CATEGORY[AssetCategory(category)])


def get_all_assets() -> list[AssetSpec]:
    """Return every base spec across all platforms."""
    return [spec for specs in _BY_PLATFORM.values() for spec in specs]


def get_all_variant_assets() -> list[AssetSpec]:
    """Return every appearance variant across all platforms."""
    return [spec for specs in _VARIANTS_BY_PLATFORM.values() for spec in specs]
