"""Platform descriptor files.

- iOS: ``AppIcon.appiconset/Contents.json`` with light, dark and tinted
  appearances, plus the referenced PNGs copied in under flat names
- Android: the adaptive icon XML and, for solid backgrounds, ``colors.xml``
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from appicons.core.assets.models import AuxiliaryArtifact
from appicons.core.config.models import BackgroundSpec, ColorBackground
from appicons.core.rendering.colors import normalize_hex

# ----------------------------------------------------------------------------
# iOS
# ----------------------------------------------------------------------------

APPICONSET_DIR = "ios/AppIcon.appiconset"

# (points, scales)
IOS_ICON_TABLE: tuple[tuple[float, tuple[int, ...]], ...] = (
    (20, (1, 2, 3)),
    (29, (1, 2, 3)),
    (40, (1, 2, 3)),
    (60, (2, 3)),
    (76, (1, 2)),
    (83.5, (2,)),
    (1024, (1,)),
)

# Appearance -> (catalog folder, Contents.json tag); light carries no tag
_APPEARANCES: tuple[tuple[str, str, list[dict[str, str]] | None], ...] = (
    ("light", "ios", None),
    ("dark", "ios/dark", [{"appearance": "luminosity", "value": "dark"}]),
    ("tinted", "ios/tinted", [{"appearance": "luminosity", "value": "tinted"}]),
)


def _points_label(points: float) -> str:
    return f"{points:g}"


def ios_icon_stem(points: float, scale: int) -> str:
    """Catalog file stem for an iOS icon size (``icon-60@2x``, ``icon-1024``)."""
    label = _points_label(points)
    return f"icon-{label}" if scale == 1 else f"icon-{label}@{scale}x"


def build_ios_appiconset(rendered: Mapping[str, bytes]) -> list[AuxiliaryArtifact]:
    """Build the asset catalog descriptor and the icon copies it references.

    The size table is replicated once per appearance. An entry gets a
    ``filename`` only when the matching PNG was rendered; Xcode shows the
    remaining slots as empty.

    Args:
        rendered: PNG bytes keyed by asset name (e.g. ``ios/dark/icon-1024.png``).

    Returns:
        Contents.json followed by every copied icon.
    """
    images: list[dict] = []
    copies: list[AuxiliaryArtifact] = []

    for appearance, folder, tags in _APPEARANCES:
        for points, scales in IOS_ICON_TABLE:
            for scale in scales:
                stem = ios_icon_stem(points, scale)
                label = _points_label(points)
                entry: dict = {
                    "idiom": "universal",
                    "platform": "ios",
                    "size": f"{label}x{label}",
                    "scale": f"{scale}x",
                }
                if tags:
                    entry["appearances"] = tags

                source = rendered.get(f"{folder}/{stem}.png")
                if source is not None:
                    suffix = "" if appearance == "light" else f"-{appearance}"
                    filename = f"{stem}{suffix}.png"
                    entry["filename"] = filename
                    copies.append(
                        AuxiliaryArtifact(name=f"{APPICONSET_DIR}/{filename}", content=source)
                    )
                images.append(entry)

    contents = {"images": images, "info": {"version": 1, "author": "xcode"}}
    descriptor = AuxiliaryArtifact(
        name=f"{APPICONSET_DIR}/Contents.json",
        content=(json.dumps(contents, indent=2) + "\n").encode("utf-8"),
    )
    return [descriptor, *copies]


# ----------------------------------------------------------------------------
# Android
# ----------------------------------------------------------------------------

ADAPTIVE_ICON_NAME = "android/mipmap-anydpi-v26/ic_launcher.xml"
COLORS_NAME = "android/values/colors.xml"

_ADAPTIVE_ICON_XML = """<?xml version="1.0" encoding="utf-8"?>
<adaptive-icon xmlns:android="http://schemas.android.com/apk/res/android">
    <background android:drawable="@mipmap/ic_launcher_background" />
    <foreground android:drawable="@mipmap/ic_launcher_foreground" />
    <monochrome android:drawable="@mipmap/ic_launcher_monochrome" />
</adaptive-icon>
"""

_COLORS_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <color name="ic_launcher_background">{color}</color>
</resources>
"""


def render_adaptive_icon_xml() -> bytes:
    """The three-layer adaptive icon descriptor."""
    return _ADAPTIVE_ICON_XML.encode("utf-8")


def render_colors_xml(background: BackgroundSpec) -> bytes | None:
    """Launcher background color resource, only for solid color backgrounds."""
    if not isinstance(background, ColorBackground):
        return None
    return _COLORS_XML.format(color=normalize_hex(background.color or "")).encode("utf-8")
