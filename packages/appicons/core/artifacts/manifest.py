"""PWA web manifest generation."""

from __future__ import annotations

import json
from typing import Any

from appicons.core.config.models import BackgroundSpec, ColorBackground
from appicons.core.rendering.colors import normalize_hex

MANIFEST_NAME = "web/site.webmanifest"

DEFAULT_THEME_COLOR = "#FFFFFF"

# (file name, edge size, purpose) relative to the web/ directory
MANIFEST_ICONS: tuple[tuple[str, int, str], ...] = (
    ("icon-192x192.png", 192, "any"),
    ("icon-512x512.png", 512, "any"),
    ("icon-maskable-192x192.png", 192, "maskable"),
    ("icon-maskable-512x512.png", 512, "maskable"),
    ("icon-monochrome-192x192.png", 192, "monochrome"),
    ("icon-monochrome-512x512.png", 512, "monochrome"),
)


def theme_color_for(background: BackgroundSpec) -> str:
    """Solid background color as ``#RRGGBB``; white for gradients and images."""
    if isinstance(background, ColorBackground):
        return normalize_hex(background.color or "")
    return DEFAULT_THEME_COLOR


def build_manifest(app_name: str, background: BackgroundSpec) -> dict[str, Any]:
    """Build the web manifest document.

    Args:
        app_name: Used for both ``name`` and ``short_name``.
        background: Background layer; a solid color becomes the theme color.

    Returns:
        Manifest as a JSON-compatible dict.
    """
    color = theme_color_for(background)
    return {
        "name": app_name,
        "short_name": app_name,
        "icons": [
            {"src": src, "sizes": f"{size}x{size}", "type": "image/png", "purpose": purpose}
            for src, size, purpose in MANIFEST_ICONS
        ],
        "theme_color": color,
        "background_color": color,
        "display": "standalone",
        "start_url": "/",
    }


def render_manifest(app_name: str, background: BackgroundSpec) -> bytes:
    """Serialize the web manifest as UTF-8 JSON."""
    return (json.dumps(build_manifest(app_name, background), indent=2) + "\n").encode("utf-8")
