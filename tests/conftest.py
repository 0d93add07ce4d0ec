"""Shared pytest fixtures for appicons tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from appicons.core.config.models import ColorBackground, GeneratorConfig, ImageForeground

# ============================================================================
# Image Fixtures
# ============================================================================


@pytest.fixture
def logo_png(tmp_path: Path) -> Path:
    """Square opaque red logo (64x64)."""
    path = tmp_path / "logo.png"
    Image.new("RGBA", (64, 64), (255, 0, 0, 255)).save(path)
    return path


@pytest.fixture
def wide_png(tmp_path: Path) -> Path:
    """Wide image with a blue left half and a green right half (200x100)."""
    path = tmp_path / "wide.png"
    image = Image.new("RGBA", (200, 100), (0, 0, 255, 255))
    image.paste((0, 255, 0, 255), (100, 0, 200, 100))
    image.save(path)
    return path


@pytest.fixture
def svg_file(tmp_path: Path) -> Path:
    """Simple square SVG with two explicit fills."""
    path = tmp_path / "icon.svg"
    path.write_text(
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100" width="100" height="100">'
        '<rect x="0" y="0" width="100" height="50" fill="#ff0000"/>'
        '<rect x="0" y="50" width="100" height="50" fill="#00ff00"/>'
        "</svg>",
        encoding="utf-8",
    )
    return path


# ============================================================================
# Optional Native Dependencies
# ============================================================================

_FONT_CANDIDATES = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    "/Library/Fonts/Arial.ttf",
    "C:/Windows/Fonts/arial.ttf",
)


@pytest.fixture
def font_bytes() -> bytes:
    """Bytes of any TrueType font installed on the machine."""
    for candidate in _FONT_CANDIDATES:
        path = Path(candidate)
        if path.is_file():
            return path.read_bytes()
    pytest.skip("No TrueType font available")


@pytest.fixture
def require_cairo() -> None:
    """Skip when cairosvg or the native cairo library is unavailable."""
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        pytest.skip("cairosvg/cairo not available")


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def make_config(tmp_path: Path, logo_png: Path):
    """Factory for GeneratorConfig with a solid background and image foreground."""

    def _make(**overrides) -> GeneratorConfig:
        values = {
            "app_name": "Test App",
            "platforms": ["ios"],
            "categories": ["icon"],
            "background": ColorBackground(color="#336699"),
            "foreground": ImageForeground(image_path=logo_png),
            "output_dir": tmp_path / "out",
        }
        values.update(overrides)
        return GeneratorConfig(**values)

    return _make
