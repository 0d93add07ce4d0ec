"""Tests for background rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from appicons.core.assets.errors import ConfigError
from appicons.core.config.models import ColorBackground, GradientBackground, ImageBackground
from appicons.core.rendering.background import (
    BackgroundRenderer,
    darken_background,
    gradient_stops,
    linear_gradient_points,
    render_gradient,
)


class TestGradientGeometry:
    def test_stops_are_evenly_spaced(self) -> None:
        stops = gradient_stops(["#000000", "#808080", "#FFFFFF"])
        assert [offset for offset, _ in stops] == [0.0, 50.0, 100.0]
        assert stops[1][1] == (128, 128, 128)

    def test_single_color_rejected(self) -> None:
        with pytest.raises(ConfigError, match="at least two colors"):
            gradient_stops(["#000000"])

    def test_invalid_stop_rejected(self) -> None:
        with pytest.raises(ConfigError):
            gradient_stops(["#000000", "red"])

    @pytest.mark.parametrize(
        ("angle", "points"),
        [
            (0, (50, 0, 50, 100)),
            (180, (50, 100, 50, 0)),
            (90, (100, 50, 0, 50)),
        ],
    )
    def test_linear_points(self, angle: float, points: tuple[int, int, int, int]) -> None:
        assert linear_gradient_points(angle) == points


class TestRenderGradient:
    def test_linear_top_to_bottom(self) -> None:
        spec = GradientBackground(colors=["#000000", "#FFFFFF"], angle=0)
        image = render_gradient(spec, 10, 10)
        assert image.size == (10, 10)
        assert image.mode == "RGBA"
        top = image.getpixel((5, 0))
        bottom = image.getpixel((5, 9))
        assert top[0] < 20
        assert bottom[0] > 235
        # Rows are uniform for a vertical gradient
        assert image.getpixel((0, 4)) == image.getpixel((9, 4))
        assert top[3] == bottom[3] == 255

    def test_radial_center_to_corner(self) -> None:
        spec = GradientBackground(kind="radial", colors=["#FF0000", "#0000FF"])
        image = render_gradient(spec, 11, 11)
        assert image.getpixel((5, 5)) == (255, 0, 0, 255)
        # Corners lie beyond the 50% radius and pad with the last stop
        assert image.getpixel((0, 0)) == (0, 0, 255, 255)


class TestBackgroundRenderer:
    def test_solid_color(self) -> None:
        image = BackgroundRenderer().render(ColorBackground(color="#336699"), 40, 20)
        assert image.size == (40, 20)
        assert image.getpixel((0, 0)) == (51, 102, 153, 255)
        assert image.getpixel((39, 19)) == (51, 102, 153, 255)

    def test_image_cover_crops_center(self, wide_png: Path) -> None:
        image = BackgroundRenderer().render(ImageBackground(image_path=wide_png), 50, 50)
        assert image.size == (50, 50)
        left = image.getpixel((2, 25))
        right = image.getpixel((47, 25))
        assert left[2] > 200 and left[1] < 50
        assert right[1] > 200 and right[2] < 50
        assert image.getchannel("A").getextrema() == (255, 255)

    def test_gradient_dispatch(self) -> None:
        spec = GradientBackground(colors=["#000000", "#FFFFFF"])
        assert BackgroundRenderer().render(spec, 8, 8).size == (8, 8)

    @pytest.mark.parametrize(
        "spec",
        [
            ColorBackground(),
            ColorBackground(color="#FFF"),
            GradientBackground(colors=["#000000"]),
            ImageBackground(),
        ],
    )
    def test_validate_rejects_misconfigured(self, spec) -> None:
        with pytest.raises(ConfigError):
            BackgroundRenderer().validate(spec)

    def test_validate_missing_image(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read background image"):
            BackgroundRenderer().validate(ImageBackground(image_path=tmp_path / "missing.png"))

    def test_validate_undecodable_image(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.png"
        path.write_bytes(b"not an image")
        with pytest.raises(ConfigError):
            BackgroundRenderer().validate(ImageBackground(image_path=path))

    def test_validate_accepts_good_layers(self, wide_png: Path) -> None:
        renderer = BackgroundRenderer()
        renderer.validate(ColorBackground(color="#000000"))
        renderer.validate(GradientBackground(colors=["#000000", "#FFFFFF"]))
        renderer.validate(ImageBackground(image_path=wide_png))


class TestDarkenBackground:
    def test_color(self) -> None:
        dark = darken_background(ColorBackground(color="#336699"))
        assert isinstance(dark, ColorBackground)
        assert dark.color == "#0F1F2E"

    def test_gradient_darkens_every_stop(self) -> None:
        dark = darken_background(GradientBackground(colors=["#336699", "#FFFFFF"], angle=45))
        assert dark.colors[0] == "#0F1F2E"
        assert dark.colors[1] != "#FFFFFF"
        assert dark.angle == 45

    def test_image_passes_through(self, wide_png: Path) -> None:
        spec = ImageBackground(image_path=wide_png)
        assert darken_background(spec) is spec

    def test_original_untouched(self) -> None:
        spec = ColorBackground(color="#336699")
        darken_background(spec)
        assert spec.color == "#336699"
