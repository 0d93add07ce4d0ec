"""Tests for hex color helpers."""

from __future__ import annotations

import pytest

from appicons.core.assets.errors import ConfigError
from appicons.core.rendering.colors import (
    darken_hex,
    darken_rgb,
    hex_to_rgb,
    normalize_hex,
    rgb_to_hex,
)


class TestHexParsing:
    def test_with_and_without_hash(self) -> None:
        assert hex_to_rgb("#1a2B3c") == (26, 43, 60)
        assert hex_to_rgb("1A2B3C") == (26, 43, 60)

    @pytest.mark.parametrize(
        "value",
        ["#FFF", "invalid", "#GGGGGG", "", None, "#1234567", "#336699\n", " #336699"],
    )
    def test_rejects_invalid(self, value: str | None) -> None:
        with pytest.raises(ConfigError, match="Invalid hex color"):
            hex_to_rgb(value)

    def test_format_is_uppercase(self) -> None:
        assert rgb_to_hex((26, 43, 60)) == "#1A2B3C"
        assert normalize_hex("ff8800") == "#FF8800"

    def test_round_trip(self) -> None:
        for value in ("#000000", "#FFFFFF", "#336699", "#0A0B0C"):
            assert rgb_to_hex(hex_to_rgb(value)) == value


class TestDarken:
    def test_keeps_thirty_percent(self) -> None:
        assert darken_rgb((100, 200, 10)) == (30, 60, 3)
        assert darken_hex("#336699") == "#0F1F2E"

    def test_black_stays_black(self) -> None:
        assert darken_hex("#000000") == "#000000"

    def test_invalid_color_raises(self) -> None:
        with pytest.raises(ConfigError):
            darken_hex("nope")
