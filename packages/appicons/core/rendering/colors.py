"""Hex color parsing and the dark-variant color heuristic."""

from __future__ import annotations

import re

from appicons.core.assets.errors import ConfigError

_HEX_PATTERN = re.compile(r"#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})", re.IGNORECASE)

# Dark variants keep 30% of each channel
DARKEN_FACTOR = 0.3

RGB = tuple[int, int, int]


def hex_to_rgb(value: str | None) -> RGB:
    """Parse a 6-digit hex color.

    Args:
        value: Color such as ``#1A2B3C`` or ``1a2b3c``.

    Returns:
        (r, g, b) tuple.

    Raises:
        ConfigError: If the value is not a 6-digit hex color. Shorthand such as
            ``#FFF`` is rejected.
    """
    match = _HEX_PATTERN.fullmatch(value or "")
    if match is None:
        raise ConfigError(f"Invalid hex color: {value}", {"value": value})
    r, g, b = (int(part, 16) for part in match.groups())
    return r, g, b


def rgb_to_hex(rgb: RGB) -> str:
    """Format an (r, g, b) tuple as ``#RRGGBB``."""
    return "#{:02X}{:02X}{:02X}".format(*rgb)


def normalize_hex(value: str) -> str:
    """Return the ``#RRGGBB`` form of a hex color."""
    return rgb_to_hex(hex_to_rgb(value))


def darken_rgb(rgb: RGB, factor: float = DARKEN_FACTOR) -> RGB:
    """Scale each channel by ``factor`` (rounded)."""
    r, g, b = (round(channel * factor) for channel in rgb)
    return r, g, b


def darken_hex(value: str, factor: float = DARKEN_FACTOR) -> str:
    """Darken a hex color, returning ``#RRGGBB``."""
    return rgb_to_hex(darken_rgb(hex_to_rgb(value), factor))
