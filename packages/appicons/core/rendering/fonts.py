"""Font resolution for text foregrounds.

Fonts come from three sources:
- google: downloaded through the Google Fonts CSS2 API
- system: looked up in the platform font directories
- custom: read from an explicit file path

Resolved bytes are kept in an injected cache. Network and lookup failures
yield ``None`` (the caller renders a placeholder); only a misconfigured
custom font raises.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path
from urllib.parse import quote_plus

import httpx
from pydantic import BaseModel, ConfigDict

from appicons.core.assets.errors import ConfigError
from appicons.core.caching import Cache, CacheKey, MemoryCache
from appicons.core.config.models import FontConfig, TextForeground

logger = logging.getLogger(__name__)

# Old Safari user agent; Google Fonts answers with TTF sources instead of WOFF2
_LEGACY_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_6_8) AppleWebKit/534.59.8 "
    "(KHTML, like Gecko) Version/5.1.9 Safari/534.59.8"
)

_CSS_SRC_PATTERN = re.compile(r"src:\s*url\(([^)]+)\)")

_CACHE_NAMESPACE = "fonts"

DEFAULT_SYSTEM_FONT_DIRS: tuple[Path, ...] = (
    # macOS
    Path("/System/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("/Library/Fonts"),
    Path("~/Library/Fonts").expanduser(),
    # Linux
    Path("/usr/share/fonts/truetype"),
    Path("/usr/share/fonts"),
    Path("~/.local/share/fonts").expanduser(),
    Path("~/.fonts").expanduser(),
    # Windows
    Path("C:/Windows/Fonts"),
)


class FontData(BaseModel):
    """Resolved font file bytes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    family: str
    source: str
    data: bytes


def google_css_url(family: str, base_url: str = FontConfig().google_css_url) -> str:
    """Build the CSS2 API URL for the regular weight of a family."""
    return f"{base_url}?family={quote_plus(family)}:wght@400&display=swap"


def parse_font_url(css: str) -> str | None:
    """Return the first ``src: url(...)`` in a stylesheet, quotes stripped."""
    match = _CSS_SRC_PATTERN.search(css)
    if match is None:
        return None
    return match.group(1).strip().strip("'\"")


def system_font_candidates(family: str, font_dirs: Sequence[Path]) -> list[Path]:
    """List the file paths probed for a system font, in priority order."""
    compact = family.replace(" ", "")
    names = (f"{compact}.ttf", f"{compact}.ttc", f"{compact}-Regular.ttf")
    return [font_dir / name for font_dir in font_dirs for name in names]


class FontResolver:
    """Resolves text foreground fonts to raw font bytes.

    Args:
        cache: Cache for resolved fonts. Defaults to a MemoryCache using the
            configured TTL.
        config: Font settings (CSS API URL, timeout, cache TTL).
        transport: Optional httpx transport (useful for testing).
        system_font_dirs: Directories probed for system fonts.
    """

    def __init__(
        self,
        cache: Cache | None = None,
        config: FontConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        system_font_dirs: Sequence[Path] = DEFAULT_SYSTEM_FONT_DIRS,
    ) -> None:
        self.config = config or FontConfig()
        self.cache = cache if cache is not None else MemoryCache(self.config.cache_ttl_seconds)
        self._transport = transport
        self._system_font_dirs = tuple(system_font_dirs)

    async def resolve(self, foreground: TextForeground) -> bytes | None:
        """Resolve the font for a text foreground.

        Args:
            foreground: Text layer naming the family and source.

        Returns:
            Font bytes, or None when the font could not be found or downloaded.

        Raises:
            ConfigError: If a custom font has no path or cannot be read.
        """
        source = foreground.font_source
        if source == "custom":
            if foreground.font_path is None:
                raise ConfigError("Font path is required for custom fonts")
            lookup = str(foreground.font_path)
        else:
            lookup = foreground.font_family.lower()

        key = CacheKey(namespace=_CACHE_NAMESPACE, key=f"{source}:{lookup}")
        cached = await self.cache.load(key, FontData)
        if cached is not None:
            logger.debug("Font cache hit: %s", key)
            return cached.data

        if source == "custom":
            data = self._read_custom(foreground.font_path)
        elif source == "system":
            data = self._find_system(foreground.font_family)
        else:
            data = await self._fetch_google(foreground.font_family)

        if data is not None:
            await self.cache.store(
                key, FontData(family=foreground.font_family, source=source, data=data)
            )
        return data

    def _read_custom(self, path: Path | None) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise ConfigError(f"Cannot read font file {path}: {e}", {"path": str(path)}) from e

    def _find_system(self, family: str) -> bytes | None:
        for candidate in system_font_candidates(family, self._system_font_dirs):
            if candidate.is_file():
                logger.debug("Found system font %s at %s", family, candidate)
                try:
                    return candidate.read_bytes()
                except OSError as e:
                    logger.warning("Cannot read system font %s: %s", candidate, e)
                    return None
        logger.warning("System font not found: %s", family)
        return None

    async def _fetch_google(self, family: str) -> bytes | None:
        css_url = google_css_url(family, self.config.google_css_url)
        try:
            async with httpx.AsyncClient(
                headers={"User-Agent": _LEGACY_USER_AGENT},
                timeout=self.config.timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                css_response = await client.get(css_url)
                css_response.raise_for_status()
                font_url = parse_font_url(css_response.text)
                if font_url is None:
                    logger.warning("No font source in Google Fonts CSS for %s", family)
                    return None
                font_response = await client.get(font_url)
                font_response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Failed to download Google font %s: %s", family, e)
            return None

        logger.info("Downloaded Google font %s (%d bytes)", family, len(font_response.content))
        return font_response.content
