"""Asset generation pipeline models.

Defines the core data models for the asset generation pipeline:
- Platform: Target operating system for an asset
- AssetCategory: Classification of generated assets
- AppearanceMode: Appearance variant an asset is rendered for
- AssetSpec: Declarative description of one output file
- GeneratedAsset: Rendered PNG bytes for one spec
- AuxiliaryArtifact: Non-raster output (icon pack, manifest, descriptors)
- GenerationResult: Outcome of one generation run
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Platform(str, Enum):
    """Target platform of an asset."""

    IOS = "ios"
    ANDROID = "android"
    WEB = "web"
    WATCHOS = "watchos"
    TVOS = "tvos"
    VISIONOS = "visionos"

    def is_circular(self) -> bool:
        """Whether icons on this platform are displayed through a circular mask.

        Returns:
            True for WATCHOS and VISIONOS.
        """
        return self in {Platform.WATCHOS, Platform.VISIONOS}

    def is_layered(self) -> bool:
        """Whether this platform builds icons from separate back/front layers.

        Returns:
            True for TVOS and VISIONOS.
        """
        return self in {Platform.TVOS, Platform.VISIONOS}


class AssetCategory(str, Enum):
    """Classification of generated assets.

    Attributes:
        ICON: Home screen / launcher icon.
        SPLASH: Launch screen image.
        ADAPTIVE: Android adaptive icon layer.
        FAVICON: Web favicon, touch icon or PWA icon.
        STORE: Store listing artwork.
    """

    ICON = "icon"
    SPLASH = "splash"
    ADAPTIVE = "adaptive"
    FAVICON = "favicon"
    STORE = "store"


class AppearanceMode(str, Enum):
    """Appearance variant an asset is rendered for.

    ``ANY`` marks layers that must survive any system treatment
    (Android monochrome layers and PWA maskable icons).
    """

    LIGHT = "light"
    DARK = "dark"
    TINTED = "tinted"
    CLEAR_LIGHT = "clear-light"
    CLEAR_DARK = "clear-dark"
    ANY = "any"


class AssetSpec(BaseModel):
    """Declarative description of one output file.

    Attributes:
        name: Relative output path, unique within a resolved set.
        width: Output width in pixels.
        height: Output height in pixels.
        platform: Target platform.
        category: Asset category.
        scale: Density multiplier (@2x, @3x) where the platform uses one.
        appearance: Appearance variant. Absent means light.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    platform: Platform
    category: AssetCategory
    scale: int | None = Field(default=None, ge=1)
    appearance: AppearanceMode = AppearanceMode.LIGHT

    @property
    def min_dimension(self) -> int:
        """Smaller of width and height."""
        return min(self.width, self.height)

    @property
    def file_name(self) -> str:
        """Last path component of the spec name."""
        return self.name.rsplit("/", 1)[-1]


class GeneratedAsset(BaseModel):
    """Rendered PNG bytes for one spec.

    Attributes:
        spec: Spec the pixels were rendered for.
        pixels: Encoded PNG bytes.
        output_path: Absolute destination path.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    spec: AssetSpec
    pixels: bytes
    output_path: Path


class AuxiliaryArtifact(BaseModel):
    """Non-raster output written alongside the rendered assets.

    Attributes:
        name: Relative output path (e.g. ``web/favicon.ico``).
        content: Encoded file content.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    content: bytes


class GenerationResult(BaseModel):
    """Outcome of one generation run.

    ``success`` is True only when no error was recorded.
    """

    model_config = ConfigDict(extra="forbid")

    success: bool
    assets: list[GeneratedAsset] = Field(default_factory=list)
    output_dir: Path
    instructions_path: Path | None = None
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    artifacts: list[str] = Field(default_factory=list)

    @property
    def asset_names(self) -> list[str]:
        """Names of every generated asset, in generation order."""
        return [asset.spec.name for asset in self.assets]
