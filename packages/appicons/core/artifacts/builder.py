"""Auxiliary artifact builder.

Runs once after the per-spec render loop. Each artifact is gated on the
requested platforms and categories and built in isolation: a failing
artifact is recorded and the others are still produced.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from appicons.core.artifacts.descriptors import (
    ADAPTIVE_ICON_NAME,
    COLORS_NAME,
    build_ios_appiconset,
    render_adaptive_icon_xml,
    render_colors_xml,
)
from appicons.core.artifacts.ico import build_favicon_ico
from appicons.core.artifacts.manifest import MANIFEST_NAME, render_manifest
from appicons.core.assets.errors import AuxiliaryArtifactError
from appicons.core.assets.models import (
    AssetCategory,
    AuxiliaryArtifact,
    GeneratedAsset,
    Platform,
)
from appicons.core.compositing.engine import CompositingEngine
from appicons.core.config.models import GeneratorConfig

logger = logging.getLogger(__name__)

FAVICON_ICO_NAME = "web/favicon.ico"


class ArtifactBuildResult(BaseModel):
    """Artifacts built in one pass plus per-artifact failures."""

    model_config = ConfigDict(extra="forbid")

    artifacts: list[AuxiliaryArtifact] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


class AuxiliaryArtifactBuilder:
    """Builds the icon pack, web manifest and platform descriptors.

    Args:
        config: Generation request.
        engine: Engine used to render icon pack frames.
    """

    def __init__(self, config: GeneratorConfig, engine: CompositingEngine) -> None:
        self.config = config
        self.engine = engine

    def _wants(self, platform: Platform, category: AssetCategory) -> bool:
        return platform in self.config.platforms and category in self.config.categories

    def build(self, assets: Sequence[GeneratedAsset]) -> ArtifactBuildResult:
        """Build every artifact enabled by the request.

        Args:
            assets: Assets rendered in this run (iOS icons are copied into the
                asset catalog).

        Returns:
            Built artifacts and one error string per failed artifact.
        """
        rendered = {asset.spec.name: asset.pixels for asset in assets}
        steps: list[tuple[str, Callable[[], list[AuxiliaryArtifact]]]] = []

        if self._wants(Platform.WEB, AssetCategory.FAVICON):
            steps.append((FAVICON_ICO_NAME, self._favicon_ico))
            steps.append((MANIFEST_NAME, self._manifest))
        if self._wants(Platform.IOS, AssetCategory.ICON):
            steps.append(("ios/AppIcon.appiconset", lambda: build_ios_appiconset(rendered)))
        if self._wants(Platform.ANDROID, AssetCategory.ADAPTIVE):
            steps.append((ADAPTIVE_ICON_NAME, self._adaptive_icon))
            steps.append((COLORS_NAME, self._colors))

        result = ArtifactBuildResult()
        for name, step in steps:
            try:
                built = step()
            except Exception as e:
                error = AuxiliaryArtifactError(name, str(e))
                logger.error("Auxiliary artifact failed for %s: %s", name, e)
                result.errors.append(error.message)
                continue
            result.artifacts.extend(built)
            logger.debug("Built %s (%d files)", name, len(built))
        return result

    def _favicon_ico(self) -> list[AuxiliaryArtifact]:
        return [AuxiliaryArtifact(name=FAVICON_ICO_NAME, content=build_favicon_ico(self.engine))]

    def _manifest(self) -> list[AuxiliaryArtifact]:
        content = render_manifest(self.config.app_name, self.config.background)
        return [AuxiliaryArtifact(name=MANIFEST_NAME, content=content)]

    def _adaptive_icon(self) -> list[AuxiliaryArtifact]:
        return [AuxiliaryArtifact(name=ADAPTIVE_ICON_NAME, content=render_adaptive_icon_xml())]

    def _colors(self) -> list[AuxiliaryArtifact]:
        content = render_colors_xml(self.config.background)
        if content is None:
            return []
        return [AuxiliaryArtifact(name=COLORS_NAME, content=content)]
