"""Tests for the auxiliary artifact builder."""

from __future__ import annotations

from pathlib import Path

import pytest

from appicons.core.artifacts import builder as builder_module
from appicons.core.artifacts.builder import FAVICON_ICO_NAME, AuxiliaryArtifactBuilder
from appicons.core.artifacts.descriptors import ADAPTIVE_ICON_NAME, APPICONSET_DIR, COLORS_NAME
from appicons.core.artifacts.manifest import MANIFEST_NAME
from appicons.core.assets.catalog import IOS_ICONS
from appicons.core.assets.models import GeneratedAsset
from appicons.core.compositing.engine import CompositingEngine
from appicons.core.config.models import GradientBackground


def _builder(config) -> AuxiliaryArtifactBuilder:
    return AuxiliaryArtifactBuilder(config, CompositingEngine(config.background, config.foreground))


class TestGating:
    def test_web_favicon(self, make_config) -> None:
        result = _builder(make_config(platforms=["web"], categories=["favicon"])).build([])
        assert [a.name for a in result.artifacts] == [FAVICON_ICO_NAME, MANIFEST_NAME]
        assert result.errors == []
        assert result.artifacts[0].content[:4] == b"\x00\x00\x01\x00"

    def test_ios_icons(self, make_config, tmp_path: Path) -> None:
        spec = next(s for s in IOS_ICONS if s.name == "ios/icon-1024.png")
        asset = GeneratedAsset(spec=spec, pixels=b"png", output_path=tmp_path / spec.name)

        result = _builder(make_config()).build([asset])

        assert [a.name for a in result.artifacts] == [
            f"{APPICONSET_DIR}/Contents.json",
            f"{APPICONSET_DIR}/icon-1024.png",
        ]
        assert result.artifacts[1].content == b"png"

    def test_android_adaptive_solid(self, make_config) -> None:
        result = _builder(make_config(platforms=["android"], categories=["adaptive"])).build([])
        assert [a.name for a in result.artifacts] == [ADAPTIVE_ICON_NAME, COLORS_NAME]

    def test_android_adaptive_gradient_skips_colors(self, make_config) -> None:
        config = make_config(
            platforms=["android"],
            categories=["adaptive"],
            background=GradientBackground(colors=["#000000", "#FFFFFF"]),
        )
        result = _builder(config).build([])
        assert [a.name for a in result.artifacts] == [ADAPTIVE_ICON_NAME]

    @pytest.mark.parametrize(
        ("platforms", "categories"),
        [
            (["ios"], ["splash"]),
            (["web"], ["icon"]),
            (["android"], ["icon", "splash"]),
            (["ios", "android"], ["favicon"]),
        ],
    )
    def test_nothing_requested(self, make_config, platforms, categories) -> None:
        result = _builder(make_config(platforms=platforms, categories=categories)).build([])
        assert result.artifacts == []
        assert result.errors == []


class TestIsolation:
    def test_failed_artifact_does_not_block_others(self, make_config, monkeypatch) -> None:
        def boom(engine):
            raise RuntimeError("boom")

        monkeypatch.setattr(builder_module, "build_favicon_ico", boom)
        config = make_config(platforms=["web", "android"], categories=["favicon", "adaptive"])

        result = _builder(config).build([])

        assert result.errors == [f"Failed to build {FAVICON_ICO_NAME}: boom"]
        assert [a.name for a in result.artifacts] == [MANIFEST_NAME, ADAPTIVE_ICON_NAME, COLORS_NAME]
