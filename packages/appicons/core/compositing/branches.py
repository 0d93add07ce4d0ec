"""Composition branch selection.

Every spec maps to exactly one branch through a closed rule table keyed by
category, appearance, platform and a name token. Rules are tried in order
and the first match wins; the final rule matches everything.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from appicons.core.assets.models import AppearanceMode, AssetCategory, AssetSpec, Platform


class CompositionBranch(str, Enum):
    """How a spec's layers are combined.

    Attributes:
        STANDARD: Full background with the foreground centered at its scale.
        ADAPTIVE_BACKGROUND: Full-bleed background only.
        ADAPTIVE_FOREGROUND: Transparent canvas with the foreground in the safe zone.
        ADAPTIVE_MONOCHROME: Adaptive foreground forced to white.
        MASKABLE: Full background with the foreground shrunk for arbitrary masks.
        TINTED: Transparent canvas with a white foreground.
        CLEAR_LIGHT: Translucent white background.
        CLEAR_DARK: Translucent black background.
        DARK: Dark background variant.
        LAYER_BACK: Back layer of a layered icon (background only).
        LAYER_FRONT: Front layer of a layered icon (foreground only).
    """

    STANDARD = "standard"
    ADAPTIVE_BACKGROUND = "adaptive-background"
    ADAPTIVE_FOREGROUND = "adaptive-foreground"
    ADAPTIVE_MONOCHROME = "adaptive-monochrome"
    MASKABLE = "maskable"
    TINTED = "tinted"
    CLEAR_LIGHT = "clear-light"
    CLEAR_DARK = "clear-dark"
    DARK = "dark"
    LAYER_BACK = "layer-back"
    LAYER_FRONT = "layer-front"

    def has_background(self) -> bool:
        """Whether the branch renders a background layer."""
        return self not in {
            CompositionBranch.ADAPTIVE_FOREGROUND,
            CompositionBranch.ADAPTIVE_MONOCHROME,
            CompositionBranch.TINTED,
            CompositionBranch.LAYER_FRONT,
        }

    def has_foreground(self) -> bool:
        """Whether the branch renders a foreground layer."""
        return self not in {CompositionBranch.ADAPTIVE_BACKGROUND, CompositionBranch.LAYER_BACK}

    def forces_white(self) -> bool:
        """Whether the foreground color is forced to pure white."""
        return self in {CompositionBranch.TINTED, CompositionBranch.ADAPTIVE_MONOCHROME}


class BranchRule(NamedTuple):
    """One row of the branch table. ``None`` fields match anything."""

    branch: CompositionBranch
    category: AssetCategory | None = None
    appearance: AppearanceMode | None = None
    platforms: frozenset[Platform] | None = None
    name_token: str | None = None

    def matches(self, spec: AssetSpec) -> bool:
        if self.category is not None and spec.category is not self.category:
            return False
        if self.appearance is not None and spec.appearance is not self.appearance:
            return False
        if self.platforms is not None and spec.platform not in self.platforms:
            return False
        if self.name_token is not None and self.name_token not in spec.file_name:
            return False
        return True


_LAYERED = frozenset(p for p in Platform if p.is_layered())

BRANCH_RULES: tuple[BranchRule, ...] = (
    BranchRule(
        CompositionBranch.ADAPTIVE_MONOCHROME,
        category=AssetCategory.ADAPTIVE,
        appearance=AppearanceMode.ANY,
    ),
    BranchRule(
        CompositionBranch.ADAPTIVE_FOREGROUND,
        category=AssetCategory.ADAPTIVE,
        name_token="foreground",
    ),
    BranchRule(CompositionBranch.ADAPTIVE_BACKGROUND, category=AssetCategory.ADAPTIVE),
    BranchRule(
        CompositionBranch.MASKABLE,
        appearance=AppearanceMode.ANY,
        platforms=frozenset({Platform.WEB}),
    ),
    BranchRule(CompositionBranch.TINTED, appearance=AppearanceMode.TINTED),
    BranchRule(CompositionBranch.CLEAR_LIGHT, appearance=AppearanceMode.CLEAR_LIGHT),
    BranchRule(CompositionBranch.CLEAR_DARK, appearance=AppearanceMode.CLEAR_DARK),
    BranchRule(CompositionBranch.DARK, appearance=AppearanceMode.DARK),
    BranchRule(
        CompositionBranch.LAYER_BACK,
        category=AssetCategory.ICON,
        platforms=_LAYERED,
        name_token="-back",
    ),
    BranchRule(
        CompositionBranch.LAYER_FRONT,
        category=AssetCategory.ICON,
        platforms=_LAYERED,
        name_token="-front",
    ),
    BranchRule(CompositionBranch.STANDARD),
)


def select_branch(spec: AssetSpec) -> CompositionBranch:
    """Pick the composition branch for a spec.

    A pure function of the spec's category, appearance, platform and name.
    """
    for rule in BRANCH_RULES:
        if rule.matches(spec):
            return rule.branch
    # Unreachable: the last rule matches every spec
    raise AssertionError(f"No composition branch for {spec.name}")
