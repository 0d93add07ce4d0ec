"""Foreground scale resolution and safe-zone validation.

Scale precedence for one spec: category default, then the user override for
that category, then the platform hard cap applied last as a ``min()`` clamp.
"""

from __future__ import annotations

import logging
import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from appicons.core.assets.models import AssetCategory, AssetSpec, Platform
from appicons.core.compositing.branches import CompositionBranch
from appicons.core.config.models import GeneratorConfig

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------------
# Scale constants
# ----------------------------------------------------------------------------

CATEGORY_DEFAULT_SCALES: dict[AssetCategory, float] = {
    AssetCategory.ICON: 0.7,
    AssetCategory.SPLASH: 0.25,
    AssetCategory.FAVICON: 0.85,
    AssetCategory.STORE: 0.5,
    AssetCategory.ADAPTIVE: 0.6,
}

# Hard caps (fraction of min(width, height))
ANDROID_ADAPTIVE_CAP = 0.66
MASKABLE_CAP = 0.8
MASKABLE_FACTOR = 0.8
CIRCULAR_CAP = 0.8
LAYERED_CAP = 0.8

# Validation thresholds (maximum, recommended)
ANDROID_ADAPTIVE_MAX_SCALE = 0.61
ANDROID_ADAPTIVE_RECOMMENDED_SCALE = 0.6
WEB_MASKABLE_MAX_SCALE = 0.8
WEB_MASKABLE_RECOMMENDED_SCALE = 0.7
CIRCULAR_MAX_SCALE = 0.8
CIRCULAR_RECOMMENDED_SCALE = 0.7
STORE_MAX_SCALE = 0.8
MIN_VISIBILITY_SCALE = 0.4
SPLASH_MAX_SCALE = 0.5
SPLASH_MIN_SCALE = 0.1
FAVICON_MIN_SCALE = 0.7


class ScaleSettings(BaseModel):
    """User scale overrides, one per category family."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    icon_scale: float | None = Field(default=None, gt=0.0, le=1.5)
    splash_scale: float | None = Field(default=None, gt=0.0, le=1.5)
    favicon_scale: float | None = Field(default=None, gt=0.0, le=1.5)
    store_scale: float | None = Field(default=None, gt=0.0, le=1.5)

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> ScaleSettings:
        return cls(
            icon_scale=config.icon_scale,
            splash_scale=config.splash_scale,
            favicon_scale=config.favicon_scale,
            store_scale=config.store_scale,
        )

    def override_for(self, category: AssetCategory) -> float | None:
        """Return the user override that applies to a category."""
        return {
            AssetCategory.ICON: self.icon_scale,
            AssetCategory.ADAPTIVE: self.icon_scale,
            AssetCategory.SPLASH: self.splash_scale,
            AssetCategory.FAVICON: self.favicon_scale,
            AssetCategory.STORE: self.store_scale,
        }[category]


def platform_cap(spec: AssetSpec, branch: CompositionBranch) -> float | None:
    """Return the hard scale cap for a spec, or None when uncapped."""
    if spec.category is AssetCategory.ADAPTIVE:
        return ANDROID_ADAPTIVE_CAP
    if branch is CompositionBranch.MASKABLE:
        return MASKABLE_CAP
    if branch is CompositionBranch.LAYER_FRONT or spec.platform is Platform.TVOS:
        return LAYERED_CAP
    if spec.platform.is_circular():
        return CIRCULAR_CAP
    return None


def resolve_scale(
    spec: AssetSpec, branch: CompositionBranch, settings: ScaleSettings
) -> float:
    """Resolve the foreground scale for one spec.

    Args:
        spec: Asset being composed.
        branch: Composition branch selected for the spec.
        settings: User scale overrides.

    Returns:
        Fraction of ``min(width, height)`` the foreground occupies.
    """
    if branch is CompositionBranch.MASKABLE:
        icon_scale = settings.icon_scale
        if icon_scale is None:
            icon_scale = CATEGORY_DEFAULT_SCALES[AssetCategory.ICON]
        scale = icon_scale * MASKABLE_FACTOR
    else:
        scale = settings.override_for(spec.category)
        if scale is None:
            scale = CATEGORY_DEFAULT_SCALES[spec.category]

    cap = platform_cap(spec, branch)
    return scale if cap is None else min(scale, cap)


def foreground_size(spec: AssetSpec, scale: float) -> int:
    """Foreground box edge in pixels: ``floor(min(w, h) * scale)``, at least 1."""
    return max(1, math.floor(spec.min_dimension * scale))


# ----------------------------------------------------------------------------
# Validation
# ----------------------------------------------------------------------------


class ScaleWarning(BaseModel):
    """Advisory about a user scale that may clip or disappear on some platform."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    setting: Literal["icon_scale", "splash_scale", "favicon_scale", "store_scale"]
    scale: float
    message: str
    recommended: float | None = None

    def __str__(self) -> str:
        return f"{self.setting}={self.scale:.2f}: {self.message}"


def validate_icon_scale(
    scale: float, platforms: list[Platform], categories: list[AssetCategory]
) -> list[ScaleWarning]:
    """Check an icon scale against every requested platform's safe zone."""
    warnings: list[ScaleWarning] = []

    def warn(message: str, recommended: float | None = None) -> None:
        warnings.append(
            ScaleWarning(setting="icon_scale", scale=scale, message=message, recommended=recommended)
        )

    if (
        Platform.ANDROID in platforms
        and AssetCategory.ADAPTIVE in categories
        and scale > ANDROID_ADAPTIVE_MAX_SCALE
    ):
        warn(
            f"exceeds the Android adaptive safe zone ({ANDROID_ADAPTIVE_MAX_SCALE:.0%}); "
            f"adaptive layers are clamped to {ANDROID_ADAPTIVE_CAP:.0%}",
            ANDROID_ADAPTIVE_RECOMMENDED_SCALE,
        )
    if (
        Platform.WEB in platforms
        and AssetCategory.FAVICON in categories
        and scale > WEB_MASKABLE_MAX_SCALE
    ):
        warn(
            f"exceeds the PWA maskable safe zone ({WEB_MASKABLE_MAX_SCALE:.0%})",
            WEB_MASKABLE_RECOMMENDED_SCALE,
        )
    if any(p.is_circular() for p in platforms) and scale > CIRCULAR_MAX_SCALE:
        warn(
            f"exceeds the circular icon safe zone ({CIRCULAR_MAX_SCALE:.0%}) on watchOS/visionOS",
            CIRCULAR_RECOMMENDED_SCALE,
        )
    if scale < MIN_VISIBILITY_SCALE:
        warn(f"is below {MIN_VISIBILITY_SCALE:.0%}; the icon may be hard to see")
    return warnings


def get_detailed_scale_warnings(config: GeneratorConfig) -> list[ScaleWarning]:
    """Collect advisories for every scale the user set explicitly.

    Defaults never produce warnings. Warnings never block generation.
    """
    warnings: list[ScaleWarning] = []

    if config.icon_scale is not None:
        warnings += validate_icon_scale(config.icon_scale, config.platforms, config.categories)

    if config.splash_scale is not None:
        scale = config.splash_scale
        if scale > SPLASH_MAX_SCALE:
            warnings.append(
                ScaleWarning(
                    setting="splash_scale",
                    scale=scale,
                    message=f"is above {SPLASH_MAX_SCALE:.0%}; splash logos usually sit smaller",
                    recommended=CATEGORY_DEFAULT_SCALES[AssetCategory.SPLASH],
                )
            )
        elif scale < SPLASH_MIN_SCALE:
            warnings.append(
                ScaleWarning(
                    setting="splash_scale",
                    scale=scale,
                    message=f"is below {SPLASH_MIN_SCALE:.0%}; the logo may be hard to see",
                    recommended=CATEGORY_DEFAULT_SCALES[AssetCategory.SPLASH],
                )
            )

    if config.favicon_scale is not None and config.favicon_scale < FAVICON_MIN_SCALE:
        warnings.append(
            ScaleWarning(
                setting="favicon_scale",
                scale=config.favicon_scale,
                message=f"is below {FAVICON_MIN_SCALE:.0%}; small favicons lose detail",
                recommended=CATEGORY_DEFAULT_SCALES[AssetCategory.FAVICON],
            )
        )

    if config.store_scale is not None and config.store_scale > STORE_MAX_SCALE:
        warnings.append(
            ScaleWarning(
                setting="store_scale",
                scale=config.store_scale,
                message=f"is above {STORE_MAX_SCALE:.0%}; store artwork may look cramped",
                recommended=CATEGORY_DEFAULT_SCALES[AssetCategory.STORE],
            )
        )

    for warning in warnings:
        logger.warning("Scale warning: %s", warning)
    return warnings
