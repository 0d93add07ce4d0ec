"""Resolve requested platforms and categories into a concrete spec list."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from appicons.core.assets.catalog import (
    get_assets_by_category,
    get_assets_by_platform,
    get_variant_assets_by_category,
    get_variant_assets_by_platform,
)
from appicons.core.assets.models import AssetCategory, AssetSpec, Platform

logger = logging.getLogger(__name__)


def _intersect(left: list[AssetSpec], right: list[AssetSpec]) -> list[AssetSpec]:
    names = {spec.name for spec in right}
    return [spec for spec in left if spec.name in names]


def resolve_specs(
    platforms: Iterable[Platform | str],
    categories: Iterable[AssetCategory | str],
) -> list[AssetSpec]:
    """Resolve every spec for the requested platform x category pairs.

    For each pair, base specs are the intersection (by name) of the platform's
    and the category's specs; appearance variants are intersected the same way
    over the variant tables and always included. Matches are deduplicated by
    name, the last occurrence winning while the first match fixes the position.

    Args:
        platforms: Requested platforms.
        categories: Requested asset categories.

    Returns:
        Deduplicated specs in insertion order.

    Raises:
        ValueError: If a platform or category value is unknown.
    """
    platform_list = [Platform(p) for p in platforms]
    category_list = [AssetCategory(c) for c in categories]

    by_name: dict[str, AssetSpec] = {}
    for platform in platform_list:
        for category in category_list:
            matches = _intersect(get_assets_by_platform(platform), get_assets_by_category(category))
            matches += _intersect(
                get_variant_assets_by_platform(platform),
                get_variant_assets_by_category(category),
            )
            for spec in matches:
                by_name[spec.name] = spec

    logger.debug(
        "Resolved %d specs for platforms=%s categories=%s",
        len(by_name),
        [p.value for p in platform_list],
        [c.value for c in category_list],
    )
    return list(by_name.values())
