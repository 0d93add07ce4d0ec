"""Asset generation orchestrator.

Routes one generation request through the pipeline:
1. Validate the background/foreground layers and resolve the font
2. Resolve the spec list for the requested platforms and categories
3. Render every spec concurrently on worker threads
4. Build the auxiliary artifacts
5. Write assets, artifacts and INSTRUCTIONS.md in one sequential pass

A configuration error stops the run before anything is rendered. Every other
failure is recorded per asset or per artifact and the run continues.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from appicons.core.artifacts.builder import AuxiliaryArtifactBuilder
from appicons.core.artifacts.manifest import theme_color_for
from appicons.core.assets.errors import AssetGenerationError, ConfigError
from appicons.core.assets.instructions import (
    INSTRUCTIONS_NAME,
    format_instructions_text,
    generate_instructions,
)
from appicons.core.assets.models import (
    AssetCategory,
    AssetSpec,
    GeneratedAsset,
    GenerationResult,
    Platform,
)
from appicons.core.assets.resolver import resolve_specs
from appicons.core.compositing.engine import CompositingEngine
from appicons.core.compositing.safe_zone import ScaleSettings, get_detailed_scale_warnings
from appicons.core.config.models import (
    BackgroundSpec,
    ForegroundSpec,
    GeneratorConfig,
    TextForeground,
)
from appicons.core.output.writer import OutputWriter
from appicons.core.rendering.background import BackgroundRenderer
from appicons.core.rendering.fonts import FontResolver
from appicons.core.rendering.foreground import ForegroundRenderer
from appicons.core.utils.logging import get_logger

logger = logging.getLogger(__name__)

HistorySink = Callable[[GeneratorConfig, Path], Any]

PREVIEW_SIZES: dict[str, int] = {"large": 256, "small": 64}


async def build_engine(
    background: BackgroundSpec,
    foreground: ForegroundSpec,
    *,
    scales: ScaleSettings | None = None,
    dark_background: BackgroundSpec | None = None,
    font_resolver: FontResolver | None = None,
) -> CompositingEngine:
    """Validate both layers, resolve the font and build an engine.

    Args:
        background: Background layer.
        foreground: Foreground layer.
        scales: User scale overrides.
        dark_background: Explicit dark-variant background.
        font_resolver: Resolver for text foreground fonts (default instance if None).

    Returns:
        Engine ready to compose specs.

    Raises:
        ConfigError: If either layer is misconfigured.
    """
    background_renderer = BackgroundRenderer()
    foreground_renderer = ForegroundRenderer()

    background_renderer.validate(background)
    if dark_background is not None:
        background_renderer.validate(dark_background)

    font_data: bytes | None = None
    if isinstance(foreground, TextForeground):
        font_data = await (font_resolver or FontResolver()).resolve(foreground)
        if font_data is None:
            logger.warning(
                "Font %s (%s) unavailable; text will render as a placeholder",
                foreground.font_family,
                foreground.font_source,
            )
    foreground_renderer.validate(foreground, font_data)

    return CompositingEngine(
        background,
        foreground,
        scales=scales,
        dark_background=dark_background,
        font_data=font_data,
        background_renderer=background_renderer,
        foreground_renderer=foreground_renderer,
    )


async def generate_assets(
    config: GeneratorConfig,
    *,
    font_resolver: FontResolver | None = None,
    history_sink: HistorySink | None = None,
) -> GenerationResult:
    """Generate every asset for a request and write it to disk.

    Args:
        config: Generation request.
        font_resolver: Resolver for text foreground fonts.
        history_sink: Called with (config, output_dir) after the run. Its
            failures are logged and never affect the result.

    Returns:
        GenerationResult. ``success`` is False when any error was recorded; a
        configuration error yields no assets and no writes.
    """
    output_dir = config.output_dir
    run_logger = get_logger(__name__, app_name=config.app_name)

    try:
        engine = await build_engine(
            config.background,
            config.foreground,
            scales=ScaleSettings.from_config(config),
            dark_background=config.dark_background,
            font_resolver=font_resolver,
        )
    except ConfigError as e:
        run_logger.error("Invalid configuration: %s", e.message)
        return GenerationResult(success=False, output_dir=output_dir, errors=[e.message])

    specs = resolve_specs(config.platforms, config.categories)
    warnings = [str(w) for w in get_detailed_scale_warnings(config)]
    run_logger.info("Generating %d assets into %s", len(specs), output_dir)

    # Render (concurrent, bounded)
    render_sem = asyncio.Semaphore(config.max_workers)

    async def _render_one(spec: AssetSpec) -> GeneratedAsset | AssetGenerationError:
        async with render_sem:
            try:
                pixels = await asyncio.to_thread(engine.compose, spec)
            except Exception as e:
                run_logger.error("Asset generation failed for %s: %s", spec.name, e)
                return AssetGenerationError(spec.name, str(e))
            return GeneratedAsset(spec=spec, pixels=pixels, output_path=output_dir / spec.name)

    outcomes = await asyncio.gather(*[_render_one(s) for s in specs])
    assets = [o for o in outcomes if isinstance(o, GeneratedAsset)]
    errors = [o.message for o in outcomes if isinstance(o, AssetGenerationError)]

    # Auxiliary artifacts
    builder = AuxiliaryArtifactBuilder(config, engine)
    built = await asyncio.to_thread(builder.build, assets)
    errors += built.errors

    # Write (sequential)
    writer = OutputWriter(output_dir)
    errors += writer.write_assets(assets)
    errors += writer.write_artifacts(built.artifacts)

    instructions = generate_instructions(
        output_dir,
        config.platforms,
        config.categories,
        background_color=theme_color_for(config.background),
    )
    instructions_error = writer.write_text(INSTRUCTIONS_NAME, format_instructions_text(instructions))
    instructions_path = None
    if instructions_error:
        errors.append(instructions_error)
    else:
        instructions_path = output_dir / INSTRUCTIONS_NAME

    if history_sink is not None:
        try:
            history_sink(config, output_dir)
        except Exception as e:
            run_logger.warning("Failed to record generation history: %s", e)

    run_logger.info(
        "Generated %d/%d assets, %d artifacts, %d errors",
        len(assets),
        len(specs),
        len(built.artifacts),
        len(errors),
    )
    return GenerationResult(
        success=not errors,
        assets=assets,
        output_dir=output_dir,
        instructions_path=instructions_path,
        errors=errors,
        warnings=warnings,
        artifacts=[artifact.name for artifact in built.artifacts],
    )


def generate_assets_sync(
    config: GeneratorConfig,
    *,
    font_resolver: FontResolver | None = None,
    history_sink: HistorySink | None = None,
) -> GenerationResult:
    """Blocking wrapper around generate_assets."""
    return asyncio.run(
        generate_assets(config, font_resolver=font_resolver, history_sink=history_sink)
    )


async def generate_preview_icon(
    background: BackgroundSpec,
    foreground: ForegroundSpec,
    size: int = PREVIEW_SIZES["large"],
    *,
    icon_scale: float | None = None,
    font_resolver: FontResolver | None = None,
) -> bytes:
    """Compose a single square icon in memory.

    Args:
        background: Background layer.
        foreground: Foreground layer.
        size: Edge length in pixels.
        icon_scale: Icon scale override.
        font_resolver: Resolver for text foreground fonts.

    Returns:
        PNG bytes.

    Raises:
        ConfigError: If either layer is misconfigured.
    """
    engine = await build_engine(
        background,
        foreground,
        scales=ScaleSettings(icon_scale=icon_scale),
        font_resolver=font_resolver,
    )
    spec = AssetSpec(
        name=f"preview-{size}.png",
        width=size,
        height=size,
        platform=Platform.IOS,
        category=AssetCategory.ICON,
    )
    return await asyncio.to_thread(engine.compose, spec)
