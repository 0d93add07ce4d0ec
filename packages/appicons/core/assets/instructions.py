"""Post-generation integration instructions.

Builds the step list written to ``INSTRUCTIONS.md`` after a run, describing
how to drop the generated files into an Expo project.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from appicons.core.assets.models import AssetCategory, Platform

INSTRUCTIONS_NAME = "INSTRUCTIONS.md"


class InstructionStep(BaseModel):
    """One numbered integration step."""

    step: int = Field(ge=1)
    title: str
    description: str
    command: str | None = None
    files: list[str] = Field(default_factory=list)


class Instructions(BaseModel):
    """Integration guide for one generation run."""

    summary: str
    steps: list[InstructionStep]
    expo_config: str | None = None
    notes: list[str] = Field(default_factory=list)


def generate_instructions(
    output_dir: Path | str,
    platforms: list[Platform],
    categories: list[AssetCategory],
    background_color: str = "#FFFFFF",
) -> Instructions:
    """Build the integration steps for the requested platforms and categories.

    Args:
        output_dir: Directory the assets were written to.
        platforms: Platforms generated in the run.
        categories: Categories generated in the run.
        background_color: Launcher/splash background color for the config example.

    Returns:
        Instructions with steps numbered from 1.
    """
    out = str(output_dir)
    entries: list[dict[str, Any]] = []

    if AssetCategory.ICON in categories:
        entries.append(
            {
                "title": "Copy app icon",
                "description": "Copy the main icon to your Expo assets directory",
                "command": f"cp {out}/ios/icon-1024.png ./assets/images/icon.png",
                "files": [f"{out}/ios/icon-1024.png"],
            }
        )
    if Platform.ANDROID in platforms and AssetCategory.ADAPTIVE in categories:
        entries.append(
            {
                "title": "Copy Android adaptive icon",
                "description": "Copy the adaptive icon foreground for Android",
                "command": (
                    f"cp {out}/android/mipmap-xxxhdpi/ic_launcher_foreground.png "
                    "./assets/images/adaptive-icon.png"
                ),
                "files": [f"{out}/android/mipmap-xxxhdpi/ic_launcher_foreground.png"],
            }
        )
    if AssetCategory.SPLASH in categories:
        entries.append(
            {
                "title": "Copy splash screen",
                "description": "Copy a splash screen image (choose the size that fits your needs)",
                "command": f"cp {out}/ios/splash-1170x2532.png ./assets/images/splash.png",
                "files": [f"{out}/ios/splash-*.png", f"{out}/android/drawable-*/splash.png"],
            }
        )
    if Platform.WEB in platforms and AssetCategory.FAVICON in categories:
        entries.append(
            {
                "title": "Copy web favicon",
                "description": "Copy the favicon, icon pack and manifest for web builds",
                "command": f"cp {out}/web/favicon-32x32.png ./assets/images/favicon.png",
                "files": [
                    f"{out}/web/favicon-*.png",
                    f"{out}/web/favicon.ico",
                    f"{out}/web/site.webmanifest",
                ],
            }
        )
    entries.append(
        {
            "title": "Rebuild native projects",
            "description": "Regenerate the native iOS/Android projects with the new assets",
            "command": "npx expo prebuild --clean",
        }
    )

    notes = [
        "The 1024x1024 icon is the source image; Expo derives every other size from it",
        "For production, make sure the iOS icon has no transparency",
        "Android adaptive icon content must stay inside the 66% center safe zone",
    ]

    return Instructions(
        summary=(
            f"Generated assets for {', '.join(p.value for p in platforms)} "
            f"({', '.join(c.value for c in categories)})"
        ),
        steps=[InstructionStep(step=i, **entry) for i, entry in enumerate(entries, start=1)],
        expo_config=_expo_config_example(platforms, categories, background_color),
        notes=notes,
    )


def _expo_config_example(
    platforms: list[Platform], categories: list[AssetCategory], background_color: str
) -> str:
    lines = ["// app.config.ts asset configuration example:", ""]

    if AssetCategory.ICON in categories:
        lines += ["// iOS icon (in expo.ios)", "icon: './assets/images/icon.png',", ""]
    if Platform.ANDROID in platforms and AssetCategory.ADAPTIVE in categories:
        lines += [
            "// Android adaptive icon (in expo.android)",
            "adaptiveIcon: {",
            "  foregroundImage: './assets/images/adaptive-icon.png',",
            f"  backgroundColor: '{background_color}',",
            "},",
            "",
        ]
    if AssetCategory.SPLASH in categories:
        lines += [
            "// Splash screen (in expo.plugins)",
            "[",
            "  'expo-splash-screen',",
            "  {",
            f"    backgroundColor: '{background_color}',",
            "    image: './assets/images/splash.png',",
            "    imageWidth: 200,",
            "  },",
            "],",
            "",
        ]
    if Platform.WEB in platforms and AssetCategory.FAVICON in categories:
        lines += ["// Web favicon (in expo.web)", "favicon: './assets/images/favicon.png',"]

    return "\n".join(lines).rstrip() + "\n"


def format_instructions_text(instructions: Instructions) -> str:
    """Render instructions as Markdown."""
    lines = ["# Next steps", "", instructions.summary, ""]

    for step in instructions.steps:
        lines.append(f"{step.step}. **{step.title}**")
        lines.append(f"   {step.description}")
        if step.command:
            lines += ["", "   ```sh", f"   {step.command}", "   ```"]
        lines.append("")

    if instructions.expo_config:
        lines += ["## Expo config example", "", "```ts", instructions.expo_config.rstrip(), "```", ""]

    if instructions.notes:
        lines += ["## Notes", ""]
        lines += [f"- {note}" for note in instructions.notes]
        lines.append("")

    return "\n".join(lines)
