"""Error types raised by the asset generation pipeline."""

from __future__ import annotations

from typing import Any


class AppIconsError(Exception):
    """Base class for asset generation errors.

    Attributes:
        message: Human readable message.
        code: Stable machine readable code.
        details: Optional structured context.
    """

    code = "appicons_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(AppIconsError):
    """Raised when a background or foreground layer is misconfigured.

    Fatal for the whole generation call.
    """

    code = "config_error"


class AssetGenerationError(AppIconsError):
    """Raised when a single asset fails to render."""

    code = "asset_generation_error"

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"Failed to generate {name}: {message}", {"name": name})
        self.name = name


class AuxiliaryArtifactError(AppIconsError):
    """Raised when an icon pack, manifest or descriptor cannot be built."""

    code = "auxiliary_artifact_error"

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"Failed to build {name}: {message}", {"name": name})
        self.name = name
