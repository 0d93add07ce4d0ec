"""Configuration management for appicons."""

from appicons.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_generator_config,
)
from appicons.core.config.models import (
    AppConfig,
    BackgroundSpec,
    ColorBackground,
    FontConfig,
    ForegroundSpec,
    GeneratorConfig,
    GradientBackground,
    ImageBackground,
    ImageForeground,
    LoggingConfig,
    SvgForeground,
    TextForeground,
)

__all__ = [
    # Loader
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "load_generator_config",
    # Models
    "AppConfig",
    "BackgroundSpec",
    "ColorBackground",
    "FontConfig",
    "ForegroundSpec",
    "GeneratorConfig",
    "GradientBackground",
    "ImageBackground",
    "ImageForeground",
    "LoggingConfig",
    "SvgForeground",
    "TextForeground",
]
