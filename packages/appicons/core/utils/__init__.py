"""Shared utilities for appicons."""

from appicons.core.utils.paths import resolve_path

__all__ = [
    "resolve_path",
]
