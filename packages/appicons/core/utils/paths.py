"""Path helpers."""

from __future__ import annotations

from pathlib import Path


def resolve_path(path: str | Path, base_dir: Path | None = None) -> Path:
    """Expand ``~`` and anchor relative paths.

    Args:
        path: Path as written by the user.
        base_dir: Directory relative paths are resolved against. Defaults to the
            current working directory.

    Returns:
        Absolute path.
    """
    expanded = Path(path).expanduser()
    if expanded.is_absolute():
        return expanded
    return ((base_dir or Path.cwd()) / expanded).resolve()
