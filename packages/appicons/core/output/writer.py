"""Writes generated files under the output directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from appicons.core.assets.models import AuxiliaryArtifact, GeneratedAsset

logger = logging.getLogger(__name__)


def write_file(path: Path, content: bytes) -> None:
    """Create parent directories as needed, then write bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


class OutputWriter:
    """Writes assets and artifacts, isolating per-file failures.

    Args:
        output_dir: Root directory; asset names are relative to it.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def write_assets(self, assets: Iterable[GeneratedAsset]) -> list[str]:
        """Write each asset to its output path.

        Returns:
            One error string per asset that could not be written.
        """
        errors: list[str] = []
        for asset in assets:
            error = self._write(asset.spec.name, asset.output_path, asset.pixels)
            if error:
                errors.append(error)
        return errors

    def write_artifacts(self, artifacts: Iterable[AuxiliaryArtifact]) -> list[str]:
        """Write each auxiliary artifact under the output directory.

        Returns:
            One error string per artifact that could not be written.
        """
        errors: list[str] = []
        for artifact in artifacts:
            error = self._write(artifact.name, self.output_dir / artifact.name, artifact.content)
            if error:
                errors.append(error)
        return errors

    def write_text(self, name: str, text: str) -> str | None:
        """Write a UTF-8 text file; return an error string on failure."""
        return self._write(name, self.output_dir / name, text.encode("utf-8"))

    def _write(self, name: str, path: Path, content: bytes) -> str | None:
        try:
            write_file(path, content)
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            return f"Failed to write {name}: {e}"
        logger.debug("Wrote %s (%d bytes)", path, len(content))
        return None
