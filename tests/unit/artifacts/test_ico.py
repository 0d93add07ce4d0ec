"""Tests for ICO packing."""

from __future__ import annotations

import struct
from pathlib import Path

import numpy as np
import pytest

from appicons.core.artifacts.ico import build_favicon_ico, favicon_frame_spec, pack_ico
from appicons.core.compositing.engine import CompositingEngine
from appicons.core.compositing.safe_zone import ScaleSettings
from appicons.core.config.models import ColorBackground, ImageForeground
from tests.helpers import decode_png


def _read_ico(data: bytes) -> list[tuple[int, bytes]]:
    reserved, kind, count = struct.unpack_from("<HHH", data, 0)
    assert (reserved, kind) == (0, 1)
    frames = []
    for i in range(count):
        width, height, _, _, planes, bpp, size, offset = struct.unpack_from(
            "<BBBBHHII", data, 6 + i * 16
        )
        assert width == height
        assert (planes, bpp) == (1, 32)
        frames.append((width, data[offset : offset + size]))
    return frames


class TestPackIco:
    def test_directory_layout(self) -> None:
        data = pack_ico([(32, b"bb"), (16, b"a")])
        assert struct.unpack_from("<HHH", data, 0) == (0, 1, 2)
        first = struct.unpack_from("<BBBBHHII", data, 6)
        second = struct.unpack_from("<BBBBHHII", data, 22)
        assert first[0] == 16 and first[6:] == (1, 38)
        assert second[0] == 32 and second[6:] == (2, 39)
        assert data[38:] == b"abb"

    def test_256_is_encoded_as_zero(self) -> None:
        data = pack_ico([(256, b"x")])
        assert data[6] == 0 and data[7] == 0

    def test_empty(self) -> None:
        with pytest.raises(ValueError, match="at least one frame"):
            pack_ico([])

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            pack_ico([(300, b"x")])


class TestFaviconIco:
    def test_frame_spec(self) -> None:
        spec = favicon_frame_spec(48)
        assert (spec.width, spec.height) == (48, 48)
        assert spec.name == "web/favicon.ico@48"

    def test_frames_use_favicon_scale(self, logo_png: Path) -> None:
        engine = CompositingEngine(
            ColorBackground(color="#336699"),
            ImageForeground(image_path=logo_png),
            scales=ScaleSettings(favicon_scale=0.7),
        )
        frames = _read_ico(build_favicon_ico(engine))

        assert [size for size, _ in frames] == [16, 32, 48]
        for size, png in frames:
            image = decode_png(png)
            assert image.size == (size, size)
            pixels = np.array(image)
            red = (pixels[..., 0] > 200) & (pixels[..., 2] < 100)
            cols = np.flatnonzero(red.any(axis=0))
            assert cols[-1] - cols[0] + 1 == int(size * 0.7)
