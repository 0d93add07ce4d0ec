"""Multi-resolution ICO container packing.

Frames are stored as embedded PNG images (supported since Windows Vista and
by every current browser), each with a 16-byte directory entry.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

from appicons.core.assets.models import AssetCategory, AssetSpec, Platform
from appicons.core.compositing.engine import CompositingEngine

ICO_SIZES: tuple[int, ...] = (16, 32, 48)

_HEADER = struct.Struct("<HHH")  # reserved, type (1 = icon), image count
_ENTRY = struct.Struct("<BBBBHHII")  # w, h, palette, reserved, planes, bpp, size, offset


def pack_ico(frames: Sequence[tuple[int, bytes]]) -> bytes:
    """Pack PNG frames into an ICO container.

    Args:
        frames: (edge size, PNG bytes) pairs. Written in ascending size order.

    Returns:
        ICO file bytes.

    Raises:
        ValueError: If no frames are given or a size is out of range.
    """
    if not frames:
        raise ValueError("An icon pack needs at least one frame")

    ordered = sorted(frames, key=lambda frame: frame[0])
    offset = _HEADER.size + _ENTRY.size * len(ordered)
    entries: list[bytes] = []
    for size, png in ordered:
        if not 1 <= size <= 256:
            raise ValueError(f"ICO frame size out of range: {size}")
        # 0 encodes 256 in the one-byte dimension fields
        edge = 0 if size >= 256 else size
        entries.append(_ENTRY.pack(edge, edge, 0, 0, 1, 32, len(png), offset))
        offset += len(png)

    header = _HEADER.pack(0, 1, len(ordered))
    return header + b"".join(entries) + b"".join(png for _, png in ordered)


def favicon_frame_spec(size: int) -> AssetSpec:
    """Spec used to render one ICO frame through the standard favicon branch."""
    return AssetSpec(
        name=f"web/favicon.ico@{size}",
        width=size,
        height=size,
        platform=Platform.WEB,
        category=AssetCategory.FAVICON,
    )


def build_favicon_ico(engine: CompositingEngine, sizes: Sequence[int] = ICO_SIZES) -> bytes:
    """Render each frame size and pack them into one ICO file."""
    frames = [(size, engine.compose(favicon_frame_spec(size))) for size in sizes]
    return pack_ico(frames)
