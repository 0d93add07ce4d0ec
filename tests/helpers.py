"""Image helpers shared by tests."""

from __future__ import annotations

from io import BytesIO

from PIL import Image


def decode_png(data: bytes) -> Image.Image:
    """Decode PNG bytes into an RGBA image."""
    with Image.open(BytesIO(data)) as image:
        return image.convert("RGBA")


def opaque_bbox(image: Image.Image) -> tuple[int, int, int, int] | None:
    """Bounding box of pixels with non-zero alpha."""
    return image.getchannel("A").getbbox()


def bbox_size(image: Image.Image) -> tuple[int, int]:
    """Width and height of the non-transparent region (0, 0 if empty)."""
    box = opaque_bbox(image)
    if box is None:
        return 0, 0
    return box[2] - box[0], box[3] - box[1]
