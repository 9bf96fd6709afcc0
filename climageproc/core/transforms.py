from __future__ import annotations

import math

from PIL import Image

from climageproc.core.errors import InvalidSize
from climageproc.core.formats import resolve_format
from climageproc.core.types import Convert, ImageFormat, Operation, Resize

RESAMPLE = Image.Resampling.LANCZOS


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def target_size(
    src_w: int, src_h: int, width: int | None, height: int | None
) -> tuple[int, int]:
    """Output size for a resize request; ``(src_w, src_h)`` when nothing is set."""
    if width is not None and height is not None:
        return int(width), int(height)
    if width is not None:
        if src_w == 0:
            return int(width), 0
        return int(width), _round_half_up(float(width) * float(src_h) / float(src_w))
    if height is not None:
        if src_h == 0:
            return 0, int(height)
        return _round_half_up(float(height) * float(src_w) / float(src_h)), int(height)
    return int(src_w), int(src_h)


def resize_image(img: Image.Image, width: int | None, height: int | None) -> Image.Image:
    if width is None and height is None:
        return img
    w, h = target_size(img.width, img.height, width, height)
    if w < 1 or h < 1:
        raise InvalidSize(w, h)
    return img.resize((w, h), resample=RESAMPLE)


def apply_operation(
    img: Image.Image, op: Operation
) -> tuple[Image.Image, ImageFormat | None]:
    if isinstance(op, Resize):
        return resize_image(img, op.width, op.height), None
    if isinstance(op, Convert):
        return img, resolve_format(op.format)
    raise TypeError(f"unknown operation: {op!r}")
