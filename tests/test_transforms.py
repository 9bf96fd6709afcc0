from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from climageproc.core.errors import InvalidSize, UnsupportedFormat
from climageproc.core.transforms import apply_operation, resize_image, target_size
from climageproc.core.types import Convert, ImageFormat, Resize


def _noise(w: int, h: int, seed: int = 0) -> Image.Image:
    rng = np.random.default_rng(seed)
    a = rng.integers(0, 256, size=(h, w, 3), dtype=np.uint8)
    return Image.fromarray(a)


@pytest.mark.parametrize(
    "src, w, expected_h",
    [((200, 100), 50, 25), ((640, 480), 100, 75), ((3, 2), 2, 1), ((7, 3), 10, 4)],
)
def test_target_size_width_only(src: tuple[int, int], w: int, expected_h: int) -> None:
    sw, sh = src
    assert target_size(sw, sh, w, None) == (w, expected_h)
    assert expected_h == int(np.floor(w * sh / sw + 0.5))


def test_target_size_height_only() -> None:
    assert target_size(200, 100, None, 50) == (100, 50)
    assert target_size(480, 640, None, 100) == (75, 100)


def test_target_size_rounds_half_up() -> None:
    assert target_size(4, 1, 2, None) == (2, 1)
    assert target_size(1, 4, None, 2) == (1, 2)


def test_target_size_both_and_neither() -> None:
    assert target_size(200, 100, 30, 90) == (30, 90)
    assert target_size(200, 100, None, None) == (200, 100)


def test_target_size_zero_source() -> None:
    assert target_size(0, 10, 5, None) == (5, 0)
    assert target_size(10, 0, None, 5) == (0, 5)


def test_resize_exact_ignores_aspect() -> None:
    img = _noise(40, 10)
    out = resize_image(img, 13, 17)
    assert out.size == (13, 17)


def test_resize_width_only_keeps_aspect() -> None:
    img = _noise(64, 48)
    out = resize_image(img, 32, None)
    assert out.size == (32, 24)


def test_resize_passthrough_returns_same_image() -> None:
    img = _noise(9, 5)
    assert resize_image(img, None, None) is img


def test_resize_to_zero_raises() -> None:
    img = _noise(4, 1)
    with pytest.raises(InvalidSize) as ei:
        resize_image(img, 1, None)
    assert (ei.value.width, ei.value.height) == (1, 0)


def test_apply_operation_resize_has_no_format() -> None:
    img = _noise(20, 10)
    out, fmt = apply_operation(img, Resize(width=10))
    assert out.size == (10, 5)
    assert fmt is None


def test_apply_operation_convert_keeps_pixels() -> None:
    img = _noise(8, 8, seed=3)
    out, fmt = apply_operation(img, Convert(format="WebP"))
    assert fmt is ImageFormat.WEBP
    assert np.array_equal(np.asarray(out), np.asarray(img))


def test_apply_operation_convert_unsupported() -> None:
    with pytest.raises(UnsupportedFormat):
        apply_operation(_noise(2, 2), Convert(format="bmp"))


def test_apply_operation_rejects_unknown_operation() -> None:
    with pytest.raises(TypeError):
        apply_operation(_noise(2, 2), object())  # type: ignore[arg-type]
