from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from climageproc.core.errors import DecodeError, EncodeError, IoError, NotFound
from climageproc.core.formats import format_for_path
from climageproc.core.types import ImageFormat

# modes each encoder accepts without conversion
_NATIVE_MODES: dict[ImageFormat, frozenset[str]] = {
    ImageFormat.JPEG: frozenset({"L", "RGB", "CMYK"}),
    ImageFormat.PNG: frozenset({"1", "L", "LA", "P", "RGB", "RGBA", "I", "I;16"}),
    ImageFormat.GIF: frozenset({"1", "L", "P", "RGB", "RGBA"}),
    ImageFormat.WEBP: frozenset({"RGB", "RGBA"}),
}


def load_image(path: Path) -> Image.Image:
    path = Path(path)
    try:
        img = Image.open(path)
    except FileNotFoundError as e:
        raise NotFound(path) from e
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
        SyntaxError,
    ) as e:
        raise DecodeError(path, str(e)) from e
    try:
        img.load()
    except (Image.DecompressionBombError, OSError, ValueError, SyntaxError) as e:
        img.close()
        raise DecodeError(path, str(e)) from e
    return img


def _prepare(img: Image.Image, fmt: ImageFormat) -> Image.Image:
    if img.mode in _NATIVE_MODES[fmt]:
        return img
    if fmt is ImageFormat.JPEG:
        return img.convert("RGB")
    if "A" in img.getbands() or img.info.get("transparency") is not None:
        return img.convert("RGBA")
    return img.convert("RGB")


def save_image(
    path: Path,
    img: Image.Image,
    fmt: ImageFormat | None = None,
    quality: int | None = None,
) -> None:
    path = Path(path)
    if fmt is None:
        fmt = format_for_path(path)
    x = _prepare(img, fmt)

    save_kwargs: dict[str, object] = {}
    if quality is not None and fmt in (ImageFormat.JPEG, ImageFormat.WEBP):
        save_kwargs["quality"] = int(quality)

    try:
        x.save(path, fmt.pil_name, **save_kwargs)
    except OSError as e:
        raise IoError(path, str(e)) from e
    except ValueError as e:
        raise EncodeError(path, str(e)) from e
