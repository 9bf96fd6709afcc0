from __future__ import annotations

from pathlib import Path
from typing import Final

from climageproc.core.errors import UnsupportedFormat
from climageproc.core.types import ImageFormat

_EXTENSIONS: Final[frozenset[str]] = frozenset({"jpg", "jpeg", "png", "gif", "webp"})

_BY_NAME: Final[dict[str, ImageFormat]] = {
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "png": ImageFormat.PNG,
    "gif": ImageFormat.GIF,
    "webp": ImageFormat.WEBP,
}


def supported_extensions() -> frozenset[str]:
    return _EXTENSIONS


def _ext(path: Path) -> str:
    return Path(path).suffix.lower().lstrip(".")


def is_supported(path: Path) -> bool:
    return _ext(path) in _EXTENSIONS


def resolve_format(name: str) -> ImageFormat:
    key = str(name).strip().lower().lstrip(".")
    fmt = _BY_NAME.get(key)
    if fmt is None:
        raise UnsupportedFormat(name)
    return fmt


def format_for_path(path: Path) -> ImageFormat:
    ext = _ext(path)
    if ext == "":
        raise UnsupportedFormat(str(path))
    return resolve_format(ext)
