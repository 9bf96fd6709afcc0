from __future__ import annotations

from pathlib import Path


class ImageProcError(Exception):
    """Base class for every failure reported by climageproc."""


class DecodeError(ImageProcError):
    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = Path(path)
        msg = f"failed to open image: {self.path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class UnsupportedFormat(ImageProcError, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unsupported format: {name}")


class InvalidSize(ImageProcError, ValueError):
    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        super().__init__(f"invalid target size: {self.width}x{self.height}")


class IoError(ImageProcError, OSError):
    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = Path(path)
        msg = f"i/o error: {self.path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class NotFound(ImageProcError, FileNotFoundError):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"no such file or directory: {self.path}")


class ConfigError(ImageProcError, ValueError):
    pass


class EncodeError(ImageProcError):
    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = Path(path)
        msg = f"failed to encode image: {self.path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
