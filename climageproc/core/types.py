from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union

from climageproc.core.errors import ImageProcError


class ImageFormat(Enum):
    JPEG = ("JPEG", "jpg")
    PNG = ("PNG", "png")
    GIF = ("GIF", "gif")
    WEBP = ("WEBP", "webp")

    @property
    def pil_name(self) -> str:
        return self.value[0]

    @property
    def extension(self) -> str:
        return self.value[1]


@dataclass(frozen=True, slots=True)
class Resize:
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True, slots=True)
class Convert:
    format: str


Operation = Union[Resize, Convert]


@dataclass(frozen=True, slots=True)
class FileTask:
    input_path: Path
    output_path: Path


@dataclass(slots=True)
class BatchResult:
    """Outcome of one run.

    Every discovered task ends up in exactly one of ``succeeded``,
    ``failures`` or ``skipped``.
    """

    discovered: int = 0
    attempted: int = 0
    succeeded: int = 0
    skipped: int = 0
    failures: list[tuple[FileTask, ImageProcError]] = field(default_factory=list)

    @property
    def error(self) -> ImageProcError | None:
        if not self.failures:
            return None
        return self.failures[0][1]

    @property
    def ok(self) -> bool:
        return not self.failures

    def raise_for_error(self) -> None:
        err = self.error
        if err is not None:
            raise err
