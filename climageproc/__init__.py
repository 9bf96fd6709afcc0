from __future__ import annotations

from climageproc.core.batch import process_directory, run_batch
from climageproc.core.errors import (
    DecodeError,
    EncodeError,
    ImageProcError,
    InvalidSize,
    IoError,
    NotFound,
    UnsupportedFormat,
)
from climageproc.core.process import process_file
from climageproc.core.run import process_path
from climageproc.core.types import BatchResult, Convert, FileTask, ImageFormat, Resize

__all__ = [
    "BatchResult",
    "Convert",
    "DecodeError",
    "EncodeError",
    "FileTask",
    "ImageFormat",
    "ImageProcError",
    "InvalidSize",
    "IoError",
    "NotFound",
    "Resize",
    "UnsupportedFormat",
    "process_directory",
    "process_file",
    "process_path",
    "run_batch",
]
