from __future__ import annotations

from pathlib import Path

from climageproc.core.batch import process_directory
from climageproc.core.errors import NotFound
from climageproc.core.process import process_file
from climageproc.core.types import BatchResult, Operation
from climageproc.utils.logger import Logger


def process_path(
    input_path: Path,
    output_path: Path,
    op: Operation,
    *,
    workers: int | None = None,
    progress: bool = True,
    quality: int | None = None,
    log: Logger | None = None,
) -> BatchResult:
    """Run ``op`` on a single image or on every image directly inside a directory.

    For a directory ``output_path`` is the output directory; for a file it is
    the full output file path.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    if not input_path.exists():
        raise NotFound(input_path)

    if input_path.is_dir():
        return process_directory(
            input_path,
            output_path,
            op,
            workers=workers,
            progress=progress,
            quality=quality,
            log=log,
        )

    process_file(input_path, output_path, op, quality=quality)
    return BatchResult(discovered=1, attempted=1, succeeded=1)
