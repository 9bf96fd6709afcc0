from __future__ import annotations

from pathlib import Path

from climageproc.core.errors import IoError
from climageproc.core.transforms import apply_operation
from climageproc.core.types import Operation
from climageproc.io.imageio import load_image, save_image


def ensure_dir(path: Path) -> None:
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoError(path, str(e)) from e


def ensure_parent(path: Path) -> None:
    ensure_dir(Path(path).parent)


def process_file(
    input_path: Path,
    output_path: Path,
    op: Operation,
    *,
    quality: int | None = None,
) -> Path:
    """Decode one image, apply ``op`` and write the result to ``output_path``.

    Conversions encode with the requested format; resizes encode with the
    format implied by the output extension. A failed encode may leave a
    partially written file behind.
    """
    img = load_image(input_path)
    try:
        out, fmt = apply_operation(img, op)
        ensure_parent(output_path)
        save_image(output_path, out, fmt=fmt, quality=quality)
    finally:
        img.close()
    return Path(output_path)
