from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tqdm import tqdm

from climageproc.core.batch import default_workers
from climageproc.core.errors import ConfigError, ImageProcError
from climageproc.core.run import process_path
from climageproc.core.types import Convert, Operation, Resize
from climageproc.io.config import (
    get_section,
    load_yaml,
    pick_bool,
    pick_int,
    pick_opt_int,
    pick_str,
)
from climageproc.utils.logger import Logger


def _positive_int(s: str) -> int:
    try:
        v = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}") from None
    if v < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1: {v}")
    return v


def _quality(s: str) -> int:
    v = _positive_int(s)
    if v > 100:
        raise argparse.ArgumentTypeError(f"must be <= 100: {v}")
    return v


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("-i", "--input", type=Path, required=True, help="input file or directory")
    p.add_argument("-o", "--output", type=Path, required=True, help="output file or directory")
    p.add_argument("--config", type=Path, default=None)
    p.add_argument("--workers", type=_positive_int, default=None)
    p.add_argument("--quality", type=_quality, default=None)

    gp = p.add_mutually_exclusive_group()
    gp.add_argument(
        "--progress", dest="progress", action="store_const", const=True, default=None
    )
    gp.add_argument("--no-progress", dest="progress", action="store_const", const=False)

    p.add_argument("-q", "--quiet", action="store_true")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="climageproc", description="A CLI tool for batch image processing"
    )
    sp = p.add_subparsers(dest="cmd", required=True)

    pr = sp.add_parser("resize", help="resize images while keeping the aspect ratio")
    _add_common(pr)
    pr.add_argument("-w", "--width", type=_positive_int, default=None)
    pr.add_argument("-H", "--height", type=_positive_int, default=None)

    pc = sp.add_parser("convert", help="convert images to another format")
    _add_common(pc)
    pc.add_argument("-f", "--format", type=str, default=None, help="jpg, jpeg, png, gif or webp")

    return p


def _operation(a: argparse.Namespace, cfg_all: dict[str, object]) -> Operation:
    if a.cmd == "resize":
        cfg = get_section(cfg_all, "resize")
        width = pick_opt_int(cfg, "width", a.width, None)
        height = pick_opt_int(cfg, "height", a.height, None)
        return Resize(width=width, height=height)

    cfg = get_section(cfg_all, "convert")
    fmt = pick_str(cfg, "format", a.format, None)
    if fmt is None:
        raise ConfigError("convert needs --format (or convert.format in the config)")
    return Convert(format=fmt)


def _stderr(msg: str) -> None:
    tqdm.write(msg, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    a = p.parse_args(argv)

    log = Logger(
        (lambda msg: None) if a.quiet else (lambda msg: tqdm.write(msg)),
        _stderr,
    )

    try:
        cfg_all: dict[str, object] = {}
        if a.config is not None:
            cfg_all = load_yaml(a.config)

        op = _operation(a, cfg_all)

        cfg = get_section(cfg_all, "batch")
        workers = pick_int(cfg, "workers", a.workers, default_workers())
        quality = pick_opt_int(cfg, "quality", a.quality, None)
        progress = pick_bool(cfg, "progress", a.progress, not a.quiet)
        if workers < 1:
            raise ConfigError(f"workers must be >= 1: {workers}")
        if quality is not None and not 1 <= quality <= 100:
            raise ConfigError(f"quality must be in 1..100: {quality}")

        res = process_path(
            a.input,
            a.output,
            op,
            workers=workers,
            progress=progress,
            quality=quality,
            log=log,
        )
    except ImageProcError as e:
        log.error(str(e))
        return 1

    log.info(f"Done! processed {res.succeeded} image(s) -> {a.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
