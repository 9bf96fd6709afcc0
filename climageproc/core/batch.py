from __future__ import annotations

import os
import threading
from collections.abc import Iterator, Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path

from tqdm import tqdm

from climageproc.core.errors import ImageProcError, IoError, NotFound
from climageproc.core.formats import is_supported, resolve_format
from climageproc.core.process import ensure_dir, process_file
from climageproc.core.types import BatchResult, Convert, FileTask, Operation
from climageproc.utils.logger import NULL_LOGGER, Logger


def default_workers() -> int:
    return max(1, os.cpu_count() or 1)


def discover(input_dir: Path) -> list[Path]:
    """Supported image files directly inside ``input_dir`` (not recursive)."""
    input_dir = Path(input_dir)
    if not input_dir.exists():
        raise NotFound(input_dir)
    try:
        entries = sorted(input_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise IoError(input_dir, str(e)) from e
    return [p for p in entries if p.is_file() and is_supported(p)]


def output_path_for(src: Path, output_dir: Path, op: Operation) -> Path:
    out = Path(output_dir) / Path(src).name
    if isinstance(op, Convert):
        # user spelling is kept in the file name, e.g. "JPG" -> photo.JPG
        out = out.with_suffix("." + op.format.lstrip("."))
    return out


def plan_tasks(
    input_dir: Path, output_dir: Path, op: Operation, log: Logger | None = None
) -> list[FileTask]:
    log = log or NULL_LOGGER
    tasks = [
        FileTask(src, output_path_for(src, output_dir, op)) for src in discover(input_dir)
    ]
    seen: dict[Path, Path] = {}
    for t in tasks:
        prev = seen.setdefault(t.output_path, t.input_path)
        if prev != t.input_path:
            log.warn(
                f"{prev.name} and {t.input_path.name} both write {t.output_path.name}; "
                "one output will be overwritten"
            )
    return tasks


class _Progress:
    """Completed-task counter shared by the workers."""

    def __init__(self, total: int, enabled: bool) -> None:
        self._lock = threading.Lock()
        self.done = 0
        self.bar = tqdm(total=total, unit="img", disable=not enabled, leave=True)

    def advance(self) -> None:
        with self._lock:
            self.done += 1
            self.bar.update(1)

    def close(self, msg: str | None = None) -> None:
        if msg is not None:
            self.bar.set_postfix_str(msg)
        self.bar.close()


def _work(
    task: FileTask, op: Operation, quality: int | None, progress: _Progress
) -> Path:
    try:
        return process_file(task.input_path, task.output_path, op, quality=quality)
    finally:
        progress.advance()


def run_batch(
    tasks: Sequence[FileTask],
    op: Operation,
    *,
    workers: int | None = None,
    progress: bool = True,
    quality: int | None = None,
    log: Logger | None = None,
) -> BatchResult:
    """Process ``tasks`` on a bounded thread pool.

    After the first failure no further task is submitted; tasks already
    running are allowed to finish and the rest are counted as skipped.
    """
    log = log or NULL_LOGGER
    n_workers = default_workers() if workers is None else int(workers)
    if n_workers < 1:
        raise ValueError("workers must be >= 1")

    result = BatchResult(discovered=len(tasks))
    if not tasks:
        return result

    bar = _Progress(len(tasks), enabled=progress)
    todo: Iterator[FileTask] = iter(tasks)
    pending: dict[Future[Path], FileTask] = {}

    def submit_next(pool: ThreadPoolExecutor, k: int) -> None:
        for _ in range(k):
            task = next(todo, None)
            if task is None:
                return
            pending[pool.submit(_work, task, op, quality, bar)] = task
            result.attempted += 1

    try:
        with ThreadPoolExecutor(max_workers=n_workers) as pool:
            submit_next(pool, n_workers)
            while pending:
                done, _ = wait(pending, return_when=FIRST_COMPLETED)
                for fut in done:
                    task = pending.pop(fut)
                    exc = fut.exception()
                    if exc is None:
                        result.succeeded += 1
                        continue
                    if not isinstance(exc, ImageProcError):
                        raise exc
                    result.failures.append((task, exc))
                if result.ok:
                    submit_next(pool, len(done))
    finally:
        bar.close("Done!" if result.ok else None)

    result.skipped = result.discovered - result.attempted
    for task, exc in result.failures[1:]:
        log.error(f"{task.input_path.name}: {exc}")
    if result.skipped:
        log.warn(f"{result.skipped} file(s) not processed after first failure")
    return result


def process_directory(
    input_dir: Path,
    output_dir: Path,
    op: Operation,
    *,
    workers: int | None = None,
    progress: bool = True,
    quality: int | None = None,
    log: Logger | None = None,
) -> BatchResult:
    if isinstance(op, Convert):
        resolve_format(op.format)
    tasks = plan_tasks(input_dir, output_dir, op, log=log)
    ensure_dir(output_dir)
    result = run_batch(
        tasks, op, workers=workers, progress=progress, quality=quality, log=log
    )
    result.raise_for_error()
    return result

