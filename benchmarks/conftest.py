from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pytest
from PIL import Image


@dataclass(frozen=True, slots=True)
class BenchDir:
    path: Path
    files: int
    size: int


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return int(v)


@pytest.fixture(scope="session")
def bench_size() -> int:
    return _env_int("CLIMAGEPROC_BENCH_SIZE", 512)


@pytest.fixture(scope="session")
def bench_files() -> int:
    return _env_int("CLIMAGEPROC_BENCH_FILES", 16)


@pytest.fixture(scope="session")
def bench_rounds() -> int:
    return _env_int("CLIMAGEPROC_BENCH_ROUNDS", 5)


@pytest.fixture(scope="session")
def bench_warmup_rounds() -> int:
    return _env_int("CLIMAGEPROC_BENCH_WARMUP_ROUNDS", 1)


@pytest.fixture(scope="session")
def bench_dir(
    tmp_path_factory: pytest.TempPathFactory, bench_size: int, bench_files: int
) -> BenchDir:
    d = tmp_path_factory.mktemp("bench-in")
    rng = np.random.default_rng(0)
    for i in range(bench_files):
        a = rng.integers(0, 256, size=(bench_size, bench_size, 3), dtype=np.uint8)
        ext = ("png", "jpg")[i % 2]
        Image.fromarray(a).save(d / f"img{i:03d}.{ext}")
    return BenchDir(path=d, files=bench_files, size=bench_size)
