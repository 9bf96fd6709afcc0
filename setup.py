# setup.py
from __future__ import annotations

from setuptools import find_namespace_packages, setup


def collect_packages() -> list[str]:
    return find_namespace_packages(include=["climageproc", "climageproc.*"])


install_requires: list[str] = [
    "Pillow>=10.1",
    "tqdm>=4.60",
    "PyYAML>=6.0",
]

extras_require: dict[str, list[str]] = {
    "test": ["pytest>=7", "numpy>=1.24"],
    "bench": ["pytest>=7", "pytest-benchmark>=4", "numpy>=1.24"],
}

setup(
    name="climageproc",
    version="0.1.0",
    description="A CLI tool for batch image processing",
    python_requires=">=3.10",
    packages=collect_packages(),
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={"console_scripts": ["climageproc=climageproc.__main__:main"]},
)
