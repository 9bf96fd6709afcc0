from __future__ import annotations

import struct
import zlib
from pathlib import Path

import pytest


def _chunk(cid: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(cid + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + cid + data + struct.pack(">I", crc)


@pytest.fixture()
def huge_png(tmp_path: Path) -> Path:
    """A PNG whose header claims 40000x40000 pixels, over Pillow's size limit."""
    ihdr = struct.pack(">IIBBBBB", 40000, 40000, 8, 2, 0, 0, 0)
    p = tmp_path / "huge.png"
    p.write_bytes(
        b"\x89PNG\r\n\x1a\n"
        + _chunk(b"IHDR", ihdr)
        + _chunk(b"IDAT", zlib.compress(b"\x00" * 16))
        + _chunk(b"IEND", b"")
    )
    return p
