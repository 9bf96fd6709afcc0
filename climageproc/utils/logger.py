from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


def _discard(msg: str) -> None:
    return None


@dataclass(frozen=True, slots=True)
class Logger:
    emit: Callable[[str], None]
    emit_err: Callable[[str], None] | None = None

    def info(self, msg: str) -> None:
        self.emit(msg)

    def warn(self, msg: str) -> None:
        (self.emit_err or self.emit)(f"warning: {msg}")

    def error(self, msg: str) -> None:
        (self.emit_err or self.emit)(f"error: {msg}")


NULL_LOGGER = Logger(_discard)
