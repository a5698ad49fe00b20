from __future__ import annotations

from pathlib import Path
from typing import Protocol


class BookTextPort(Protocol):
    def load(
        self, path: str | Path, *, until_page: int | None = None, until_char: int | None = None
    ) -> str:  # pragma: no cover - interface
        ...
