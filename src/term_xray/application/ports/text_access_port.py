from __future__ import annotations

from typing import Protocol


class TextAccessPort(Protocol):
    """Read-only access to the text surrounding a highlighted span."""

    def words_before(self, n: int) -> str:  # pragma: no cover - interface
        ...

    def words_after(self, n: int) -> str:  # pragma: no cover - interface
        ...

    def selected_sentence(self) -> str | None:  # pragma: no cover - interface
        ...
