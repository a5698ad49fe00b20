from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FallbackReason(str, Enum):
    EMPTY_INPUT = "empty_input"
    TOO_SHORT = "too_short"
    NO_SENTENCES = "no_sentences"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class ContextResult:
    """Sentence-window context ready for prompt construction."""

    text: str
    sentence_count: int
    matched_positions: tuple[int, ...] = field(default_factory=tuple)
    selected_positions: tuple[int, ...] = field(default_factory=tuple)
    truncated: bool = False


@dataclass(frozen=True)
class Fallback:
    """The caller should build its own, simpler context."""

    reason: FallbackReason
    detail: str = ""

    @property
    def sentence_count(self) -> int:
        return 0


SelectionOutcome = ContextResult | Fallback


def is_fallback(outcome: SelectionOutcome) -> bool:
    return isinstance(outcome, Fallback)


@dataclass(frozen=True)
class FallbackContext:
    """Plain text around a highlighted term: ``prev + term + next``."""

    prev: str
    term: str
    next: str

    @property
    def text(self) -> str:
        return f"{self.prev}{self.term}{self.next}"


@dataclass(frozen=True)
class GatheredContext:
    text: str
    sentence_count: int
    strategy: str  # "sentences" | "fallback"
    reason: FallbackReason | None = None
    truncated: bool = False
