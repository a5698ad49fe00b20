from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .sentence import Sentence

DEFAULT_MAX_CHARS = 50000


@dataclass(frozen=True)
class AssembledContext:
    text: str
    count: int
    truncated: bool = False


def assemble(selected: Iterable[Sentence], max_chars: int = DEFAULT_MAX_CHARS) -> AssembledContext:
    """Join sentences with single spaces and hard-cut at ``max_chars`` characters.

    The cut is not sentence-aware; the last sentence may end mid-word.
    ``count`` is the number of sentences before truncation.
    """
    sents = list(selected)
    text = " ".join(s.text for s in sents)
    limit = max(0, int(max_chars))
    if len(text) > limit:
        return AssembledContext(text=text[:limit], count=len(sents), truncated=True)
    return AssembledContext(text=text, count=len(sents))
