from __future__ import annotations

from collections.abc import Iterable

from .sentence import Sentence


def fold(s: str) -> str:
    return (s or "").casefold()


def match(sentences: Iterable[Sentence], term: str) -> frozenset[int]:
    """Return positions of sentences containing ``term`` (case-insensitive substring).

    No regex and no word boundaries: "cat" matches inside "concatenate".
    """
    needle = fold(term)
    if not needle.strip():
        return frozenset()
    return frozenset(s.position for s in sentences if needle in fold(s.text))
