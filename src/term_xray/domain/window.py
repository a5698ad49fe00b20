from __future__ import annotations

from collections.abc import Iterable, Sequence

from .sentence import Sentence


def expand_positions(total: int, matches: Iterable[int], before: int = 2, after: int = 2) -> list[int]:
    """Union of ``[p - before, p + after]`` over all matches, clipped to ``[1, total]``.

    Returned ascending, without duplicates.
    """
    before = max(0, int(before))
    after = max(0, int(after))
    selected: set[int] = set()
    for p in matches:
        if p < 1 or p > total:
            continue
        lo = max(1, p - before)
        hi = min(total, p + after)
        selected.update(range(lo, hi + 1))
    return sorted(selected)


def expand(
    sentences: Sequence[Sentence],
    matches: Iterable[int],
    before: int = 2,
    after: int = 2,
) -> tuple[Sentence, ...]:
    """Map the expanded, document-ordered positions back to their sentences."""
    positions = expand_positions(len(sentences), matches, before, after)
    return tuple(sentences[q - 1] for q in positions)
