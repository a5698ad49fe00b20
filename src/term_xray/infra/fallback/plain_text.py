from __future__ import annotations

import logging
import re

from term_xray.domain.segmenter import is_terminator

log = logging.getLogger(__name__)


_WORD = re.compile(r"\S+")


def find_term(text: str, term: str, *, last: bool = True) -> tuple[int, int] | None:
    """Locate ``term`` with the matcher's casefold rule; returns ``(start, end)`` or None.

    Searches a casefolded copy of ``text`` and maps the hit back through a
    per-character index, since folding may change length ("ß" -> "ss").
    """
    needle = (term or "").casefold()
    if not needle.strip():
        return None
    folded: list[str] = []
    origin: list[int] = []  # folded index -> index in text
    for i, ch in enumerate(text or ""):
        f = ch.casefold()
        folded.append(f)
        origin.extend([i] * len(f))
    hay = "".join(folded)
    pos = hay.rfind(needle) if last else hay.find(needle)
    if pos < 0:
        return None
    return origin[pos], origin[pos + len(needle) - 1] + 1


def words_around(text: str, start: int, end: int, n_words: int = 50) -> tuple[str, str]:
    """Original text spanning up to ``n_words`` words before ``start`` and after ``end``.

    Slices ``text`` itself, so ``prev + text[start:end] + next`` is a substring
    of the document with its spacing and punctuation intact.
    """
    n = max(0, int(n_words))
    if n == 0:
        return "", ""
    prev_words = list(_WORD.finditer(text, 0, start))[-n:]
    prev = text[prev_words[0].start() : start] if prev_words else ""
    last_end: int | None = None
    for i, m in enumerate(_WORD.finditer(text, end), 1):
        last_end = m.end()
        if i == n:
            break
    nxt = text[end:last_end] if last_end is not None else ""
    return prev, nxt


def sentence_bounds(text: str, start: int, end: int) -> tuple[int, int]:
    """Bounds ``[lo, hi)`` of the sentence enclosing the span, terminator included."""
    lo = start
    while lo > 0 and not is_terminator(text[lo - 1]):
        lo -= 1
    hi = end
    while hi < len(text):
        hi += 1
        if is_terminator(text[hi - 1]):
            break
    return lo, hi


def sentence_around(text: str, start: int, end: int) -> tuple[str, str]:
    """Parts of the enclosing sentence before and after the span."""
    lo, hi = sentence_bounds(text, start, end)
    return text[lo:start].lstrip(), text[end:hi].rstrip()


class PlainTextAccess:
    """TextAccessPort over an in-memory document.

    Without an explicit ``highlight_start`` the last occurrence of the term is
    used: the one nearest to the reading cursor at the end of the text.
    """

    def __init__(self, text: str, term: str, highlight_start: int | None = None) -> None:
        self.text = text or ""
        self.term = term or ""
        self.span: tuple[int, int] | None
        if highlight_start is not None and 0 <= highlight_start <= len(self.text):
            self.span = (highlight_start, min(len(self.text), highlight_start + len(self.term)))
        else:
            self.span = find_term(self.text, self.term)
        if self.span is None:
            log.debug("term %r not present in text; fallback context will be empty", self.term)

    def words_before(self, n: int) -> str:
        if self.span is None:
            return ""
        prev, _ = words_around(self.text, self.span[0], self.span[1], n)
        return prev

    def words_after(self, n: int) -> str:
        if self.span is None:
            return ""
        _, nxt = words_around(self.text, self.span[0], self.span[1], n)
        return nxt

    def selected_sentence(self) -> str | None:
        if self.span is None:
            return None
        lo, hi = sentence_bounds(self.text, *self.span)
        return self.text[lo:hi].strip() or None
