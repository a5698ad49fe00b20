from __future__ import annotations

from .sentence import Sentence, SentenceList

# Latin: . ! ? ;   CJK full-width: 。 ！ ？ ；
SENTENCE_TERMINATORS = frozenset(".!?;。！？；")

MIN_SENTENCE_CHARS = 10


def is_terminator(ch: str) -> bool:
    return ch in SENTENCE_TERMINATORS


def segment(text: str, *, min_chars: int = MIN_SENTENCE_CHARS) -> SentenceList:
    """Split ``text`` into sentences on Latin and CJK terminators.

    Single pass over code points. Trimmed runs of ``min_chars`` characters or
    fewer are dropped rather than merged into the next sentence, which also
    discards headers and stray punctuation. A trailing run without terminator is
    kept when long enough.
    """
    if not text or text.isspace():
        return ()

    out: list[Sentence] = []
    buf: list[str] = []
    start = 0  # offset of buf[0] in text

    def _flush() -> None:
        raw = "".join(buf)
        trimmed = raw.strip()
        if len(trimmed) > min_chars:
            lead = len(raw) - len(raw.lstrip())
            out.append(Sentence(position=len(out) + 1, text=trimmed, offset=start + lead))

    for i, ch in enumerate(text):
        if not buf:
            start = i
        buf.append(ch)
        if ch in SENTENCE_TERMINATORS:
            _flush()
            buf = []

    if buf:
        _flush()
    return tuple(out)
