from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Sentence:
    """A trimmed sentence cut out of a document.

    ``position`` is 1-based within the produced sequence; ``offset`` is the index
    of the first character of ``text`` in the source document.
    """

    position: int
    text: str
    offset: int = 0

    def __len__(self) -> int:
        return len(self.text)

    def short(self, limit: int = 80) -> str:
        t = self.text.replace("\n", " ")
        return (t[:limit] + ("…" if len(t) > limit else "")) if t else ""


SentenceList = tuple[Sentence, ...]


@dataclass(frozen=True)
class Window:
    before: int = 2
    after: int = 2

    @classmethod
    def of(cls, before: int | None, after: int | None) -> Window:
        # Negative counts make no sense for a neighbourhood; clamp instead of failing
        b = 2 if before is None else max(0, int(before))
        a = 2 if after is None else max(0, int(after))
        return cls(before=b, after=a)
