from __future__ import annotations

import logging
from dataclasses import dataclass, field

from term_xray.core.settings import ContextSettings
from term_xray.domain.context import assemble
from term_xray.domain.matcher import match
from term_xray.domain.result import ContextResult, Fallback, FallbackReason, SelectionOutcome
from term_xray.domain.segmenter import segment
from term_xray.domain.sentence import Window
from term_xray.domain.window import expand

log = logging.getLogger(__name__)


@dataclass
class ContextSelector:
    """Sentence-window context for a term: segment, match, expand, assemble.

    Holds only settings; every call works on its own locals, so one instance can
    serve concurrent callers. ``select`` never raises for odd input: an empty,
    too short or term-free document yields a :class:`Fallback` instead.
    """

    settings: ContextSettings = field(default_factory=ContextSettings)

    def select(
        self,
        document_text: str,
        term: str,
        *,
        before: int | None = None,
        after: int | None = None,
        max_chars: int | None = None,
        language: str | None = None,
    ) -> SelectionOutcome:
        cfg = self.settings
        text = document_text or ""
        win = Window.of(
            cfg.context_sentences_before if before is None else before,
            cfg.context_sentences_after if after is None else after,
        )
        budget = cfg.max_characters if max_chars is None else max(0, int(max_chars))

        if not text.strip():
            return Fallback(FallbackReason.EMPTY_INPUT, "document is empty")
        if len(text) < cfg.min_document_chars:
            log.debug("select: document too short (%d chars), skipping segmentation", len(text))
            return Fallback(
                FallbackReason.TOO_SHORT,
                f"document has {len(text)} chars (< {cfg.min_document_chars})",
            )

        sentences = segment(text, min_chars=cfg.min_sentence_chars)
        if not sentences:
            return Fallback(FallbackReason.NO_SENTENCES, "no sentence long enough")

        matches = match(sentences, term)
        if not matches:
            log.debug("select: term %r not found in %d sentences", term, len(sentences))
            return Fallback(FallbackReason.NO_MATCH, f"term {term!r} not found")

        selected = expand(sentences, matches, win.before, win.after)
        assembled = assemble(selected, budget)
        log.info(
            "select: sentences=%d matches=%d selected=%d chars=%d truncated=%s lang=%s",
            len(sentences),
            len(matches),
            assembled.count,
            len(assembled.text),
            assembled.truncated,
            language or "-",
        )
        return ContextResult(
            text=assembled.text,
            sentence_count=assembled.count,
            matched_positions=tuple(sorted(matches)),
            selected_positions=tuple(s.position for s in selected),
            truncated=assembled.truncated,
        )


def select_context(
    document_text: str,
    term: str,
    *,
    before: int | None = None,
    after: int | None = None,
    max_chars: int | None = None,
    language: str | None = None,
    settings: ContextSettings | None = None,
) -> SelectionOutcome:
    """Convenience wrapper around a default-configured :class:`ContextSelector`."""
    selector = ContextSelector(settings or ContextSettings())
    return selector.select(
        document_text, term, before=before, after=after, max_chars=max_chars, language=language
    )
