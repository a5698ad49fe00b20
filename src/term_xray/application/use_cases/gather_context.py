from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from term_xray.application.ports.text_access_port import TextAccessPort
from term_xray.application.use_cases.context_selector import ContextSelector
from term_xray.core.settings import ContextSettings
from term_xray.domain.result import ContextResult, FallbackContext, GatheredContext
from term_xray.infra.fallback.plain_text import PlainTextAccess, find_term

log = logging.getLogger(__name__)


def _count_words(s: str) -> int:
    return len((s or "").split())


def build_fallback_context(access: TextAccessPort, term: str, n_words: int = 50) -> FallbackContext:
    """Plain context around the highlighted term.

    Prefer the enclosing sentence when it is long on at least one side of the
    term (``n_words`` words or more); otherwise take ``n_words`` words on each side.
    """
    sentence = access.selected_sentence()
    if sentence:
        span = find_term(sentence, term, last=False)
        if span is not None:
            prev_part = sentence[: span[0]]
            next_part = sentence[span[1] :]
            if _count_words(prev_part) >= n_words or _count_words(next_part) >= n_words:
                return FallbackContext(prev=prev_part, term=term, next=next_part)
    return FallbackContext(
        prev=access.words_before(n_words), term=term, next=access.words_after(n_words)
    )


@dataclass
class GatherContextUseCase:
    """Sentence-window context with transparent fallback to a word window."""

    selector: ContextSelector = field(default_factory=ContextSelector)
    access_factory: Callable[[str, str, int | None], TextAccessPort] = PlainTextAccess

    @property
    def settings(self) -> ContextSettings:
        return self.selector.settings

    def execute(
        self,
        text: str,
        term: str,
        *,
        highlight_start: int | None = None,
        before: int | None = None,
        after: int | None = None,
        max_chars: int | None = None,
        language: str | None = None,
    ) -> GatheredContext:
        outcome = self.selector.select(
            text, term, before=before, after=after, max_chars=max_chars, language=language
        )
        if isinstance(outcome, ContextResult):
            return GatheredContext(
                text=outcome.text,
                sentence_count=outcome.sentence_count,
                strategy="sentences",
                truncated=outcome.truncated,
            )

        log.info("gather: falling back (%s) %s", outcome.reason.value, outcome.detail)
        access = self.access_factory(text, term, highlight_start)
        fb = build_fallback_context(access, term, self.settings.fallback_words)
        return GatheredContext(
            text=fb.text,
            sentence_count=0,
            strategy="fallback",
            reason=outcome.reason,
        )
