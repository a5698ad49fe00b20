"""Domain layer: pure types and logic (no I/O, no external libs).

Keep this layer free of side-effects. Every function here is a pure function of
its inputs and safe to call from several threads at once.
"""

from .context import DEFAULT_MAX_CHARS, AssembledContext, assemble
from .matcher import match
from .result import (
    ContextResult,
    Fallback,
    FallbackContext,
    FallbackReason,
    GatheredContext,
    SelectionOutcome,
    is_fallback,
)
from .segmenter import MIN_SENTENCE_CHARS, SENTENCE_TERMINATORS, is_terminator, segment
from .sentence import Sentence, SentenceList, Window
from .window import expand, expand_positions

__all__ = [
    "Sentence",
    "SentenceList",
    "Window",
    "segment",
    "is_terminator",
    "SENTENCE_TERMINATORS",
    "MIN_SENTENCE_CHARS",
    "match",
    "expand",
    "expand_positions",
    "assemble",
    "AssembledContext",
    "DEFAULT_MAX_CHARS",
    "ContextResult",
    "Fallback",
    "FallbackReason",
    "FallbackContext",
    "GatheredContext",
    "SelectionOutcome",
    "is_fallback",
]
