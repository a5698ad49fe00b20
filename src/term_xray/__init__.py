"""Sentence-window context extraction for a highlighted term in a long document."""

from term_xray.application.use_cases import ContextSelector, GatherContextUseCase, select_context
from term_xray.core.settings import ContextSettings
from term_xray.domain import ContextResult, Fallback, FallbackReason, GatheredContext

__all__ = [
    "ContextSelector",
    "ContextSettings",
    "ContextResult",
    "Fallback",
    "FallbackReason",
    "GatherContextUseCase",
    "GatheredContext",
    "select_context",
]

__version__ = "0.1.0"
