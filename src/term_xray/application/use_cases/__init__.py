from .gather_context import GatherContextUseCase, build_fallback_context
from .context_selector import ContextSelector, select_context

__all__ = [
    "ContextSelector",
    "GatherContextUseCase",
    "build_fallback_context",
    "select_context",
]
