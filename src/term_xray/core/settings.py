from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from term_xray.domain.sentence import Window


class ContextSettings(BaseSettings):
    """Knobs for sentence-window context selection (environment-backed)."""

    context_sentences_before: int = Field(2, alias="TERM_XRAY_CONTEXT_SENTENCES_BEFORE")
    context_sentences_after: int = Field(2, alias="TERM_XRAY_CONTEXT_SENTENCES_AFTER")
    max_characters: int = Field(50000, alias="TERM_XRAY_MAX_CHARACTERS")
    # Documents shorter than this skip segmentation and go straight to fallback
    min_document_chars: int = Field(100, alias="TERM_XRAY_MIN_DOCUMENT_CHARS")
    # Sentences must be strictly longer than this after trimming
    min_sentence_chars: int = Field(10, alias="TERM_XRAY_MIN_SENTENCE_CHARS")
    # Word window on each side for the fallback context
    fallback_words: int = Field(50, alias="TERM_XRAY_FALLBACK_WORDS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator(
        "context_sentences_before",
        "context_sentences_after",
        "max_characters",
        "min_document_chars",
        "min_sentence_chars",
        "fallback_words",
        mode="before",
    )
    @classmethod
    def _non_negative(cls, v):  # type: ignore[no-untyped-def]
        # Accept tolerant env values like " 3 "
        if isinstance(v, str):
            v = v.strip()
        if int(v) < 0:
            raise ValueError("must be >= 0")
        return v

    @property
    def window(self) -> Window:
        return Window(before=self.context_sentences_before, after=self.context_sentences_after)


@lru_cache(maxsize=1)
def get_settings() -> ContextSettings:
    return ContextSettings()
