from .plain_text import PlainTextAccess, find_term, sentence_around, words_around

__all__ = ["PlainTextAccess", "find_term", "sentence_around", "words_around"]
