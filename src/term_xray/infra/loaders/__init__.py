from .book_loader import BookTextLoader, load_book_text

__all__ = ["BookTextLoader", "load_book_text"]
