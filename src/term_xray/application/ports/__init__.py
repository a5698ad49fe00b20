from .book_text_port import BookTextPort
from .text_access_port import TextAccessPort

__all__ = [
    "BookTextPort",
    "TextAccessPort",
]
