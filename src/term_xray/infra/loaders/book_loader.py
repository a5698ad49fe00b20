from __future__ import annotations

import logging
from pathlib import Path

from langchain_community.document_loaders import PyMuPDFLoader, TextLoader
from langchain_core.documents import Document

from term_xray.exceptions import DocumentLoadError

log = logging.getLogger(__name__)


def _load_pages(path: Path) -> list[Document]:
    if path.suffix.lower() == ".pdf":
        # One Document per page, in page order
        return PyMuPDFLoader(str(path)).load()
    return TextLoader(str(path), encoding="utf-8").load()


def load_book_text(
    path: str | Path, *, until_page: int | None = None, until_char: int | None = None
) -> str:
    """Read a book up to the reading cursor.

    - ``until_page`` (1-based, inclusive) limits PDF pages; text files count as one page
    - ``until_char`` cuts the joined text at that character offset
    """
    p = Path(path)
    if not p.is_file():
        raise DocumentLoadError(f"document not found: {p}", path=p)
    try:
        pages = _load_pages(p)
    except Exception as e:  # noqa: BLE001
        log.exception("failed to load %s", p)
        raise DocumentLoadError(str(e), path=p) from e

    if until_page is not None:
        pages = pages[: max(0, int(until_page))]
    text = "\n".join((d.page_content or "") for d in pages)
    if until_char is not None:
        text = text[: max(0, int(until_char))]
    log.info("loaded %s: pages=%d chars=%d", p.name, len(pages), len(text))
    return text


class BookTextLoader:
    """BookTextPort adapter backed by LangChain loaders (PyMuPDF for PDFs)."""

    def load(
        self, path: str | Path, *, until_page: int | None = None, until_char: int | None = None
    ) -> str:
        return load_book_text(path, until_page=until_page, until_char=until_char)


__all__ = ["BookTextLoader", "load_book_text"]
