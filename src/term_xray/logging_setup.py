from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO, *, to_stderr: bool = True) -> None:
    """Rich logging for the CLI.

    Logs go to stderr by default so stdout carries only the extracted context
    (plain or JSON) and stays pipeable.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=to_stderr),
                rich_tracebacks=True,
                markup=False,
                show_path=False,
            )
        ],
        force=True,
    )
    # Library chatter from the PDF/text loaders is noise at INFO
    logging.getLogger("langchain_community").setLevel(max(level, logging.WARNING))
