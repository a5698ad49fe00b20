from __future__ import annotations

import json
import logging
import sys
import warnings
from pathlib import Path

import typer

from .application.ports import BookTextPort
from .application.use_cases import ContextSelector, GatherContextUseCase
from .core.settings import get_settings
from .domain.segmenter import segment
from .exceptions import ConfigurationError, DocumentLoadError
from .infra.loaders import BookTextLoader
from .logging_setup import setup_logging

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Term context tools")


def _read(
    path: Path,
    until_page: int | None,
    until_char: int | None,
    loader: BookTextPort | None = None,
) -> str:
    if not path.exists():
        raise ConfigurationError(f"document not found: {path}")
    return (loader or BookTextLoader()).load(path, until_page=until_page, until_char=until_char)


@app.command("select")
def select_cmd(
    path: Path = typer.Argument(..., help="Book file (.txt, .md, .pdf)."),  # noqa: B008
    term: str = typer.Argument(..., help="Highlighted term to look up."),
    before: int = typer.Option(None, help="Sentences before each match."),
    after: int = typer.Option(None, help="Sentences after each match."),
    max_chars: int = typer.Option(None, "--max-chars", help="Character budget for the context."),
    until_page: int = typer.Option(None, help="Reading cursor: last page to include (1-based)."),
    until_char: int = typer.Option(None, help="Reading cursor: character offset."),
    language: str = typer.Option(None, help="Language hint, forwarded only."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    outfile: Path | None = typer.Option(  # noqa: B008 - Typer keeps options in signature
        None,
        "--outfile",
        "-o",
        help="Write JSON to this file (UTF-8); logs are suppressed.",
    ),
) -> None:
    """Extract the sentence window around every occurrence of TERM."""
    quiet = bool(as_json or outfile)
    setup_logging(logging.ERROR if quiet else logging.INFO)
    if quiet:
        warnings.filterwarnings("ignore")

    text = _read(path, until_page, until_char)
    uc = GatherContextUseCase(selector=ContextSelector(get_settings()))
    ctx = uc.execute(
        text, term, before=before, after=after, max_chars=max_chars, language=language
    )

    if quiet:
        payload = {
            "term": term,
            "strategy": ctx.strategy,
            "reason": ctx.reason.value if ctx.reason else None,
            "sentence_count": ctx.sentence_count,
            "truncated": ctx.truncated,
            "language": language,
            "context": ctx.text,
        }
        data = json.dumps(payload, ensure_ascii=False, indent=2)
        if outfile:
            outfile.parent.mkdir(parents=True, exist_ok=True)
            with open(outfile, "w", encoding="utf-8", newline="\n") as f:
                f.write(data + "\n")
        else:
            typer.echo(data)
        raise typer.Exit()

    header = f"[{ctx.strategy}] sentences={ctx.sentence_count} chars={len(ctx.text)}"
    if ctx.reason is not None:
        header += f" reason={ctx.reason.value}"
    if ctx.truncated:
        header += " (truncated)"
    typer.echo(header)
    typer.echo("-" * 80)
    typer.echo(ctx.text if ctx.text else "No context.")


@app.command("segment")
def segment_cmd(
    path: Path = typer.Argument(..., help="Book file (.txt, .md, .pdf)."),  # noqa: B008
    limit: int = typer.Option(20, help="Show at most this many sentences (0 = all)."),
    until_page: int = typer.Option(None, help="Reading cursor: last page to include (1-based)."),
) -> None:
    """Print the numbered sentences the selector works on."""
    setup_logging(logging.WARNING)
    text = _read(path, until_page, None)
    sentences = segment(text, min_chars=get_settings().min_sentence_chars)
    shown = sentences if limit <= 0 else sentences[:limit]
    for s in shown:
        typer.echo(f"[{s.position}] @{s.offset} {s.short(120)}")
    typer.echo(f"{len(sentences)} sentences")


def main() -> int:
    try:
        app()
        return 0
    except (ConfigurationError, DocumentLoadError) as ce:
        typer.secho(f"Config error: {ce}", fg=typer.colors.RED)
        return 2
    except Exception as e:  # noqa: BLE001
        typer.secho(f"Unexpected error: {e}", fg=typer.colors.RED)
        return 1


if __name__ == "__main__":
    sys.exit(main())
