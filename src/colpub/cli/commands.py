"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from colpub.config import Settings, load_config
from colpub.core.pipeline import ColParser, parse_file, run_render
from colpub.core.styles import generate_styles
from colpub.errors import ColpubError, SourceError
from colpub.logging import get_logger


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def render_cmd(
    path: Annotated[str, typer.Argument(help="File or directory of .col documents")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    wpm: Annotated[Optional[int], typer.Option("--words-per-minute", help="Reading speed for read-time estimates")] = None,
    styles: Annotated[Optional[bool], typer.Option("--styles/--no-styles", help="Inline the blog stylesheet")] = None,
    sidecar: Annotated[Optional[bool], typer.Option("--sidecar/--no-sidecar", help="Write JSON sidecar files")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ):
    """Render .col documents to HTML articles (+ JSON sidecars)."""
    settings = _settings(overrides={
        "output_dir": out, "words_per_minute": wpm,
        "embed_styles": styles, "write_sidecar": sidecar,
    })
    get_logger(verbose=verbose, level=settings.log_level)
    output_dir = Path(settings.output_dir)

    try:
        results = run_render(
            path, output_dir, ColParser(settings.words_per_minute),
            sidecar=settings.write_sidecar, styles=settings.embed_styles,
        )
    except SourceError as e:
        _fail("Could not read source", e)
    except ColpubError as e:
        _fail("Render failed", e)

    if not results:
        typer.echo(f"No .col files found at {path}.")
        raise typer.Exit(1)
    for src, html_path in results:
        typer.echo(f"  {src} -> {html_path}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")


def show_cmd(
    path: Annotated[Path, typer.Argument(help=".col file to parse")],
    wpm: Annotated[Optional[int], typer.Option("--words-per-minute", help="Reading speed for read-time estimates")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ):
    """Print the parse result of one document as JSON."""
    settings = _settings(overrides={"words_per_minute": wpm})
    get_logger(verbose=verbose, level=settings.log_level)
    try:
        result = parse_file(path, ColParser(settings.words_per_minute))
    except SourceError as e:
        _fail("Could not read source", e)
    except ColpubError as e:
        _fail("Parse failed", e)
    typer.echo(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))


def styles_cmd(
    out: Annotated[Optional[Path], typer.Option("--out", help="Write the stylesheet to this file")] = None,
    ):
    """Print (or write) the stylesheet for the rendered blog markup."""
    css = generate_styles()
    if out is None:
        typer.echo(css, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(css, encoding='utf-8')
    typer.echo(f"Wrote stylesheet to {out}")
