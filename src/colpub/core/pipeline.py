"""Ordered rewrite pipeline turning COL source into a ParseResult"""

import logging
from pathlib import Path
from typing import Callable

from colpub.core.export import write_doc
from colpub.core.metrics import WORDS_PER_MINUTE, count_words, estimate_read_time
from colpub.core.models import ParseResult
from colpub.core.parse import discover_files, extract_preview, parse_metadata, read_document, with_defaults
from colpub.core.sanitize import sanitize_html
from colpub.core.transform.blocks import render_block_elements, render_lists, render_paragraphs
from colpub.core.transform.code import CodeShield, render_code
from colpub.core.transform.inline import render_emphasis, render_headings, render_links_and_images
from colpub.errors import InvalidInput, ParseFailure


logger = logging.getLogger(__name__)

Pass = Callable[[str], str]

# Body passes after code rendering, in order. Each relies on the ones before it:
# links see no code, italics see no bold delimiters, lists see finished inline
# markup, and paragraphs see every structural construct already turned into tags.
BODY_PASSES: tuple[tuple[str, Pass], ...] = (
    ("headings",   render_headings),
    ("links",      render_links_and_images),
    ("emphasis",   render_emphasis),
    ("lists",      render_lists),
    ("blocks",     render_block_elements),
    ("paragraphs", render_paragraphs),
)

# Previews render inline: formatting and links only.
PREVIEW_PASSES: tuple[tuple[str, Pass], ...] = (
    ("emphasis", render_emphasis),
    ("links",    render_links_and_images),
)


class ColParser:
    """Stateless COL renderer; safe to share across threads and calls."""

    def __init__(self, words_per_minute: int = WORDS_PER_MINUTE) -> None:
        if words_per_minute < 1:
            raise ValueError("words_per_minute must be >= 1")
        self._words_per_minute = words_per_minute

    @property
    def words_per_minute(self) -> int:
        return self._words_per_minute

    def render_body(self, body: str) -> str:
        """Sanitize body text and run the code pass plus every BODY_PASSES entry."""
        shield = CodeShield()
        text = shield.hide(render_code(sanitize_html(body)))
        for name, render in BODY_PASSES:
            text = render(text)
            logger.debug("body pass %s done (%d chars)", name, len(text))
        return shield.reveal(text)

    def render_preview(self, preview: str) -> str:
        """Sanitize preview text and apply the inline-only PREVIEW_PASSES."""
        if not preview:
            return ''
        text = sanitize_html(preview)
        for _, render in PREVIEW_PASSES:
            text = render(text)
        return text.strip()

    def parse(self, raw: str) -> ParseResult:
        """Parse raw COL text into a ParseResult.

        Raises InvalidInput for anything but a non-empty string and
        ParseFailure when any stage fails.
        """
        if not isinstance(raw, str) or not raw:
            raise InvalidInput("Invalid input: content must be a non-empty string")

        try:
            metadata, body = parse_metadata(raw)
            preview, body = extract_preview(body)
            content = self.render_body(body)
            word_count = count_words(content)
            result = ParseResult(
                metadata=with_defaults(metadata),
                preview=self.render_preview(preview),
                content=content.strip(),
                word_count=word_count,
                estimated_read_time=estimate_read_time(word_count, self._words_per_minute),
            )
        except Exception as e:
            logger.error("parse failed: %s", e)
            raise ParseFailure(f"Failed to parse .col content: {e}") from e

        logger.debug("parsed %d words, %d metadata keys", result.word_count, len(result.metadata))
        return result


_default_parser = ColParser()


def parse(raw: str) -> ParseResult:
    """Parse raw COL text with a shared default ColParser."""
    return _default_parser.parse(raw)


def parse_file(path: Path, parser: ColParser = _default_parser) -> ParseResult:
    """Read and parse one source file. SourceError and ParseFailure stay distinct."""
    return parser.parse(read_document(path))


def run_render(
    path: str,
    output_dir: Path,
    parser: ColParser = _default_parser,
    sidecar: bool = True,
    styles: bool = False,
    ) -> list[tuple[Path, Path]]:
    """Render every .col file under path into output_dir. Returns (source, html_path) pairs."""
    results = []
    for p in discover_files(Path(path)):
        result = parse_file(p, parser)
        html_path, _ = write_doc(result, p, output_dir, sidecar=sidecar, styles=styles)
        logger.info("rendered %s -> %s", p, html_path)
        results.append((p, html_path))
    return results
