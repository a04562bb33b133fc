"""Export: build the HTML article and sidecar JSON for a parsed document and write them"""

import json
from pathlib import Path

from colpub.core.models import ParseResult
from colpub.core.sanitize import escape_html
from colpub.core.styles import generate_styles
from colpub.core.utils.slug import slugify


def doc_slug(result: ParseResult, path: Path) -> str:
    """Slug from a `slug` metadata key, else from the file stem."""
    return slugify(result.metadata.get('slug') or path.stem) or 'document'


def build_header(result: ParseResult) -> str:
    """Render the title/date/author/read-time header; metadata is escaped here."""
    meta = result.metadata
    tags = "".join(
        f'<span class="blog-tag">{escape_html(tag)}</span>' for tag in meta.get('tags', []) if tag
    )
    lines = [
        '<header class="blog-meta">',
        f'<h1 class="blog-title">{escape_html(meta["title"])}</h1>',
        '<div class="blog-meta-info">'
        f'<span>{escape_html(meta["date"])}</span>'
        f'<span>{escape_html(meta["author"])}</span>'
        f'<span>{result.estimated_read_time} min read</span>'
        '</div>',
    ]
    if tags:
        lines.append(f'<div class="blog-tags">{tags}</div>')
    lines.append('</header>')
    return "\n".join(lines)


def build_html(result: ParseResult, styles: bool = False) -> str:
    """Return a standalone <article> with header and content, optionally with inline CSS."""
    parts = []
    if styles:
        parts.append(f"<style>\n{generate_styles()}</style>")
    parts.append('<article class="blog-content">')
    parts.append(build_header(result))
    parts.append(result.content)
    parts.append('</article>')
    return "\n".join(parts) + "\n"


def build_sidecar(result: ParseResult, slug: str, path: str) -> dict:
    """Build the sidecar JSON dict: slug, source path and the camelCase parse result."""
    return {
        "slug": slug,
        "path": path,
        **result.model_dump(by_alias=True),
    }


def write_doc(
    result: ParseResult,
    source: Path,
    output_dir: Path,
    sidecar: bool = True,
    styles: bool = False,
    ) -> tuple[Path, Path | None]:
    """Write <slug>.html (+ <slug>.json) for one document into output_dir.

    Returns (html_path, json_path); json_path is None when sidecar is False.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    slug = doc_slug(result, source)
    html_path = output_dir / f"{slug}.html"
    html_path.write_text(build_html(result, styles), encoding='utf-8')

    json_path = None
    if sidecar:
        json_path = output_dir / f"{slug}.json"
        json_path.write_text(
            json.dumps(build_sidecar(result, slug, str(source)), indent=2, ensure_ascii=False),
            encoding='utf-8',
        )
    return html_path, json_path
