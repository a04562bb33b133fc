"""Source discovery, front-matter metadata and <preview> extraction"""

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from colpub.errors import SourceError


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
PREVIEW_RE     = re.compile(r'<preview>(.*?)</preview>', re.DOTALL)
QUOTE_EDGE_RE  = re.compile(r'^["\']|["\']$')
COL_EXTENSIONS = {'.col'}

DEFAULT_TITLE  = 'Untitled'
DEFAULT_AUTHOR = 'Anonymous'


def parse_metadata(text: str) -> tuple[dict[str, str], str]:
    """Return (metadata, body) with the `---` front-matter block removed.

    Front matter is simple `key: value` lines split on the first colon; lines
    without a colon or with an empty key/value are skipped. Without a complete
    opening and closing delimiter the whole text is body.
    """
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text.strip()

    metadata: dict[str, str] = {}
    for line in m.group(1).split('\n'):
        line = line.strip()
        if not line or ':' not in line:
            continue
        key, _, value = line.partition(':')
        key, value = key.strip(), value.strip()
        if key and value:
            metadata[key] = QUOTE_EDGE_RE.sub('', value)
    return metadata, text[m.end():].strip()


def extract_preview(text: str) -> tuple[str, str]:
    """Return (preview, body): first <preview> span's trimmed text, every span removed."""
    m = PREVIEW_RE.search(text)
    preview = m.group(1).strip() if m else ''
    return preview, PREVIEW_RE.sub('', text)


def split_tags(value: str) -> list[str]:
    """Split a comma-separated tags value into trimmed entries."""
    return [tag.strip() for tag in value.split(',')]


def with_defaults(metadata: dict[str, str]) -> dict[str, Any]:
    """Merge author metadata over the title/date/author/tags defaults.

    The four well-known keys lead in a fixed order; other keys follow in
    source order. `tags` is always a list.
    """
    merged: dict[str, Any] = {
        'title':  metadata.get('title') or DEFAULT_TITLE,
        'date':   metadata.get('date') or datetime.now(timezone.utc).date().isoformat(),
        'author': metadata.get('author') or DEFAULT_AUTHOR,
        'tags':   split_tags(metadata['tags']) if metadata.get('tags') else [],
    }
    for key, value in metadata.items():
        if key != 'tags':
            merged[key] = value
    return merged


def discover_files(path: Path) -> list[Path]:
    """Return sorted .col files under path, or [path] if a single .col file."""
    if path.is_file():
        return [path] if path.suffix in COL_EXTENSIONS else []
    if not path.exists():
        return []
    return sorted(p for p in path.rglob('*') if p.suffix in COL_EXTENSIONS and p.is_file())


def read_document(path: Path) -> str:
    """Read a source document as UTF-8 text."""
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Failed to read {path}: {e}") from e
