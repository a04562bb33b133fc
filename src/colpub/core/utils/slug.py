"""Slug generation for heading anchors and document identifiers"""

import re


_NON_ALNUM_RE = re.compile(r'[^a-z0-9]+')


def slugify(text: str) -> str:
    """Lowercase text, collapse non-alphanumeric runs to '-', trim edge hyphens."""
    return _NON_ALNUM_RE.sub('-', text.lower()).strip('-')
