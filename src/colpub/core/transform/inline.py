"""Heading, link/image and emphasis passes

Each pass assumes code has already been rendered and shielded, so any
backtick content is out of reach.
"""

import re

from colpub.core.sanitize import escape_html
from colpub.core.transform.code import TOKEN_RE
from colpub.core.utils.slug import slugify


HEADING_RE = re.compile(r'^(#{1,6})\s+(.+)$', re.MULTILINE)
IMAGE_RE   = re.compile(r'!\[([^\]]*)\]\(([^)]+)\)')
LINK_RE    = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')
BOLD_RE    = re.compile(r'\*\*(.*?)\*\*')
ITALIC_RE  = re.compile(r'\*(.*?)\*')

EXTERNAL_LINK_ATTRS = ' target="_blank" rel="noopener noreferrer"'


def _heading(m: re.Match) -> str:
    level, text = len(m.group(1)), m.group(2)
    anchor = slugify(TOKEN_RE.sub('', text))
    return f'<h{level} id="{anchor}" class="blog-heading">{text.strip()}</h{level}>'


def render_headings(text: str) -> str:
    """Rewrite `#`..`######` lines to <h1>-<h6> with a slug id. Heading text is not escaped."""
    return HEADING_RE.sub(_heading, text)


def _image(m: re.Match) -> str:
    alt, src = escape_html(m.group(1)), escape_html(m.group(2))
    return f'<img src="{src}" alt="{alt}" class="blog-image" loading="lazy">'


def _link(m: re.Match) -> str:
    label, url = m.group(1), m.group(2)
    target = EXTERNAL_LINK_ATTRS if url.startswith('http') else ''
    return f'<a href="{escape_html(url)}" class="blog-link"{target}>{escape_html(label)}</a>'


def render_links_and_images(text: str) -> str:
    """Render ![alt](src) images, then [text](url) links.

    Images go first: a link pattern would otherwise match the tail of every
    image span.
    """
    text = IMAGE_RE.sub(_image, text)
    return LINK_RE.sub(_link, text)


def render_emphasis(text: str) -> str:
    """Render **bold** then *italic*; bold first so its delimiters are gone before italics match."""
    text = BOLD_RE.sub(r'<strong class="blog-bold">\1</strong>', text)
    return ITALIC_RE.sub(r'<em class="blog-italic">\1</em>', text)
