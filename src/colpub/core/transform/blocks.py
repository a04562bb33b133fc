"""Line- and section-level passes: lists, blockquotes/rules, paragraphs"""

import re

from colpub.core.transform.code import BLOCK_TOKEN_RE


UNORDERED_ITEM_RE = re.compile(r'^\s*[-*+]\s+(.+)$')
ORDERED_ITEM_RE   = re.compile(r'^\s*\d+\.\s+(.+)$')
BLOCKQUOTE_RE     = re.compile(r'^>\s+(.+)$', re.MULTILINE)
RULE_RE           = re.compile(r'^---$', re.MULTILINE)
SECTION_SPLIT_RE  = re.compile(r'\n\s*\n')

# Sections starting with a markdown block marker are left alone.
MARKER_START_RE = re.compile(r'^(?:#{1,6}\s|[-*+]\s|\d+\.\s|>\s|```)')
# An opening tag may span lines.
TAG_START_RE = re.compile(r'^<[^>]+>')
# Block-level lines produced by the earlier passes.
GENERATED_BLOCK_RE = re.compile(
    r'^(?:<h[1-6] id="[^"]*" class="blog-heading">'
    r'|<ul class="blog-list">|<ol class="blog-list blog-ordered-list">|</[uo]l>'
    r'|<li class="blog-list-item">|<blockquote class="blog-blockquote">|<hr class="blog-hr">)'
    + r'|' + BLOCK_TOKEN_RE.pattern
)
# Inline elements produced by the earlier passes; these open prose, not raw HTML.
GENERATED_INLINE_RE = re.compile(
    r'^(?:<strong class="blog-bold">|<em class="blog-italic">'
    r'|<a href="[^"]*" class="blog-link"|<img src="[^"]*" alt="[^"]*" class="blog-image")'
)

UL_OPEN = '<ul class="blog-list">'
OL_OPEN = '<ol class="blog-list blog-ordered-list">'


def render_lists(text: str) -> str:
    """Group contiguous runs of `- item` / `1. item` lines into <ul>/<ol> elements.

    Switching marker type closes the open list before opening the other; any
    other line closes whatever is open and passes through unchanged.
    """
    out: list[str] = []
    in_ul = in_ol = False

    for line in text.split('\n'):
        unordered = UNORDERED_ITEM_RE.match(line)
        ordered = None if unordered else ORDERED_ITEM_RE.match(line)

        if unordered:
            if not in_ul:
                if in_ol:
                    out.append('</ol>')
                    in_ol = False
                out.append(UL_OPEN)
                in_ul = True
            out.append(f'<li class="blog-list-item">{unordered.group(1)}</li>')
        elif ordered:
            if not in_ol:
                if in_ul:
                    out.append('</ul>')
                    in_ul = False
                out.append(OL_OPEN)
                in_ol = True
            out.append(f'<li class="blog-list-item">{ordered.group(1)}</li>')
        else:
            if in_ul:
                out.append('</ul>')
                in_ul = False
            if in_ol:
                out.append('</ol>')
                in_ol = False
            out.append(line)

    if in_ul:
        out.append('</ul>')
    if in_ol:
        out.append('</ol>')
    return '\n'.join(out)


def render_block_elements(text: str) -> str:
    """Turn `> quote` lines into one <blockquote> each and bare `---` lines into <hr>."""
    text = BLOCKQUOTE_RE.sub(r'<blockquote class="blog-blockquote">\1</blockquote>', text)
    return RULE_RE.sub('<hr class="blog-hr">', text)


def _is_raw_html(text: str) -> bool:
    """True when text opens with a tag the author wrote rather than one a pass generated."""
    return bool(
        TAG_START_RE.match(text)
        and not GENERATED_BLOCK_RE.match(text)
        and not GENERATED_INLINE_RE.match(text)
    )


def _wrap_section(section: str) -> str:
    """Split a section at generated block lines and wrap the prose runs between them.

    A run that opens with author HTML is passed through untouched.
    """
    out: list[str] = []
    prose: list[str] = []

    def _flush() -> None:
        if prose:
            body = '\n'.join(prose).strip()
            out.append(body if _is_raw_html(body) else f'<p class="blog-paragraph">{body}</p>')
            prose.clear()

    for line in section.split('\n'):
        if GENERATED_BLOCK_RE.match(line.lstrip()):
            _flush()
            out.append(line)
        else:
            prose.append(line)
    _flush()
    return '\n'.join(out)


def render_paragraphs(text: str) -> str:
    """Wrap blank-line separated prose in <p>; block-level markup passes through.

    Runs last: headings, lists, quotes, rules and code blocks have all become
    tags by now, which is what lets prose be told apart from structure.
    Sections opening with author HTML are left exactly as written.
    """
    sections = []
    for section in SECTION_SPLIT_RE.split(text):
        trimmed = section.strip()
        if not trimmed:
            continue
        if MARKER_START_RE.match(trimmed) or _is_raw_html(trimmed):
            sections.append(trimmed)
        else:
            sections.append(_wrap_section(trimmed))
    return '\n\n'.join(sections)
