"""Fenced and inline code rendering, plus the shield that keeps code opaque

Runs before every other body pass: code text is escaped here and then hidden
behind tokens, so later passes never see `*`, `#`, list markers or blank
lines that belong to code.
"""

import re

from colpub.core.sanitize import escape_html


# Fenced blocks win over inline spans at the same position; backticks inside
# a fenced block are never re-read as inline code.
CODE_RE = re.compile(r'```(\w*)\n(.*?)```|`([^`]+)`', re.DOTALL)

RENDERED_CODE_RE = re.compile(
    r'<pre class="blog-code-block">.*?</pre>|<code class="blog-inline-code">.*?</code>',
    re.DOTALL,
)
# Block tokens look like a tag so paragraph wrapping keeps them apart from
# prose; inline tokens stay bare so they sit inside the surrounding paragraph.
BLOCK_TOKEN  = '<\ue000{}\ue000>'
INLINE_TOKEN = '\ue001{}\ue001'
TOKEN_RE = re.compile('<\ue000(\\d+)\ue000>|\ue001(\\d+)\ue001')
BLOCK_TOKEN_RE = re.compile('<\ue000\\d+\ue000>')


def _render(m: re.Match) -> str:
    language, block, inline = m.groups()
    if block is None:
        return f'<code class="blog-inline-code">{escape_html(inline)}</code>'
    lang_class = f" language-{language}" if language else ''
    return (
        f'<pre class="blog-code-block"><code class="blog-code{lang_class}">'
        f'{escape_html(block.strip())}</code></pre>'
    )


def render_code(text: str) -> str:
    """Replace ```lang fenced blocks and `inline` spans with escaped code markup."""
    return CODE_RE.sub(_render, text)


class CodeShield:
    """Swaps rendered code elements for opaque tokens and back.

    One instance per parse call; the stash never outlives it.
    """

    def __init__(self) -> None:
        self._stash: list[str] = []

    def _store(self, m: re.Match) -> str:
        self._stash.append(m.group(0))
        token = BLOCK_TOKEN if m.group(0).startswith('<pre') else INLINE_TOKEN
        return token.format(len(self._stash) - 1)

    def _restore(self, m: re.Match) -> str:
        index = int(m.group(1) or m.group(2))
        return self._stash[index] if index < len(self._stash) else m.group(0)

    def hide(self, text: str) -> str:
        return RENDERED_CODE_RE.sub(self._store, text)

    def reveal(self, text: str) -> str:
        return TOKEN_RE.sub(self._restore, text)
