"""Textual HTML sanitizer and the escaping primitive for embedded user text"""

import re


HTML_ENTITIES: dict[str, str] = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#39;',
}

# Raw HTML authors may pass through. Recorded but not enforced: only scripts,
# inline event handlers and javascript: URIs are stripped.
ALLOWED_TAGS: frozenset[str] = frozenset({
    'p', 'div', 'span', 'a', 'img', 'br', 'hr', 'em', 'strong', 'i', 'b',
    'ul', 'ol', 'li', 'blockquote', 'code', 'pre', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'table', 'thead', 'tbody', 'tr', 'th', 'td', 'preview',
})

ESCAPE_RE        = re.compile(r'[&<>"\']')
SCRIPT_RE        = re.compile(r'<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>', re.IGNORECASE)
EVENT_HANDLER_RE = re.compile(r'\son\w+\s*=\s*["\'][^"\']*["\']', re.IGNORECASE)
JS_URI_RE        = re.compile(r'javascript:', re.IGNORECASE)


def escape_html(text: str) -> str:
    """Replace the five XML-significant characters with entities; '' for empty/non-str."""
    if not text or not isinstance(text, str):
        return ''
    return ESCAPE_RE.sub(lambda m: HTML_ENTITIES[m.group(0)], text)


def sanitize_html(html: str) -> str:
    """Strip <script> elements, on* handler attributes and javascript: from raw HTML.

    Best-effort and textual: runs before any markup is generated, so it only
    ever touches HTML the author wrote into the document.
    """
    if not html or not isinstance(html, str):
        return ''
    html = SCRIPT_RE.sub('', html)
    html = EVENT_HANDLER_RE.sub('', html)
    return JS_URI_RE.sub('', html)
