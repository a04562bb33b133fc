"""Unit tests for core/styles.py"""

import re

from colpub.core.styles import generate_styles


def test_styles_cover_rendered_classes(parser, full_col):
    """Every blog-* class in rendered output has a rule in the stylesheet."""
    content = parser.parse(full_col).content
    used = set(re.findall(r"\bblog-[a-z-]+", content))
    css = generate_styles()
    assert used
    for cls in used:
        assert f".{cls}" in css


def test_styles_static():
    """The stylesheet is the same text on every call."""
    assert generate_styles() == generate_styles()
