"""Unit tests for core/utils/slug.py"""

import pytest

from colpub.core.utils.slug import slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-ch-rs"),
    ("Café au lait", "caf-au-lait"),
    ("!!!", ""),
    ("", ""),
])
def test_slugify(text, expected):
    """slugify lowercases and collapses non-alphanumeric runs into hyphens."""
    assert slugify(text) == expected
