"""Unit tests for core/parse.py"""

from pathlib import Path

import pytest

from colpub.core.parse import (
    discover_files,
    extract_preview,
    parse_metadata,
    read_document,
    split_tags,
    with_defaults,
)
from colpub.errors import SourceError


def test_parse_metadata_key_values():
    """parse_metadata splits on the first colon and trims the body."""
    text = "---\ntitle: Hello\nurl: http://x.io/a\n---\n\n# Body\n"
    metadata, body = parse_metadata(text)
    assert metadata == {"title": "Hello", "url": "http://x.io/a"}
    assert body == "# Body"


def test_parse_metadata_strips_quotes():
    """One leading and one trailing quote character are removed."""
    text = "---\ntitle: \"Quoted\"\nauthor: 'Single'\n---\nbody\n"
    metadata, _ = parse_metadata(text)
    assert metadata == {"title": "Quoted", "author": "Single"}


def test_parse_metadata_skips_lines_without_colon_or_value():
    """Lines without a colon, blank lines and empty values are ignored."""
    text = "---\njust words\n\nempty:\n: novalue\nkey: v\n---\nbody\n"
    metadata, _ = parse_metadata(text)
    assert metadata == {"key": "v"}


def test_parse_metadata_last_duplicate_wins():
    """Duplicate keys keep the last value."""
    metadata, _ = parse_metadata("---\na: 1\na: 2\n---\nbody\n")
    assert metadata == {"a": "2"}


def test_parse_metadata_absent():
    """Without front matter the trimmed text is the body."""
    metadata, body = parse_metadata("\n  # Title\n\ntext  \n")
    assert metadata == {}
    assert body == "# Title\n\ntext"


def test_parse_metadata_missing_closing_delimiter():
    """An unclosed block is not front matter; the whole text stays body."""
    text = "---\ntitle: Hello\n# Body"
    metadata, body = parse_metadata(text)
    assert metadata == {}
    assert body == text


def test_parse_metadata_not_at_start():
    """Front matter must be anchored at the start of the document."""
    text = "intro\n---\ntitle: x\n---\nbody"
    metadata, _ = parse_metadata(text)
    assert metadata == {}


def test_extract_preview_first_wins_all_removed():
    """The first preview is kept; every preview span is removed from the body."""
    text = "<preview>\n first \n</preview>body<preview>second</preview> end"
    preview, body = extract_preview(text)
    assert preview == "first"
    assert body == "body end"


def test_extract_preview_absent():
    """No preview tags means an empty preview and an untouched body."""
    assert extract_preview("just body") == ("", "just body")


def test_split_tags():
    """Tags are split on commas and trimmed."""
    assert split_tags(" a, b ,c ") == ["a", "b", "c"]


def test_with_defaults_fills_missing(today):
    """Missing well-known keys get their defaults."""
    assert with_defaults({}) == {"title": "Untitled", "date": today, "author": "Anonymous", "tags": []}


def test_with_defaults_order_and_passthrough():
    """Well-known keys lead; extra keys follow in source order as strings."""
    merged = with_defaults({"zeta": "1", "tags": "x, y", "title": "T", "alpha": "2"})
    assert list(merged) == ["title", "date", "author", "tags", "zeta", "alpha"]
    assert merged["tags"] == ["x", "y"]
    assert merged["title"] == "T"


def test_discover_files(tmp_path):
    """discover_files finds .col files recursively and ignores other suffixes."""
    (tmp_path / "a.col").write_text("a")
    (tmp_path / "notes.md").write_text("b")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.col").write_text("b")
    assert discover_files(tmp_path) == [tmp_path / "a.col", sub / "b.col"]
    assert discover_files(tmp_path / "a.col") == [tmp_path / "a.col"]
    assert discover_files(tmp_path / "notes.md") == []
    assert discover_files(tmp_path / "missing") == []


def test_read_document_missing(tmp_path):
    """Reading a missing file raises SourceError, not a parse error."""
    with pytest.raises(SourceError, match="Failed to read"):
        read_document(tmp_path / "nope.col")


def test_read_document_undecodable(tmp_path):
    """Non-UTF-8 bytes raise SourceError."""
    path = tmp_path / "bad.col"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(SourceError):
        read_document(path)
