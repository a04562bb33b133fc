"""Unit tests for core/metrics.py"""

import pytest

from colpub.core.metrics import count_words, estimate_read_time


def test_count_words_strips_tags():
    """Tags are removed before words are counted."""
    assert count_words('<p class="x">Hello <b>big</b>\n world</p>') == 3


@pytest.mark.parametrize("html", ["", "   ", "<p></p>", "<hr class=\"blog-hr\">"])
def test_count_words_empty(html):
    """Content with no text counts zero words."""
    assert count_words(html) == 0


@pytest.mark.parametrize("words,minutes", [(0, 1), (1, 1), (200, 1), (201, 2), (1000, 5)])
def test_estimate_read_time(words, minutes):
    """Read time rounds up at 200 words per minute with a floor of one minute."""
    assert estimate_read_time(words) == minutes


def test_estimate_read_time_custom_speed():
    """A custom reading speed is honoured."""
    assert estimate_read_time(10, words_per_minute=4) == 3
