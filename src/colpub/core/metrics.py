"""Word count and reading-time estimates over rendered HTML"""

import math
import re


TAG_RE = re.compile(r'<[^>]*>')
WORDS_PER_MINUTE = 200


def count_words(html: str) -> int:
    """Count whitespace-separated words in html with all tags stripped."""
    text = TAG_RE.sub('', html).strip()
    return len(text.split()) if text else 0


def estimate_read_time(word_count: int, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Minutes to read word_count words, rounded up, never less than 1."""
    return max(1, math.ceil(word_count / words_per_minute))
