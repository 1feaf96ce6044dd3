"""Read time estimation."""

import math
import re


WORDS_PER_MINUTE = 200
WHITESPACE_PATTERN = re.compile(r"\s+")


def estimate_read_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> str:
    """Estimate reading time as "{n} min read".

    Empty or whitespace-only text still counts as one word, so the result
    is never below "1 min read".
    """
    word_count = len(WHITESPACE_PATTERN.split(text.strip()))
    minutes = math.ceil(word_count / words_per_minute)
    return f"{minutes} min read"
