"""Reading-time estimate from body word count"""

import math

from mdsite.core.models import ReadingTime


WORDS_PER_MINUTE = 200


def word_count(text: str) -> int:
    """Count whitespace-separated tokens."""
    return len(text.split())


def reading_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> ReadingTime:
    """Minutes to read text, rounded up; 0 for an empty body."""
    if words_per_minute < 1:
        raise ValueError(f"words_per_minute must be >= 1, got {words_per_minute}")
    words = word_count(text)
    minutes = math.ceil(words / words_per_minute)
    return ReadingTime(minutes=minutes, words=words, text=f"{minutes} min read")
