"""
Text helpers shared by the content analyzers.
"""

import math
import re
from collections import Counter
from typing import List

SENTENCE_SPLIT = re.compile(r"[.!?]+")
TOPIC_WORD = re.compile(r"\b[a-z]{4,}\b")

CONTEXT_RADIUS = 50


def extract_sentences(content: str, min_length: int = 10) -> List[str]:
    """Split on terminal punctuation and drop short fragments."""
    sentences = (s.strip() for s in SENTENCE_SPLIT.split(content or ""))
    return [s for s in sentences if len(s) > min_length]


def extract_context(content: str, position: int, length: int, radius: int = CONTEXT_RADIUS) -> str:
    """Window of text around a match."""
    start = max(0, position - radius)
    end = min(len(content), position + length + radius)
    return content[start:end]


def extract_topics(text: str, limit: int = 5) -> List[str]:
    """
    Most frequent words of 4+ letters, most frequent first.

    Ties keep first-occurrence order.
    """
    words = TOPIC_WORD.findall(text.lower())
    return [word for word, _ in Counter(words).most_common(limit)]


def count_words(content: str) -> int:
    return len((content or "").split())


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores."""
    return int(math.floor(value + 0.5))
