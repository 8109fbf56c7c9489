"""
Lexical similarity primitives.

Pure functions used by retrieval, fallback selection and step deduplication.
Matching is token based: text is lower-cased, everything that is not a letter
or digit becomes a separator, and comparisons work on the resulting tokens.
"""

import re
from typing import Iterable, List

STEP_SIMILARITY_THRESHOLD = 0.6

_SEPARATORS = re.compile(r"[^0-9a-z]+")


def normalize(text: str) -> List[str]:
    """
    Normalize text into tokens.

    Example: "Verify SMTP Server (port 587)!" -> ["verify", "smtp", "server", "port", "587"]
    """
    if not text:
        return []
    return [token for token in _SEPARATORS.sub(" ", text.lower()).split() if token]


def jaccard(tokens_a: Iterable[str], tokens_b: Iterable[str]) -> float:
    """Size of the intersection over size of the union. 0.0 when both are empty."""
    set_a = set(tokens_a)
    set_b = set(tokens_b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


def are_similar(text_a: str, text_b: str, threshold: float = STEP_SIMILARITY_THRESHOLD) -> bool:
    """True for identical texts, or when token Jaccard is strictly above threshold."""
    if text_a == text_b:
        return True
    return jaccard(normalize(text_a), normalize(text_b)) > threshold


def keyword_overlap(trigger_keywords: Iterable[str], query_tokens: Iterable[str]) -> int:
    """Count trigger keywords that appear as whole tokens in query_tokens."""
    query_set = set(query_tokens)
    if not query_set:
        return 0
    return sum(1 for keyword in trigger_keywords if keyword.lower() in query_set)
