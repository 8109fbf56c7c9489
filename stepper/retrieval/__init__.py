"""
Retrieval Layer - Weighted lexical article ranking
"""

from stepper.retrieval.scorer import (
    DEFAULT_RESULT_LIMIT,
    LOW_CONFIDENCE_THRESHOLD,
    MatchDetail,
    RetrievalResult,
    filter_articles,
    is_low_confidence,
    score_article,
    search_articles,
)

__all__ = [
    "DEFAULT_RESULT_LIMIT",
    "LOW_CONFIDENCE_THRESHOLD",
    "MatchDetail",
    "RetrievalResult",
    "filter_articles",
    "is_low_confidence",
    "score_article",
    "search_articles",
]
