"""
Matching Layer - Tokenization, Similarity and Deduplication
"""

from stepper.matching.similarity import (
    STEP_SIMILARITY_THRESHOLD,
    are_similar,
    jaccard,
    keyword_overlap,
    normalize,
)
from stepper.matching.dedupe import count_leading_skipped, find_steps_to_skip

__all__ = [
    "STEP_SIMILARITY_THRESHOLD",
    "are_similar",
    "jaccard",
    "keyword_overlap",
    "normalize",
    "count_leading_skipped",
    "find_steps_to_skip",
]
