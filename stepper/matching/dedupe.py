"""
Step deduplication.

Decides which steps of a path the user has effectively already performed,
by comparing whole step texts against the texts of completed steps.
"""

from typing import Iterable, List, Sequence, Set

from ..domain.models import Step
from .similarity import STEP_SIMILARITY_THRESHOLD, are_similar


def find_steps_to_skip(
    candidate_steps: Sequence[Step],
    completed_step_texts: Iterable[str],
    threshold: float = STEP_SIMILARITY_THRESHOLD,
) -> Set[int]:
    """Indices of candidate steps similar to any completed step text."""
    completed: List[str] = list(completed_step_texts)
    return {
        index
        for index, step in enumerate(candidate_steps)
        if any(are_similar(step.text, done, threshold) for done in completed)
    }


def count_leading_skipped(skip_set: Set[int], total: int) -> int:
    """
    Length of the contiguous run of skipped indices starting at 0.

    A similar step that appears after a non-similar one is not counted, so it
    is still presented to the user.
    """
    count = 0
    while count < total and count in skip_set:
        count += 1
    return count
