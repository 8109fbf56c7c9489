"""
Stepper

Guides a user through a troubleshooting article one step at a time. When a
step fails it deterministically finds a better alternative path and skips
steps the user has effectively already performed.
"""

from stepper.domain import (
    MAIN_PATH,
    Article,
    Escalation,
    Fallback,
    ReasonCategory,
    Step,
    StepType,
)
from stepper.state import (
    AttemptedPath,
    CompletionSummary,
    FailureRecord,
    RunState,
)
from stepper.matching import are_similar, find_steps_to_skip, jaccard, normalize
from stepper.retrieval import RetrievalResult, is_low_confidence, search_articles
from stepper.execution import StepRunner, select_fallback

__all__ = [
    # Domain Layer
    "MAIN_PATH",
    "Article",
    "Escalation",
    "Fallback",
    "ReasonCategory",
    "Step",
    "StepType",
    # State Layer
    "AttemptedPath",
    "CompletionSummary",
    "FailureRecord",
    "RunState",
    # Matching & Retrieval
    "are_similar",
    "find_steps_to_skip",
    "jaccard",
    "normalize",
    "RetrievalResult",
    "is_low_confidence",
    "search_articles",
    # Execution Layer
    "StepRunner",
    "select_fallback",
]
