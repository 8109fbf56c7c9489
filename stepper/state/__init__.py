"""
State Layer - Runtime Data Models

Defines the runtime state model that tracks user progress through
a troubleshooting article, including completions, failures and paths tried.
"""

from stepper.state.models import (
    AttemptedPath,
    CompletionSummary,
    FailureRecord,
    RunState,
)

__all__ = [
    "AttemptedPath",
    "CompletionSummary",
    "FailureRecord",
    "RunState",
]
