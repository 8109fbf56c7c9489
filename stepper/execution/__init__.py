"""
Execution Layer - Step Running and Fallback Resolution

Defines the StepRunner (deterministic state machine over a RunState) and the
Fallback Selector that picks a replacement path after a failed step.
"""

from stepper.execution.engine import StepRunner
from stepper.execution.fallback import (
    find_fallback_across_articles,
    find_fallback_in_article,
    select_fallback,
)


__all__ = [
    "StepRunner",
    "find_fallback_across_articles",
    "find_fallback_in_article",
    "select_fallback",
]
