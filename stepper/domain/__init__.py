"""
Domain Layer - Static Data Models

Defines the core domain model representing the static structure of
troubleshooting articles: Articles, Steps, Fallbacks and Escalations.
"""

from stepper.domain.models import (
    MAIN_PATH,
    Article,
    Escalation,
    Fallback,
    ReasonCategory,
    Step,
    StepType,
)

__all__ = [
    "MAIN_PATH",
    "Article",
    "Escalation",
    "Fallback",
    "ReasonCategory",
    "Step",
    "StepType",
]
