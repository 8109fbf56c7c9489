"""
Transition Results - What each runner operation reports back.

Out-of-bounds navigation and missing fallbacks are represented here as data,
never raised.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from ...domain.models import Article, Escalation, Fallback, Step


class StartResult(BaseModel):
    total_steps: int
    current_step: Optional[Step] = None


class ContinueResult(BaseModel):
    """
    completed is True when the pointer has moved past the last step.
    A continue issued while already complete only carries completed=True.
    """
    completed: bool
    next_step: Optional[Step] = None
    current_step_index: Optional[int] = None
    total_steps: Optional[int] = None


class BackResult(BaseModel):
    success: bool
    current_step_index: Optional[int] = None
    message: Optional[str] = None


class SwitchResult(BaseModel):
    """
    skipped_steps counts only the leading run of steps deduplicated against
    completed work.
    """
    success: bool
    total_steps: int = 0
    current_step: Optional[Step] = None
    skipped_steps: int = 0
    message: Optional[str] = None


class SameArticleFallback(BaseModel):
    type: Literal["same-article"] = "same-article"
    fallback: Fallback
    article: Article


class CrossArticleFallback(BaseModel):
    type: Literal["cross-article"] = "cross-article"
    fallback: Fallback
    article: Article


class EscalationResult(BaseModel):
    """Terminal: no further automation is possible."""
    type: Literal["escalation"] = "escalation"
    escalation: Escalation


FallbackSelection = Annotated[
    Union[SameArticleFallback, CrossArticleFallback, EscalationResult],
    Field(discriminator="type"),
]
