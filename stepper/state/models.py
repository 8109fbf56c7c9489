"""
State Layer - Runtime Data Models

This module defines the runtime state that tracks one user's progress through
a troubleshooting article. A RunState is a frozen value: every transition in
the execution layer returns a new RunState rather than mutating the old one.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain.models import MAIN_PATH


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AttemptedPath(BaseModel):
    """A path (main or fallback id) the user was put on, and when."""
    model_config = ConfigDict(frozen=True)

    path: str
    article_id: Optional[str] = None
    started_at: datetime


class FailureRecord(BaseModel):
    """A step the user reported as failed."""
    model_config = ConfigDict(frozen=True)

    step_id: Optional[str]
    reason_category: str
    note: str = ""
    timestamp: datetime


class RunState(BaseModel):
    """
    The complete, session-scoped state of a Step Runner.

    completed_step_ids is an ordered ledger without duplicates: it only grows,
    and only a full reset empties it. Step ids are only unique within a path,
    so completed_step_texts keeps the text of every step the user completed,
    on any path of any article, for deduplicating later fallbacks.
    """
    model_config = ConfigDict(frozen=True)

    selected_article_id: Optional[str] = None
    active_path: str = MAIN_PATH
    current_step_index: int = Field(default=0, ge=0)
    completed_step_ids: List[str] = Field(default_factory=list)
    completed_step_texts: List[str] = Field(default_factory=list)
    attempted_paths: List[AttemptedPath] = Field(default_factory=list)
    failure_history: List[FailureRecord] = Field(default_factory=list)
    skipped_steps_count: int = Field(default=0, ge=0)

    @property
    def is_idle(self) -> bool:
        return self.selected_article_id is None


class CompletionSummary(BaseModel):
    """Terminal summary shown to the user once a path is complete."""
    completed_steps: List[str]
    failure_history: List[FailureRecord]
    attempted_paths: List[AttemptedPath]
    completed_at: datetime
