"""
Domain Layer - Static Data Models

This module defines the core domain model representing the static structure
of troubleshooting articles: Articles, their main Step path, alternative
Fallback paths and the terminal Escalation record.

Articles are supplied by the knowledge-base collaborator and are immutable
once loaded. Structural validation happens here, at load time, so the
execution layer can assume well-formed input.
"""

from enum import Enum
from typing import Literal, Optional, List

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

MAIN_PATH = "main"

"""
StepType classifies step behavior:
- action: The user performs something (click, restart, reconfigure)
- check: The user verifies a condition without changing anything
"""
StepType = Literal["action", "check"]


class ReasonCategory(str, Enum):
    """
    Closed set of reasons a user can give for a failed step.
    Fallbacks are tagged with one of these; the failure report carries one.
    """
    CANT_FIND_OPTION = "cant-find-option"
    SYSTEM_ERROR = "system-error"
    PERMISSION_ISSUE = "permission-issue"
    NO_CHANGE = "no-change"
    OTHER = "other"


class Step(BaseModel):
    """
    Fundamental unit of work in a troubleshooting article.

    Attributes:
        id: Unique identifier within the owning path (main or a fallback).
        text: Instruction shown to the user. Also the input to deduplication.
        expected_result: What the user should observe once the step is done.
        type: Optional StepType tag.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    text: str
    expected_result: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("expected_result", "expectedResult"),
    )
    type: Optional[StepType] = None


class Fallback(BaseModel):
    """
    Alternative step sequence used when the main path fails.

    Attributes:
        id: Unique within its article. Used as the active path tag.
        reason_category: The failure reason this path answers.
        trigger_keywords: Keywords that tip the choice between fallbacks
            sharing the same reason category.
        steps: The fallback's own ordered path.
        condition: Human-readable description of when the path applies.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    reason_category: ReasonCategory
    trigger_keywords: List[str] = Field(default_factory=list)
    steps: List[Step] = Field(default_factory=list)
    condition: Optional[str] = None

    @field_validator("id")
    @classmethod
    def _not_main(cls, value: str) -> str:
        if value == MAIN_PATH:
            raise ValueError(f"Fallback id may not be the reserved path tag '{MAIN_PATH}'")
        return value

    @model_validator(mode="after")
    def _unique_step_ids(self) -> "Fallback":
        _ensure_unique([s.id for s in self.steps], f"step id in fallback '{self.id}'")
        return self


class Escalation(BaseModel):
    """Terminal guidance returned when no automated fallback exists."""
    model_config = ConfigDict(frozen=True)

    when: str
    target: str


class Article(BaseModel):
    """
    A structured troubleshooting document.

    Article ids are always strings. Numeric ids found in older corpora are
    coerced to their decimal form so lookups never depend on the source type.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    title: str
    tags: List[str] = Field(default_factory=list)
    product: str = ""
    version: Optional[str] = None
    summary: str = ""
    keywords: List[str] = Field(default_factory=list)
    prechecks: List[str] = Field(default_factory=list)
    steps: List[Step] = Field(default_factory=list)
    fallbacks: List[Fallback] = Field(default_factory=list)
    stop_conditions: List[str] = Field(default_factory=list)
    escalation: Escalation

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        if isinstance(value, bool):
            raise ValueError("Article id must be a string or an integer")
        if isinstance(value, int):
            return str(value)
        return value

    @model_validator(mode="after")
    def _unique_ids(self) -> "Article":
        _ensure_unique([s.id for s in self.steps], f"main step id in article '{self.id}'")
        _ensure_unique([f.id for f in self.fallbacks], f"fallback id in article '{self.id}'")
        return self

    def get_fallback(self, fallback_id: str) -> Optional[Fallback]:
        return next((fb for fb in self.fallbacks if fb.id == fallback_id), None)

    def steps_for_path(self, path: str) -> List[Step]:
        """Steps of the main path or of the named fallback (empty if unknown)."""
        if path == MAIN_PATH:
            return self.steps
        fallback = self.get_fallback(path)
        return fallback.steps if fallback else []


def _ensure_unique(ids: List[str], label: str) -> None:
    seen = set()
    for item in ids:
        if item in seen:
            raise ValueError(f"Duplicate {label}: '{item}'")
        seen.add(item)
