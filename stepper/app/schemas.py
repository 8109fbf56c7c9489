"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
"""

from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, Field

from ..domain.models import ReasonCategory, Step


class CreateSessionResponse(BaseModel):
    session_id: str


class StartArticleRequest(BaseModel):
    article_id: str


class FailureReport(BaseModel):
    reason_category: ReasonCategory
    note: str = ""


class ArticleCard(BaseModel):
    """Short form of an article for disambiguation lists."""
    id: str
    title: str
    summary: str
    product: str
    total_steps: int
    score: int


class SearchResponse(BaseModel):
    results: List[ArticleCard]
    low_confidence: bool


class SessionRead(BaseModel):
    session_id: str
    status: str
    selected_article_id: Optional[str] = None
    active_path: str
    current_step_index: int
    total_steps: int
    current_step: Optional[Step] = None
    completed_step_ids: List[str] = Field(default_factory=list)
    updated_at: datetime
