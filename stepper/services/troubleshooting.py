"""
Troubleshooting Service - Application Orchestration Layer

This service is the entry point for all session operations. It orchestrates
the interaction between the Data Layer (Repositories), the Logic Layer
(StepRunner / Fallback Selector) and the API. It ensures that sessions are
loaded, advanced and saved correctly, and it carries out the failure protocol:
record the failure, select a fallback, then switch to it or escalate.
"""

import logging
from typing import List, Literal, Optional

from pydantic import BaseModel

from ..domain.models import Article, Escalation, Fallback, Step
from ..execution.schemas.results import (
    BackResult,
    ContinueResult,
    EscalationResult,
    StartResult,
    SwitchResult,
)
from ..repositories.article import ArticleRepository
from ..repositories.session import SessionRepository, TroubleshootingSession
from ..retrieval.scorer import (
    DEFAULT_RESULT_LIMIT,
    LOW_CONFIDENCE_THRESHOLD,
    RetrievalResult,
    is_low_confidence,
)
from ..state.models import CompletionSummary, FailureRecord
from .exceptions import ArticleNotFoundError, NoActiveArticleError, SessionNotFoundError

logger = logging.getLogger(__name__)


class SearchOutcome(BaseModel):
    results: List[RetrievalResult]
    low_confidence: bool


class FailureOutcome(BaseModel):
    """
    What happened after a failed step was reported.

    type mirrors the fallback selection: "same-article", "cross-article" or
    "escalation". For the first two, switch holds the switch result and
    skipped_steps the number of leading steps skipped as already done.
    """
    type: Literal["same-article", "cross-article", "escalation"]
    failure: FailureRecord
    article: Optional[Article] = None
    fallback: Optional[Fallback] = None
    switch: Optional[SwitchResult] = None
    skipped_steps: int = 0
    escalation: Optional[Escalation] = None
    message: str


class TroubleshootingService:
    def __init__(
        self,
        session_repository: SessionRepository,
        article_repository: ArticleRepository,
        search_limit: int = DEFAULT_RESULT_LIMIT,
        low_confidence_threshold: int = LOW_CONFIDENCE_THRESHOLD,
    ):
        self.session_repo = session_repository
        self.article_repo = article_repository
        self.search_limit = search_limit
        self.low_confidence_threshold = low_confidence_threshold

    # ==========================================================================
    # Sessions
    # ==========================================================================

    def create_session(self) -> TroubleshootingSession:
        """Creates a new idle session."""
        return self.session_repo.create()

    def get_session(self, session_id: str) -> Optional[TroubleshootingSession]:
        return self.session_repo.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        return self.session_repo.delete(session_id)

    # ==========================================================================
    # Retrieval
    # ==========================================================================

    def search(self, query: str, limit: Optional[int] = None) -> SearchOutcome:
        results = self.article_repo.search(query, limit=limit or self.search_limit)
        low_confidence = is_low_confidence(results, self.low_confidence_threshold)
        if not results:
            logger.warning(f"No article matched query '{query}'")
        return SearchOutcome(results=results, low_confidence=low_confidence)

    # ==========================================================================
    # Navigation
    # ==========================================================================

    def start_article(self, session_id: str, article_id: str) -> StartResult:
        session = self._load_session(session_id)
        article = self.article_repo.get_article(article_id)
        if article is None:
            raise ArticleNotFoundError(f"Article '{article_id}' not found")

        result = session.runner.start_article(article.id, article)
        self.session_repo.save(session)
        return result

    def continue_step(self, session_id: str) -> ContinueResult:
        session = self._load_session(session_id)
        article = self._selected_article(session)
        result = session.runner.continue_step(article)
        self.session_repo.save(session)
        return result

    def back_step(self, session_id: str) -> BackResult:
        session = self._load_session(session_id)
        result = session.runner.back()
        self.session_repo.save(session)
        return result

    def reset(self, session_id: str) -> None:
        session = self._load_session(session_id)
        session.runner.reset()
        self.session_repo.save(session)

    def selected_article(self, session_id: str) -> Optional[Article]:
        """The article the session is on, or None while the session is idle."""
        session = self._load_session(session_id)
        if session.runner.state.is_idle:
            return None
        return self._selected_article(session)

    def current_step(self, session_id: str) -> Optional[Step]:
        """An idle session has no current step."""
        session = self._load_session(session_id)
        if session.runner.state.is_idle:
            return None
        return session.runner.get_current_step(self._selected_article(session))

    def is_complete(self, session_id: str) -> bool:
        session = self._load_session(session_id)
        article = self._selected_article(session)
        return session.runner.is_complete(article)

    def get_summary(self, session_id: str) -> CompletionSummary:
        session = self._load_session(session_id)
        return session.runner.get_completion_summary()

    # ==========================================================================
    # Failure Protocol
    # ==========================================================================

    def report_failure(self, session_id: str, reason_category: str, note: str = "") -> FailureOutcome:
        """
        The failure protocol:
        1. Record the failure against the current step
        2. Gather the texts of completed steps
        3. Select a fallback (same article -> other articles -> escalation)
        4. Switch to it, or hand back the escalation guidance
        """
        session = self._load_session(session_id)
        runner = session.runner
        article = self._selected_article(session)

        # 1. Record
        current = runner.get_current_step(article)
        failure = runner.record_failure(current.id if current else None, reason_category, note)

        # 2. Completed work, for deduplication
        completed_texts = list(runner.state.completed_step_texts)

        # 3. Select
        selection = runner.select_fallback(
            article, self.article_repo.get_all_articles(), reason_category, note
        )

        # 4. Escalate
        if isinstance(selection, EscalationResult):
            self.session_repo.save(session)
            escalation = selection.escalation
            return FailureOutcome(
                type=selection.type,
                failure=failure,
                escalation=escalation,
                message=(
                    "No automated solution available. Escalation required:\n"
                    f"When: {escalation.when}\nTarget: {escalation.target}"
                ),
            )

        # 4. Switch
        switch = runner.switch_to_fallback(selection.fallback.id, selection.article, completed_texts)
        skipped = runner.get_skipped_steps_count()
        runner.clear_skipped_steps_count()
        self.session_repo.save(session)

        return FailureOutcome(
            type=selection.type,
            failure=failure,
            article=selection.article,
            fallback=selection.fallback,
            switch=switch,
            skipped_steps=skipped,
            message=self._switch_message(selection.type, selection.article, selection.fallback, skipped),
        )

    # ==========================================================================
    # Standard Helpers
    # ==========================================================================

    def _load_session(self, session_id: str) -> TroubleshootingSession:
        session = self.session_repo.get(session_id)
        if not session:
            raise SessionNotFoundError(f"Session {session_id} not found")
        return session

    def _selected_article(self, session: TroubleshootingSession) -> Article:
        article_id = session.runner.state.selected_article_id
        if article_id is None:
            raise NoActiveArticleError(f"Session {session.session_id} has no article selected")
        article = self.article_repo.get_article(article_id)
        if article is None:
            raise ArticleNotFoundError(f"Article '{article_id}' not found")
        return article

    def _switch_message(self, selection_type: str, article: Article, fallback: Fallback, skipped: int) -> str:
        if selection_type == "cross-article":
            message = f'I found an alternative solution in "{article.title}". Let\'s try that approach.'
        else:
            message = f"Switching to alternative approach: {fallback.condition or fallback.id}."
        if skipped > 0:
            message += f" Skipping {skipped} step(s) already completed."
        return message
