"""
Engine - Step Runner

The StepRunner is the deterministic state machine that walks a user through
one troubleshooting article. It owns exactly one RunState per session and
replaces it with the output of a pure transition on every call.
-----------------------------------------------

Phases:
    IDLE      no article selected (initial, and after reset)
    ACTIVE    the pointer is on a step of the active path
    COMPLETE  the pointer is past the last step of the active path

One runner serves one session. It is not meant to be shared between callers.
"""

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from ..domain.models import Article, Step
from ..matching.similarity import STEP_SIMILARITY_THRESHOLD
from ..state.models import CompletionSummary, FailureRecord, RunState
from . import transitions
from .fallback import select_fallback
from .schemas.results import (
    BackResult,
    ContinueResult,
    FallbackSelection,
    StartResult,
    SwitchResult,
)
from .schemas.state_machine import RunnerPhase, derive_phase

logger = logging.getLogger(__name__)


class StepRunner:
    def __init__(self, similarity_threshold: float = STEP_SIMILARITY_THRESHOLD):
        self.similarity_threshold = similarity_threshold
        self.state: RunState = transitions.initial_state()

    def reset(self) -> None:
        self.state = transitions.reset(self.state)

    # ==========================================================================
    # Navigation
    # ==========================================================================

    def start_article(
        self, article_id: str, article: Article, now: Optional[datetime] = None
    ) -> StartResult:
        self.state, result = transitions.start_article(self.state, article_id, article, now)
        logger.info(f"Started article '{article_id}' with {result.total_steps} main steps")
        return result

    def continue_step(self, article: Optional[Article]) -> ContinueResult:
        self.state, result = transitions.continue_step(self.state, article)
        logger.debug(
            f"Continue on path '{self.state.active_path}': "
            f"index={self.state.current_step_index} completed={result.completed}"
        )
        return result

    def back(self) -> BackResult:
        self.state, result = transitions.back_step(self.state)
        return result

    # ==========================================================================
    # Failures & Fallbacks
    # ==========================================================================

    def record_failure(
        self,
        step_id: Optional[str],
        reason_category: str,
        note: str = "",
        now: Optional[datetime] = None,
    ) -> FailureRecord:
        self.state, failure = transitions.record_failure(
            self.state, step_id, reason_category, note, now
        )
        logger.info(f"Failure recorded on step '{step_id}' ({failure.reason_category})")
        return failure

    def select_fallback(
        self,
        current_article: Article,
        all_articles: Sequence[Article],
        reason_category: str,
        failure_note: str = "",
    ) -> FallbackSelection:
        return select_fallback(current_article, all_articles, reason_category, failure_note)

    def switch_to_fallback(
        self,
        fallback_id: str,
        article: Article,
        completed_step_texts: Sequence[str] = (),
        now: Optional[datetime] = None,
    ) -> SwitchResult:
        self.state, result = transitions.switch_to_fallback(
            self.state,
            fallback_id,
            article,
            completed_step_texts,
            now=now,
            threshold=self.similarity_threshold,
        )
        if result.success:
            logger.info(
                f"Switched to fallback '{fallback_id}' of article '{article.id}', "
                f"skipping {result.skipped_steps} of {result.total_steps} steps"
            )
        else:
            logger.warning(result.message)
        return result

    def get_skipped_steps_count(self) -> int:
        return self.state.skipped_steps_count

    def clear_skipped_steps_count(self) -> None:
        self.state = transitions.clear_skipped_steps_count(self.state)

    # ==========================================================================
    # Queries
    # ==========================================================================

    def get_steps_for_active_path(self, article: Optional[Article]) -> List[Step]:
        return transitions.get_steps_for_active_path(self.state, article)

    def get_total_steps(self, article: Optional[Article]) -> int:
        return transitions.get_total_steps(self.state, article)

    def get_current_step(self, article: Optional[Article]) -> Optional[Step]:
        return transitions.get_current_step(self.state, article)

    def is_complete(self, article: Optional[Article]) -> bool:
        return transitions.is_complete(self.state, article)

    def phase(self, article: Optional[Article]) -> RunnerPhase:
        return derive_phase(self.state, article)

    def get_state(self) -> RunState:
        return self.state

    def get_completion_summary(self, now: Optional[datetime] = None) -> CompletionSummary:
        return transitions.completion_summary(self.state, now)
