"""
Step Transitions - The Step Runner reducer.

Every operation here is a pure function: it takes the current RunState (plus
the article it applies to) and returns a new RunState together with an
explicit result. Nothing is mutated in place, so each invariant can be checked
on plain values without a live runner.

Invariants kept by these functions:
- current_step_index stays within [0, total steps of the active path].
- active_path is "main" or the id of a fallback on the selected article.
- completed_step_ids only receives the id of the step that was current when
  continue_step was applied, and never shrinks except through reset.
- completed_step_texts records the text of that same step, whichever path
  or article it came from.
"""

from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from ..domain.models import MAIN_PATH, Article, ReasonCategory, Step
from ..matching.dedupe import count_leading_skipped, find_steps_to_skip
from ..matching.similarity import STEP_SIMILARITY_THRESHOLD
from ..state.models import (
    AttemptedPath,
    CompletionSummary,
    FailureRecord,
    RunState,
    utcnow,
)
from .schemas.results import BackResult, ContinueResult, StartResult, SwitchResult


def initial_state() -> RunState:
    return RunState()


def reset(state: RunState) -> RunState:
    """Unconditional return to Idle. The previous state is discarded wholesale."""
    return initial_state()


# ==========================================================================
# Read-only helpers
# ==========================================================================

def get_steps_for_active_path(state: RunState, article: Optional[Article]) -> List[Step]:
    if article is None:
        return []
    return article.steps_for_path(state.active_path)


def get_total_steps(state: RunState, article: Optional[Article]) -> int:
    return len(get_steps_for_active_path(state, article))


def get_current_step(state: RunState, article: Optional[Article]) -> Optional[Step]:
    steps = get_steps_for_active_path(state, article)
    if state.current_step_index >= len(steps):
        return None
    return steps[state.current_step_index]


def is_complete(state: RunState, article: Optional[Article]) -> bool:
    return state.current_step_index >= get_total_steps(state, article)


# ==========================================================================
# Transitions
# ==========================================================================

def start_article(
    state: RunState,
    article_id: str,
    article: Article,
    now: Optional[datetime] = None,
) -> Tuple[RunState, StartResult]:
    """
    Begin the main path of an article at its first step.

    An article with no main steps yields total_steps=0 and no current step;
    callers treat that as immediate completion.
    """
    started = RunState(
        selected_article_id=article_id,
        active_path=MAIN_PATH,
        current_step_index=0,
        attempted_paths=[
            AttemptedPath(path=MAIN_PATH, article_id=article_id, started_at=now or utcnow())
        ],
    )
    return started, StartResult(
        total_steps=get_total_steps(started, article),
        current_step=get_current_step(started, article),
    )


def continue_step(state: RunState, article: Optional[Article]) -> Tuple[RunState, ContinueResult]:
    """Mark the current step completed and move the pointer forward by one."""
    current = get_current_step(state, article)
    if current is None:
        return state, ContinueResult(completed=True)

    completed_ids = list(state.completed_step_ids)
    if current.id not in completed_ids:
        completed_ids.append(current.id)
    completed_texts = list(state.completed_step_texts)
    if current.text not in completed_texts:
        completed_texts.append(current.text)

    advanced = state.model_copy(
        update={
            "completed_step_ids": completed_ids,
            "completed_step_texts": completed_texts,
            "current_step_index": state.current_step_index + 1,
        }
    )
    total = get_total_steps(advanced, article)
    finished = advanced.current_step_index >= total

    return advanced, ContinueResult(
        completed=finished,
        next_step=None if finished else get_current_step(advanced, article),
        current_step_index=advanced.current_step_index,
        total_steps=total,
    )


def back_step(state: RunState) -> Tuple[RunState, BackResult]:
    """Move the pointer back one step. Completions are left untouched."""
    if state.current_step_index <= 0:
        return state, BackResult(success=False, message="Already at first step")

    moved = state.model_copy(update={"current_step_index": state.current_step_index - 1})
    return moved, BackResult(success=True, current_step_index=moved.current_step_index)


def record_failure(
    state: RunState,
    step_id: Optional[str],
    reason_category: str,
    note: str = "",
    now: Optional[datetime] = None,
) -> Tuple[RunState, FailureRecord]:
    """Append a failure to the history. Navigation state is not touched."""
    if isinstance(reason_category, ReasonCategory):
        reason_category = reason_category.value
    failure = FailureRecord(
        step_id=step_id,
        reason_category=reason_category,
        note=note or "",
        timestamp=now or utcnow(),
    )
    updated = state.model_copy(update={"failure_history": [*state.failure_history, failure]})
    return updated, failure


def switch_to_fallback(
    state: RunState,
    fallback_id: str,
    article: Article,
    completed_step_texts: Sequence[str] = (),
    now: Optional[datetime] = None,
    threshold: float = STEP_SIMILARITY_THRESHOLD,
) -> Tuple[RunState, SwitchResult]:
    """
    Make a fallback of article the active path.

    The fallback's steps are deduplicated against completed_step_texts. The
    pointer lands on the first step that is not a duplicate, or past the end
    when every step is one. Only the leading run of duplicates is skipped and
    counted; later duplicates are still presented.

    The selected article becomes article, so a cross-article switch moves the
    article and the path together.
    """
    fallback = article.get_fallback(fallback_id)
    if fallback is None:
        return state, SwitchResult(
            success=False,
            message=f"Fallback '{fallback_id}' not found on article '{article.id}'",
        )

    skip_set = find_steps_to_skip(fallback.steps, completed_step_texts, threshold)
    skipped = count_leading_skipped(skip_set, len(fallback.steps))

    switched = state.model_copy(
        update={
            "selected_article_id": article.id,
            "active_path": fallback.id,
            "current_step_index": skipped,
            "skipped_steps_count": skipped,
            "attempted_paths": [
                *state.attempted_paths,
                AttemptedPath(path=fallback.id, article_id=article.id, started_at=now or utcnow()),
            ],
        }
    )
    return switched, SwitchResult(
        success=True,
        total_steps=len(fallback.steps),
        current_step=get_current_step(switched, article),
        skipped_steps=skipped,
    )


def clear_skipped_steps_count(state: RunState) -> RunState:
    if state.skipped_steps_count == 0:
        return state
    return state.model_copy(update={"skipped_steps_count": 0})


def completion_summary(state: RunState, now: Optional[datetime] = None) -> CompletionSummary:
    return CompletionSummary(
        completed_steps=list(state.completed_step_ids),
        failure_history=list(state.failure_history),
        attempted_paths=list(state.attempted_paths),
        completed_at=now or utcnow(),
    )
