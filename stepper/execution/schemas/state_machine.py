"""
Runner Phases - FSM State Definitions

Type definitions for the step runner state machine.
Idle -> Active -> Complete; reset returns to Idle from anywhere.
"""

from enum import Enum, auto

from ...domain.models import Article
from ...state.models import RunState


class RunnerPhase(Enum):
    """
    Where the runner is, derived from the RunState and the article it runs.
    """

    IDLE = auto()  # No article selected.
    ACTIVE = auto()  # The pointer is on a step of the active path.
    COMPLETE = auto()  # The pointer is past the last step of the active path.


def derive_phase(state: RunState, article: Article | None) -> RunnerPhase:
    if state.is_idle or article is None:
        return RunnerPhase.IDLE
    total = len(article.steps_for_path(state.active_path))
    if state.current_step_index >= total:
        return RunnerPhase.COMPLETE
    return RunnerPhase.ACTIVE
