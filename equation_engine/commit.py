"""Equation Engine commit controller.

Decides what happens when the user presses Enter:

    * blank live input      – ignored, nothing changes, no message
    * invalid state         – rejected, canvas and live input kept
    * valid / inter state   – live input classified with fresh ids,
                              appended to the canvas, live input cleared

The canvas passed in is never mutated; a new list is returned, so the
caller applies canvas and live input together or not at all.
"""

from typing import Callable, List, NamedTuple, Optional, Sequence

from .classifier import create_elements
from .elements import Element
from .evaluator import explain
from .grammar import ExpressionState

REJECT_PREFIX = "Cannot commit: "


class CommitResult(NamedTuple):
    canvas: List[Element]
    live_input: str
    message: Optional[str]
    committed: bool


def commit(
    canvas: Sequence[Element],
    live_input: str,
    current_state: ExpressionState,
    new_id: Optional[Callable[[], str]] = None,
) -> CommitResult:
    if not live_input.strip():
        return CommitResult(list(canvas), live_input, None, False)

    created: List[Element] = []
    if current_state != ExpressionState.INVALID:
        created = create_elements(live_input, new_id)

    # a stale "valid" state with input that no longer classifies is rejected too
    if not created:
        reason = explain(canvas, live_input) or "state is invalid"
        return CommitResult(list(canvas), live_input, REJECT_PREFIX + reason, False)

    return CommitResult(list(canvas) + created, "", None, True)


def reset() -> CommitResult:
    return CommitResult([], "", None, False)
