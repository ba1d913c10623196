"""Equation Engine expression-state evaluator.

Per-keystroke entry point. Combines the committed canvas with the
live, uncommitted input and reports one of valid / inter / invalid.
The live input is re-parsed from scratch on every call; it is short
because every successful commit clears it.
"""

from typing import List, Optional, Sequence

from .classifier import parse_input, parse_tokens
from .elements import Element, is_element, is_operation
from .errors import ExpressionError
from .grammar import ExpressionState, check_sequence, sequence_state
from .tokenizer import tokenize


def evaluate_state(canvas: Sequence[Element], live_input: str) -> ExpressionState:
    """Return the state of ``canvas`` followed by the parsed ``live_input``."""
    parsed = parse_input(live_input)
    if not parsed.is_valid:
        return ExpressionState.INVALID
    combined: List[Element] = list(canvas) + parsed.elements
    return sequence_state(combined)


def is_valid_input(canvas: Sequence[Element], live_input: str) -> bool:
    return evaluate_state(canvas, live_input) != ExpressionState.INVALID


def last_element_type(canvas: Sequence[Element]) -> str:
    """One of: empty, fraction, operand, operation (unknown for a stray atom)."""
    if not canvas:
        return "empty"
    last = canvas[-1]
    if last.kind == "fraction":
        return "fraction"
    if is_element(last):
        return "operand"
    if is_operation(last):
        return "operation"
    return "unknown"


def explain(canvas: Sequence[Element], live_input: str) -> Optional[str]:
    """Human-readable reason why the combination is invalid, or None."""
    try:
        parsed = parse_tokens(tokenize(live_input))
        check_sequence(list(canvas) + parsed)
    except ExpressionError as exc:
        return str(exc)
    return None
