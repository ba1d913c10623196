"""Equation Engine grammar.

The expression language is a strict alternation of elements and
operations, starting with an element:

    element op element op ... element      -> valid
    element op element op ... op           -> inter  (waiting for more)
    anything else                          -> invalid

The check is a single linear pass over position parity; the
tokenizer and classifier are deterministic, so there is never an
alternative parse to try.
"""

from enum import Enum
from typing import Dict, List, Sequence

from .elements import Element, is_element, is_operation, text_of
from .errors import GrammarViolationError

# Grammar is represented as:
#   nonterminal -> list of productions
#   each production is a list of symbols (strings)
GRAMMAR: Dict[str, List[List[str]]] = {
    "EXPR": [
        ["ELEMENT"],
        ["ELEMENT", "OP"],
        ["ELEMENT", "OP", "EXPR"],
    ],
    "ELEMENT": [
        ["FRACTION"],
        ["OPERAND"],
    ],
    "FRACTION": [
        ["ALNUM+", "/", "ALNUM+"],
    ],
    "OPERAND": [
        ["ALNUM"],
    ],
    "OP": [
        ["+"],
        ["-"],
        ["*"],
        [":"],
    ],
}


class ExpressionState(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    INTER = "inter"


def get_grammar() -> Dict[str, List[List[str]]]:
    """Return the grammar of the expression language."""
    return GRAMMAR


def check_sequence(items: Sequence[Element]) -> None:
    """Raise GrammarViolationError at the first position that breaks alternation."""
    for idx, item in enumerate(items):
        if idx % 2 == 0:
            if not is_element(item):
                raise GrammarViolationError(
                    f"expected an element at position {idx + 1}, got '{text_of(item)}'",
                    position=idx,
                    token=text_of(item),
                    expected="element",
                )
        elif not is_operation(item):
            raise GrammarViolationError(
                f"expected an operation at position {idx + 1}, got '{text_of(item)}'",
                position=idx,
                token=text_of(item),
                expected="operation",
            )


def validate_sequence(items: Sequence[Element]) -> bool:
    """True if ``items`` alternates element, operation, element, ..."""
    try:
        check_sequence(items)
    except GrammarViolationError:
        return False
    return True


def sequence_state(items: Sequence[Element]) -> ExpressionState:
    """Tri-state verdict for a combined sequence."""
    if not items:
        return ExpressionState.VALID
    if not validate_sequence(items):
        return ExpressionState.INVALID
    if is_element(items[-1]):
        return ExpressionState.VALID
    return ExpressionState.INTER
