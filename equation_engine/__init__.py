"""Equation Engine: incremental tokenizing and validation of fraction expressions."""

from .classifier import ParsedInput, classify, create_elements, parse_input
from .commit import CommitResult, commit, reset
from .elements import OPERATIONS, Atom, Element, Fraction, is_element, is_operation
from .evaluator import evaluate_state, explain, is_valid_input, last_element_type
from .grammar import ExpressionState, sequence_state, validate_sequence
from .session import Session
from .tokenizer import tokenize

__all__ = [
    "OPERATIONS",
    "Atom",
    "CommitResult",
    "Element",
    "ExpressionState",
    "Fraction",
    "ParsedInput",
    "Session",
    "classify",
    "commit",
    "create_elements",
    "evaluate_state",
    "explain",
    "is_element",
    "is_operation",
    "is_valid_input",
    "last_element_type",
    "parse_input",
    "reset",
    "sequence_state",
    "tokenize",
    "validate_sequence",
]
