"""Equation Engine exceptions.

Raised only by the strict helpers (classify_strict, check_sequence)
and caught inside the package; public operations turn them into
verdicts and user-facing messages.
"""

from typing import Optional


class ExpressionError(Exception):
    """Base class; ``position`` indexes the token list or combined sequence."""

    def __init__(self, msg: str, position: Optional[int] = None, token: Optional[str] = None):
        super().__init__(msg)
        self.position = position
        self.token = token


class UnrecognizedTokenError(ExpressionError):
    """A live-input token matches no classification rule."""


class GrammarViolationError(ExpressionError):
    """The combined sequence breaks element/operation alternation."""

    def __init__(
        self,
        msg: str,
        position: Optional[int] = None,
        token: Optional[str] = None,
        expected: Optional[str] = None,
    ):
        super().__init__(msg, position, token)
        self.expected = expected
