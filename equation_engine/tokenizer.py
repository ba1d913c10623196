"""Equation Engine tokenizer.

Splits a line of keyboard input into tokens. Operation characters
(+ - * :) are always single-character tokens; any other run of
non-space characters is one token, so "ab12" stays together and
"a/b" reaches the classifier whole. Whitespace only separates.
"""

from typing import List

from .elements import OPERATIONS


def tokenize(text: str) -> List[str]:
    """Return the ordered list of tokens in ``text``."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")

    tokens: List[str] = []
    pending = ""
    for ch in text:
        if ch in OPERATIONS:
            if pending:
                tokens.append(pending)
                pending = ""
            tokens.append(ch)
        elif ch.isspace():
            if pending:
                tokens.append(pending)
                pending = ""
        else:
            pending += ch

    if pending:
        tokens.append(pending)
    return tokens
