"""Equation Engine token classifier.

Maps a token to an element using an ordered, static rule table.
The fraction rule is checked first so that "a/b" is never read
through one of the single-character rules.
"""

from __future__ import annotations
import re
import uuid
from typing import Callable, List, NamedTuple, Optional, Tuple

from .elements import Atom, Element, Fraction, with_id
from .errors import UnrecognizedTokenError
from .tokenizer import tokenize

RULES: List[Tuple[str, "re.Pattern[str]", Callable[..., Element]]] = [
    (
        "fraction",
        re.compile(r"^([a-zA-Z0-9]+)/([a-zA-Z0-9]+)$"),
        lambda m, eid: Fraction(m.group(1), m.group(2), id=eid),
    ),
    (
        "operation",
        re.compile(r"^[+\-*:]$"),
        lambda m, eid: Atom(m.group(0), id=eid),
    ),
    (
        "operand",
        re.compile(r"^[a-zA-Z0-9]$"),
        lambda m, eid: Atom(m.group(0), id=eid),
    ),
]


class ParsedInput(NamedTuple):
    elements: List[Element]
    is_valid: bool


def classify(token: str, element_id: str = "") -> Optional[Element]:
    """Return the element for ``token``, or None if no rule matches."""
    for _name, pattern, build in RULES:
        m = pattern.fullmatch(token)
        if m:
            return build(m, element_id)
    return None


def classify_strict(token: str, index: int = 0, element_id: str = "") -> Element:
    element = classify(token, element_id)
    if element is None:
        raise UnrecognizedTokenError(
            f"unrecognized token '{token}'", position=index, token=token
        )
    return element


def parse_tokens(tokens: List[str]) -> List[Element]:
    """Classify every token, raising on the first unrecognized one."""
    return [
        classify_strict(tok, idx, f"temp-{idx}") for idx, tok in enumerate(tokens)
    ]


def parse_input(text: str) -> ParsedInput:
    """Tokenize and classify ``text``; any bad token rejects the whole input."""
    try:
        elements = parse_tokens(tokenize(text))
    except UnrecognizedTokenError:
        return ParsedInput([], False)
    return ParsedInput(elements, True)


def _uuid_id() -> str:
    return uuid.uuid4().hex


def create_elements(text: str, new_id: Optional[Callable[[], str]] = None) -> List[Element]:
    """Classify ``text`` into elements carrying fresh ids.

    Ids are allocated here, at commit time, and nowhere earlier.
    Returns an empty list if the input does not classify.
    """
    parsed = parse_input(text)
    if not parsed.is_valid:
        return []
    allocate = new_id or _uuid_id
    return [with_id(el, allocate()) for el in parsed.elements]
