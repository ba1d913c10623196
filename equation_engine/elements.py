"""Equation Engine elements.

The two kinds of item that can sit on the canvas:

    * Atom      – one operand character (a, 7) or one operation (+ - * :)
    * Fraction  – numerator/denominator pair of alphanumeric strings

Items are a tagged union: callers dispatch on ``kind`` rather than on
methods. Ids are opaque and never take part in equality.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Union

# ':' is division; '/' only ever separates a fraction.
OPERATIONS = ("+", "-", "*", ":")

OPERAND_RE = re.compile(r"^[a-zA-Z0-9]$")
OPERATION_RE = re.compile(r"^[+\-*:]$")
FRACTION_PART_RE = re.compile(r"^[a-zA-Z0-9]+$")


@dataclass(frozen=True)
class Atom:
    content: str
    id: str = field(default="", compare=False)
    kind: str = field(default="atom", init=False)


@dataclass(frozen=True)
class Fraction:
    numerator: str
    denominator: str
    id: str = field(default="", compare=False)
    kind: str = field(default="fraction", init=False)

    def __post_init__(self) -> None:
        for part in (self.numerator, self.denominator):
            if not FRACTION_PART_RE.fullmatch(part):
                raise ValueError(f"fraction part must be alphanumeric: {part!r}")

    @property
    def numerator_id(self) -> str:
        return f"{self.id}-num"

    @property
    def denominator_id(self) -> str:
        return f"{self.id}-den"


Element = Union[Atom, Fraction]


def is_element(item: Element) -> bool:
    """True for grammar elements: a fraction or a single operand atom."""
    if item.kind == "fraction":
        return True
    return item.kind == "atom" and bool(OPERAND_RE.fullmatch(item.content))


def is_operation(item: Element) -> bool:
    return item.kind == "atom" and bool(OPERATION_RE.fullmatch(item.content))


def with_id(item: Element, new_id: str) -> Element:
    return replace(item, id=new_id)


def text_of(item: Element) -> str:
    if item.kind == "fraction":
        return f"{item.numerator}/{item.denominator}"
    return item.content


def render(items: Iterable[Element]) -> str:
    """Compact text form of a sequence, e.g. ``a/b + c/d``."""
    return " ".join(text_of(item) for item in items)


def element_to_dict(item: Element) -> Dict[str, Any]:
    if item.kind == "fraction":
        return {
            "type": "fraction",
            "numerator": item.numerator,
            "denominator": item.denominator,
            "id": item.id,
        }
    return {
        "type": "atom",
        "content": item.content,
        "id": item.id,
    }


def element_from_dict(data: Dict[str, Any]) -> Element:
    kind = data.get("type")
    if kind == "fraction":
        return Fraction(data["numerator"], data["denominator"], id=data.get("id", ""))
    if kind == "atom":
        return Atom(data["content"], id=data.get("id", ""))
    raise ValueError(f"unknown element type: {kind!r}")
