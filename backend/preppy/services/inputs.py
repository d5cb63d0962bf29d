"""
Reconciliation state of one editable numeric field.

Empty    - nothing typed
Valid    - typed text that parsed; raw is kept verbatim for redisplay
Invalid  - typed text that did not parse
Computed - derived by the conversion engine, never typed
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from preppy.services.quantity import (
    DisplayOption,
    Quantity,
    QuantityParseError,
    parse,
    parse_lenient,
    to_display_text,
)


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Valid:
    raw: str
    parsed: Quantity


@dataclass(frozen=True)
class Invalid:
    raw: str


@dataclass(frozen=True)
class Computed:
    value: Quantity


Input = Union[Empty, Valid, Invalid, Computed]

EMPTY = Empty()


def _classify_with(raw: str, parser: Callable[[str], Quantity]) -> Input:
    if not raw.strip():
        return EMPTY
    try:
        return Valid(raw=raw, parsed=parser(raw))
    except QuantityParseError:
        return Invalid(raw=raw)


def classify(raw: str) -> Input:
    return _classify_with(raw, parse)


def classify_lenient(raw: str) -> Input:
    return _classify_with(raw, parse_lenient)


def value_of(field: Input) -> Optional[Quantity]:
    if isinstance(field, Valid):
        return field.parsed
    if isinstance(field, Computed):
        return field.value
    return None


def has_value(field: Input) -> bool:
    return isinstance(field, (Valid, Computed))


def is_marked_invalid(field: Input) -> bool:
    return isinstance(field, Invalid)


def display_text(field: Input) -> str:
    """Text a cell shows: what was typed, or the formatted derived value."""
    if isinstance(field, (Valid, Invalid)):
        return field.raw
    if isinstance(field, Computed):
        return to_display_text(field.value, DisplayOption.HIDE_DECIMAL_PART_IF_ZERO)
    return ""
