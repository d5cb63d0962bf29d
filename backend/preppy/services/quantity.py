"""
Ingredient quantities: approximate (float) or exact (rational) amounts.

Typed fractions stay exact: "1/3" scaled by "3/2" shows as ¹⁄₂, not 0.5.
Mixed arithmetic falls back to floats: an approximate operand never becomes exact.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from decimal import Decimal
from fractions import Fraction
from typing import Union


MIXED_DENOMINATOR = 1000

_SUPERSCRIPT_DIGITS = "⁰¹²³⁴⁵⁶⁷⁸⁹"
_SUBSCRIPT_DIGITS = "₀₁₂₃₄₅₆₇₈₉"
_FRACTION_SLASH = "⁄"
_NO_BREAK_SPACE = "\u00a0"

_FLOAT_RE = re.compile(r"^[+-]?\d+\.\d+$")
_HAS_DIGIT_RE = re.compile(r"\d")
_INT_RE = re.compile(r"^[+-]?\d+$")
_FRACTION_RE = re.compile(r"^([+-]?\d+)\s*/\s*(\d+)$")
_MIXED_RE = re.compile(r"^([+-]?\d+)\s+(\d+)\s*/\s*(\d+)$")
_SUPERSCRIPT_RUN_RE = re.compile(f"[{_SUPERSCRIPT_DIGITS}]+")
_SIGN_GAP_RE = re.compile(r"^([+-])\s+")


class QuantityParseError(ValueError):
    pass


@dataclass(frozen=True)
class FloatQuantity:
    value: float


@dataclass(frozen=True)
class FractionQuantity:
    value: Fraction


Quantity = Union[FloatQuantity, FractionQuantity]


class DisplayOption(str, Enum):
    HIDE_DECIMAL_PART_IF_ZERO = "hide_decimal_part_if_zero"
    KEEP_DECIMAL_PART = "keep_decimal_part"


def _clean(text: str) -> str:
    return text.replace(_NO_BREAK_SPACE, " ").strip()


def _pad_decimal_point(text: str) -> str:
    """'.5' -> '0.5', '-.5' -> '-0.5', '5.' -> '5.0'."""
    sign = ""
    if text[:1] in "+-":
        sign, text = text[0], text[1:]
    if text.startswith("."):
        text = "0" + text
    if text.endswith("."):
        text = text + "0"
    return sign + text


_TO_ASCII = str.maketrans(
    {
        **{glyph: str(digit) for digit, glyph in enumerate(_SUPERSCRIPT_DIGITS)},
        **{glyph: str(digit) for digit, glyph in enumerate(_SUBSCRIPT_DIGITS)},
    }
)


def _normalize_glyphs(text: str) -> str:
    # A superscript run is a numerator: "2¹⁄₂" must read as "2 1/2", not "21/2".
    text = _SUPERSCRIPT_RUN_RE.sub(
        lambda m: " " + m.group(0).translate(_TO_ASCII), text
    )
    text = text.translate(_TO_ASCII).replace(_FRACTION_SLASH, "/").strip()
    return _SIGN_GAP_RE.sub(r"\1", text)


def _finite(value: float, text: str) -> float:
    if not math.isfinite(value):
        raise QuantityParseError(f"quantity out of range: {text!r}")
    return value


def _parse_float(text: str) -> float | None:
    if not _HAS_DIGIT_RE.search(text):
        return None
    padded = _pad_decimal_point(text)
    if _FLOAT_RE.match(padded):
        return _finite(float(padded), text)
    return None


def _parse_int(text: str) -> float | None:
    """Whole numbers are read as floats; ones too large for a float are rejected."""
    if not _INT_RE.match(text):
        return None
    try:
        return _finite(float(_to_int(text, text)), text)
    except OverflowError as e:
        raise QuantityParseError(f"quantity out of range: {text!r}") from e


def _bounded(value: Fraction, text: str) -> Fraction:
    try:
        _finite(float(value), text)
    except OverflowError as e:
        raise QuantityParseError(f"quantity out of range: {text!r}") from e
    return value


def _to_int(digits: str, text: str) -> int:
    try:
        return int(digits)
    except ValueError as e:
        raise QuantityParseError(f"quantity out of range: {text!r}") from e


def _parse_simple_fraction(text: str) -> Fraction | None:
    m = _FRACTION_RE.match(text)
    if not m:
        return None
    denominator = _to_int(m.group(2), text)
    if denominator == 0:
        return None
    return _bounded(Fraction(_to_int(m.group(1), text), denominator), text)


def _parse_fraction(text: str) -> Fraction | None:
    """'N/D' or 'W N/D'; a negative whole part makes the whole mixed number negative."""
    simple = _parse_simple_fraction(text)
    if simple is not None:
        return simple
    m = _MIXED_RE.match(text)
    if not m:
        return None
    denominator = _to_int(m.group(3), text)
    if denominator == 0:
        return None
    whole = _to_int(m.group(1), text)
    remainder = Fraction(_to_int(m.group(2), text), denominator)
    if m.group(1).startswith("-"):
        return _bounded(whole - remainder, text)
    return _bounded(whole + remainder, text)


def parse(text: str) -> Quantity:
    """Parse a user-typed quantity: decimal, whole number or (mixed) fraction."""
    cleaned = _clean(text).replace(",", ".")
    if not cleaned:
        raise QuantityParseError("empty quantity")
    as_float = _parse_float(cleaned)
    if as_float is not None:
        return FloatQuantity(as_float)
    as_int = _parse_int(cleaned)
    if as_int is not None:
        return FloatQuantity(as_int)
    as_fraction = _parse_fraction(_normalize_glyphs(cleaned))
    if as_fraction is not None:
        return FractionQuantity(as_fraction)
    raise QuantityParseError(f"not a quantity: {text!r}")


def parse_lenient(text: str) -> Quantity:
    """Float, whole number or plain 'a/b'. Used for quantities embedded in imported text."""
    cleaned = _clean(text)
    as_float = _parse_float(cleaned) if cleaned else None
    if as_float is not None:
        return FloatQuantity(as_float)
    as_int = _parse_int(cleaned)
    if as_int is not None:
        return FloatQuantity(as_int)
    as_fraction = _parse_simple_fraction(cleaned)
    if as_fraction is not None:
        return FractionQuantity(as_fraction)
    raise QuantityParseError(f"not a quantity: {text!r}")


def approximate(value: float) -> Fraction:
    return Fraction(round(value * MIXED_DENOMINATOR), MIXED_DENOMINATOR)


def multiply(a: Quantity, b: Quantity) -> Quantity:
    """Exact only when both sides are exact; any float operand makes the product a float."""
    if isinstance(a, FractionQuantity) and isinstance(b, FractionQuantity):
        return FractionQuantity(a.value * b.value)
    return FloatQuantity(float(a.value) * float(b.value))


def to_float(q: Quantity) -> float:
    return float(q.value)


def _float_text(value: float, option: DisplayOption) -> str:
    digits = 1 if abs(value) >= 1 else 2
    rounded = round(value, digits)
    if rounded == 0:
        rounded = 0.0
    text = f"{rounded:.{digits}f}".rstrip("0")
    if text.endswith("."):
        if option == DisplayOption.HIDE_DECIMAL_PART_IF_ZERO:
            return text[:-1]
        return text + "0"
    return text


def _glyphs(number: int, glyphs: str) -> str:
    return "".join(glyphs[int(ch)] for ch in str(number))


def to_display_text(
    q: Quantity, option: DisplayOption = DisplayOption.HIDE_DECIMAL_PART_IF_ZERO
) -> str:
    if isinstance(q, FloatQuantity):
        return _float_text(q.value, option)

    sign = "-" if q.value < 0 else ""
    magnitude = abs(q.value)
    whole = magnitude.numerator // magnitude.denominator
    remainder = magnitude - whole
    if remainder.denominator > 10:
        return _float_text(float(q.value), option)
    if remainder == 0:
        return f"{sign}{whole}"
    fraction = (
        _glyphs(remainder.numerator, _SUPERSCRIPT_DIGITS)
        + _FRACTION_SLASH
        + _glyphs(remainder.denominator, _SUBSCRIPT_DIGITS)
    )
    return f"{sign}{whole or ''}{fraction}"


def to_plain_text(q: Quantity) -> str:
    """Lossless ASCII form, accepted back by parse_lenient."""
    if isinstance(q, FractionQuantity):
        if q.value.denominator == 1:
            return str(q.value.numerator)
        return f"{q.value.numerator}/{q.value.denominator}"
    text = format(Decimal(repr(q.value)), "f")
    return text[:-2] if text.endswith(".0") else text
