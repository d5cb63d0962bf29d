"""
Cooklang-lite: pulls `@ingredient{quantity%unit}` markers out of free text.

    -- full-line comment
    Mix @flour{200%g} with @sea salt{1/2%tsp} and a pinch of @pepper.

The scan runs over the UTF-8 bytes with an explicit cursor, so multi-byte
characters inside names are carried through untouched. Only ASCII bytes act
as delimiters.
"""

from typing import List, Optional, Tuple

from preppy.config import settings
from preppy.services.inputs import classify_lenient
from preppy.services.parsing.errors import RecipeParseError
from preppy.services.recipe import Ingredient, Recipe

INGREDIENT_MARKER = ord("@")
MARKERS = frozenset(b"@#~")
OPEN_BRACE = ord("{")
CLOSE_BRACE = ord("}")
UNIT_SEPARATOR = ord("%")
NEWLINE = ord("\n")
COMMENT_PREFIX = b"--"

# Bytes that end a single-word ingredient name.
WORD_BOUNDARIES = frozenset(b" \t\r\n.,;:!?()[]{}<>\"'/\\|*=+") | MARKERS


def _find_first(data: bytes, start: int, stops: frozenset) -> int:
    pos = start
    while pos < len(data) and data[pos] not in stops:
        pos += 1
    return pos


def _decode(data: bytes, start: int, end: int) -> str:
    return data[start:end].decode("utf-8")


def _read_braces(data: bytes, open_pos: int) -> Optional[Tuple[str, str, int]]:
    """Returns (quantity, unit, position after '}'), or None when the brace is never closed."""
    qty_end = _find_first(data, open_pos + 1, frozenset((UNIT_SEPARATOR, CLOSE_BRACE)))
    if qty_end >= len(data):
        return None
    quantity = _decode(data, open_pos + 1, qty_end)
    if data[qty_end] == CLOSE_BRACE:
        return quantity, "", qty_end + 1
    unit_end = _find_first(data, qty_end + 1, frozenset((CLOSE_BRACE,)))
    if unit_end >= len(data):
        return None
    return quantity, _decode(data, qty_end + 1, unit_end), unit_end + 1


def _read_ingredient(data: bytes, start: int) -> Tuple[Optional[Ingredient], int]:
    """Reads one ingredient whose name starts at `start` (just past the '@')."""
    stop = _find_first(data, start, MARKERS | {OPEN_BRACE, NEWLINE})
    if stop < len(data) and data[stop] == OPEN_BRACE:
        braces = _read_braces(data, stop)
        if braces is not None:
            quantity, unit, end = braces
            name = _decode(data, start, stop).strip()
            if not name:
                return None, end
            unit = unit.strip()
            if unit:
                name = f"{name} ({unit})"
            return Ingredient(name=name, quantity=classify_lenient(quantity.strip())), end

    word_end = _find_first(data, start, WORD_BOUNDARIES)
    name = _decode(data, start, word_end)
    if not name:
        return None, word_end
    return Ingredient(name=name), word_end


def _skip_line(data: bytes, pos: int) -> int:
    end = _find_first(data, pos, frozenset((NEWLINE,)))
    return min(end + 1, len(data))


def parse(text: str) -> Recipe:
    data = text.encode("utf-8")
    ingredients: List[Ingredient] = []
    pos = 0
    line_start = True
    while pos < len(data):
        if line_start and data.startswith(COMMENT_PREFIX, pos):
            pos = _skip_line(data, pos)
            continue
        byte = data[pos]
        if byte == INGREDIENT_MARKER:
            ingredient, pos = _read_ingredient(data, pos + 1)
            if ingredient is not None:
                ingredients.append(ingredient)
            line_start = False
            continue
        line_start = byte == NEWLINE
        pos += 1

    if not ingredients:
        raise RecipeParseError("no cooklang ingredients found")
    return Recipe.new(name=settings.imported_recipe_name, ingredients=ingredients)
