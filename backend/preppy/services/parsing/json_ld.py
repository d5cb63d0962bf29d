"""
schema.org Recipe objects as embedded in recipe pages (`application/ld+json`).

Ingredient lines are free text ("2 1/2 cups flour", "Salt to taste"), so each
one is tokenized into numbers and words and matched against a few shapes.
Lines that match none keep their full text as the name and get no quantity.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, List, Optional

from preppy.logging import get_logger
from preppy.services.inputs import EMPTY, Valid
from preppy.services.parsing.errors import RecipeParseError
from preppy.services.quantity import (
    FloatQuantity,
    FractionQuantity,
    Quantity,
    QuantityParseError,
    approximate,
    parse as parse_quantity,
)
from preppy.services.recipe import Ingredient, Recipe

logger = get_logger(__name__)

RECIPE_TYPE = "Recipe"

# Alternation order is the longest-match-first rule: "1/2" before "1", numbers before words.
_TOKEN_RE = re.compile(r"(?P<fraction>\d+/\d+)|(?P<number>\d+(?:[.,]\d+)?)|(?P<word>[^\s\d]+)")


@dataclass(frozen=True)
class Token:
    kind: str  # fraction | number | word
    text: str

    @property
    def is_numeric(self) -> bool:
        return self.kind != "word"


class _UnmatchedIngredient(Exception):
    pass


def tokenize(text: str) -> List[Token]:
    return [Token(kind=m.lastgroup, text=m.group(0)) for m in _TOKEN_RE.finditer(text)]


def _read_amount(tokens: List[Token]) -> tuple[Quantity, str, int]:
    """Reads the number run at the head of `tokens`: one number, or whole + fraction."""
    first = tokens[0]
    second = tokens[1] if len(tokens) > 1 else None
    try:
        if second is None or not second.is_numeric:
            return parse_quantity(first.text), first.text, 1
        if first.kind == "number" and second.kind == "fraction":
            whole = parse_quantity(first.text)
            fraction = parse_quantity(second.text)
        else:
            raise _UnmatchedIngredient(f"unexpected number run {first.text!r} {second.text!r}")
    except QuantityParseError as exc:
        raise _UnmatchedIngredient(str(exc)) from exc
    if not isinstance(whole, FloatQuantity) or not isinstance(fraction, FractionQuantity):
        raise _UnmatchedIngredient("mixed number must be whole + fraction")
    mixed = FractionQuantity(approximate(whole.value) + fraction.value)
    return mixed, f"{first.text} {second.text}", 2


def _words(tokens: List[Token]) -> List[str]:
    if any(token.is_numeric for token in tokens):
        raise _UnmatchedIngredient("number after the amount")
    return [token.text for token in tokens]


def _with_unit(name: str, unit: str) -> str:
    return f"{name} ({unit})"


def parse_ingredient(text: str) -> Ingredient:
    """Best-effort split of one ingredient line into name, unit and quantity."""
    tokens = tokenize(text)
    first_number = next((i for i, token in enumerate(tokens) if token.is_numeric), None)
    if first_number is None:
        return Ingredient(name=" ".join(token.text for token in tokens))

    prefix = " ".join(token.text for token in tokens[:first_number])
    try:
        quantity, raw, consumed = _read_amount(tokens[first_number:])
        rest = _words(tokens[first_number + consumed:])
        if prefix:
            if len(rest) > 1:
                raise _UnmatchedIngredient("more than one word after the amount")
            name = _with_unit(prefix, rest[0]) if rest else prefix
        elif not rest:
            raise _UnmatchedIngredient("no ingredient name")
        elif len(rest) == 1:
            name = rest[0]
        else:
            name = _with_unit(" ".join(rest[1:]), rest[0])
    except _UnmatchedIngredient as exc:
        logger.debug("json_ld.ingredient_fallback text=%s reason=%s", text, exc)
        return Ingredient(name=text, quantity=EMPTY)
    return Ingredient(name=name, quantity=Valid(raw=raw, parsed=quantity))


def _is_recipe_node(node: Any) -> bool:
    if not isinstance(node, dict):
        return False
    node_type = node.get("@type")
    if isinstance(node_type, list):
        return RECIPE_TYPE in node_type
    return node_type == RECIPE_TYPE


def _recipe_from_node(node: dict) -> Recipe:
    name = node.get("name")
    lines = node.get("recipeIngredient")
    if not isinstance(name, str):
        raise RecipeParseError("Recipe node has no name")
    if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
        raise RecipeParseError("recipeIngredient must be a list of strings")
    return Recipe.new(name=name, ingredients=[parse_ingredient(line) for line in lines])


def _find_recipe_node(document: Any) -> Optional[dict]:
    if _is_recipe_node(document):
        return document
    if isinstance(document, dict) and isinstance(document.get("@graph"), list):
        return next((node for node in document["@graph"] if _is_recipe_node(node)), None)
    return None


def parse(text: str) -> Recipe:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecipeParseError(f"not JSON: {exc}") from exc
    node = _find_recipe_node(document)
    if node is None:
        raise RecipeParseError("no Recipe node")
    return _recipe_from_node(node)
