"""
Markdown-ish ingredient list, also the persistence/export format:

    Pancakes

    # Ingredients
    - Flour, 200
    - Milk, 1/2
    - Salt
"""

from typing import List

from preppy.services.inputs import EMPTY, Input, classify_lenient, value_of
from preppy.services.parsing.errors import RecipeParseError
from preppy.services.quantity import to_plain_text
from preppy.services.recipe import Ingredient, Recipe

SECTION_SEPARATOR = "\n\n# Ingredients\n"
ITEM_PREFIX = "- "


def _parse_line(line: str) -> Ingredient:
    if line.startswith(ITEM_PREFIX):
        line = line[len(ITEM_PREFIX):]
    parts = line.split(",")
    if len(parts) > 2:
        raise RecipeParseError(f"more than one comma in ingredient line: {line!r}")
    quantity: Input = EMPTY
    if len(parts) == 2:
        quantity = classify_lenient(parts[1].strip())
    return Ingredient(name=parts[0].strip(), quantity=quantity)


def parse(text: str) -> Recipe:
    parts = text.split(SECTION_SEPARATOR)
    if len(parts) != 2:
        raise RecipeParseError(f"expected title and ingredient sections, got {len(parts)} part(s)")
    title, body = parts
    ingredients = [_parse_line(line) for line in body.split("\n") if line.strip()]
    return Recipe.new(name=title, ingredients=ingredients)


def to_markdown(recipe: Recipe) -> str:
    lines: List[str] = []
    for ingredient in recipe.ingredients:
        if not ingredient.name.strip():
            continue
        quantity = value_of(ingredient.quantity)
        if quantity is None:
            lines.append(f"{ITEM_PREFIX}{ingredient.name}")
        else:
            lines.append(f"{ITEM_PREFIX}{ingredient.name}, {to_plain_text(quantity)}")
    return recipe.name + SECTION_SEPARATOR + "\n".join(lines)
