"""
Keeps original quantities, converted quantities and the conversion rate consistent.

Each entry point takes the current recipe (and rate) and returns a new pair;
nothing is mutated. The rate lives with the caller, never inside the Recipe.
"""

from dataclasses import dataclass, replace

from preppy.services.inputs import (
    EMPTY,
    Computed,
    Empty,
    Input,
    Invalid,
    Valid,
    classify,
    value_of,
)
from preppy.services.quantity import FloatQuantity, Quantity, multiply, to_float
from preppy.services.recipe import Ingredient, Recipe


@dataclass(frozen=True)
class ConversionResult:
    recipe: Recipe
    rate: Input


def _apply_rate(recipe: Recipe, rate: Quantity) -> Recipe:
    def convert(ingredient: Ingredient) -> Ingredient:
        quantity = value_of(ingredient.quantity)
        if quantity is None:
            # Invalid originals keep whatever converted value they had.
            return ingredient
        return replace(ingredient, converted=Computed(multiply(quantity, rate)))

    return replace(recipe, ingredients=recipe.ingredients.map(convert))


def change_rate(recipe: Recipe, raw: str) -> ConversionResult:
    rate = classify(raw)
    if not isinstance(rate, Valid):
        return ConversionResult(recipe=recipe.reset_converted(), rate=rate)
    return ConversionResult(recipe=_apply_rate(recipe, rate.parsed), rate=rate)


def change_quantity(recipe: Recipe, rate: Input, index: int, raw: str) -> ConversionResult:
    recipe.ingredients.get(index)
    quantity = classify(raw)
    rate_value = value_of(rate)

    def edit(ingredient: Ingredient) -> Ingredient:
        if isinstance(quantity, Valid) and rate_value is not None:
            converted: Input = Computed(multiply(quantity.parsed, rate_value))
        else:
            converted = EMPTY
        return replace(ingredient, quantity=quantity, converted=converted)

    return ConversionResult(
        recipe=replace(recipe, ingredients=recipe.ingredients.update(index, edit)),
        rate=rate,
    )


def _set_converted(recipe: Recipe, index: int, converted: Input) -> Recipe:
    return replace(
        recipe,
        ingredients=recipe.ingredients.update(
            index, lambda ingredient: replace(ingredient, converted=converted)
        ),
    )


def change_converted(recipe: Recipe, rate: Input, index: int, raw: str) -> ConversionResult:
    ingredient = recipe.ingredients.get(index)
    original = value_of(ingredient.quantity)
    if original is None:
        return ConversionResult(recipe=_set_converted(recipe, index, EMPTY), rate=rate)

    converted = classify(raw)
    if isinstance(converted, Empty):
        return ConversionResult(recipe=recipe.reset_converted(), rate=EMPTY)
    if isinstance(converted, (Invalid, Computed)):
        return ConversionResult(recipe=_set_converted(recipe, index, converted), rate=rate)

    original_value = to_float(original)
    if original_value == 0:
        return ConversionResult(recipe=_set_converted(recipe, index, converted), rate=rate)

    new_rate = FloatQuantity(to_float(converted.parsed) / original_value)
    rescaled = _apply_rate(recipe, new_rate)
    return ConversionResult(
        recipe=_set_converted(rescaled, index, converted),
        rate=Computed(new_rate),
    )


def rename(recipe: Recipe, name: str) -> Recipe:
    return recipe.with_name(name)


def rename_ingredient(recipe: Recipe, index: int, name: str) -> Recipe:
    return recipe.rename_ingredient(index, name)


def add_ingredient(recipe: Recipe, rate: Input) -> ConversionResult:
    """Append a blank row; it has no quantity, so the rate does not touch it."""
    return ConversionResult(recipe=recipe.add_ingredient(), rate=rate)