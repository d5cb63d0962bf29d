from fractions import Fraction
from typing import Literal

from pydantic import BaseModel, Field

from preppy.services.inputs import (
    EMPTY,
    Computed,
    Input,
    Invalid,
    Valid,
    display_text,
    is_marked_invalid,
)
from preppy.services.quantity import (
    DisplayOption,
    FloatQuantity,
    FractionQuantity,
    Quantity,
    to_display_text,
)
from preppy.services.recipe import Ingredient, Recipe, converted_editable


class QuantityModel(BaseModel):
    kind: Literal["float", "fraction"]
    value: float
    numerator: int | None = None
    denominator: int | None = None
    display: str = ""


class InputModel(BaseModel):
    state: Literal["empty", "valid", "invalid", "computed"] = "empty"
    raw: str | None = None
    value: QuantityModel | None = None
    display: str = ""  # what the cell shows
    invalid: bool = False


class IngredientModel(BaseModel):
    name: str = ""
    quantity: InputModel = Field(default_factory=InputModel)
    converted: InputModel = Field(default_factory=InputModel)
    converted_editable: bool = False


class RecipeModel(BaseModel):
    name: str = ""
    ingredients: list[IngredientModel] = []


class EditorState(BaseModel):
    recipe: RecipeModel
    rate: InputModel = Field(default_factory=InputModel)


def quantity_to_model(quantity: Quantity) -> QuantityModel:
    display = to_display_text(quantity, DisplayOption.HIDE_DECIMAL_PART_IF_ZERO)
    if isinstance(quantity, FractionQuantity):
        return QuantityModel(
            kind="fraction",
            value=float(quantity.value),
            numerator=quantity.value.numerator,
            denominator=quantity.value.denominator,
            display=display,
        )
    return QuantityModel(kind="float", value=quantity.value, display=display)


def quantity_from_model(model: QuantityModel) -> Quantity:
    if model.kind == "fraction" and model.numerator is not None and model.denominator:
        return FractionQuantity(Fraction(model.numerator, model.denominator))
    return FloatQuantity(model.value)


def input_to_model(field: Input) -> InputModel:
    common = {"display": display_text(field), "invalid": is_marked_invalid(field)}
    if isinstance(field, Valid):
        return InputModel(state="valid", raw=field.raw, value=quantity_to_model(field.parsed), **common)
    if isinstance(field, Invalid):
        return InputModel(state="invalid", raw=field.raw, **common)
    if isinstance(field, Computed):
        return InputModel(state="computed", value=quantity_to_model(field.value), **common)
    return InputModel(state="empty", **common)


def input_from_model(model: InputModel) -> Input:
    """Rebuild a field from client state; a state missing its payload degrades to Empty/Invalid."""
    if model.state == "valid" and model.value is not None:
        return Valid(raw=model.raw or "", parsed=quantity_from_model(model.value))
    if model.state == "computed" and model.value is not None:
        return Computed(quantity_from_model(model.value))
    if model.state in ("valid", "invalid") and model.raw:
        return Invalid(raw=model.raw)
    return EMPTY


def ingredient_to_model(ingredient: Ingredient) -> IngredientModel:
    return IngredientModel(
        name=ingredient.name,
        quantity=input_to_model(ingredient.quantity),
        converted=input_to_model(ingredient.converted),
        converted_editable=converted_editable(ingredient),
    )


def recipe_to_model(recipe: Recipe) -> RecipeModel:
    return RecipeModel(
        name=recipe.name,
        ingredients=[ingredient_to_model(ingredient) for ingredient in recipe.ingredients],
    )


def recipe_from_model(model: RecipeModel) -> Recipe:
    return Recipe.new(
        name=model.name,
        ingredients=[
            Ingredient(
                name=item.name,
                quantity=input_from_model(item.quantity),
                converted=input_from_model(item.converted),
            )
            for item in model.ingredients
        ],
    )


def editor_state(recipe: Recipe, rate: Input = EMPTY) -> EditorState:
    return EditorState(recipe=recipe_to_model(recipe), rate=input_to_model(rate))