from fractions import Fraction

import pytest

from preppy.services.inputs import EMPTY, Computed, Invalid, Valid, value_of
from preppy.services.parsing.errors import RecipeParseError
from preppy.services.parsing.markdown_list import parse, to_markdown
from preppy.services.quantity import FloatQuantity, FractionQuantity
from preppy.services.recipe import Ingredient, Recipe


def test_serialize_matches_documented_layout():
    recipe = Recipe.new(
        "Name",
        [
            Ingredient(
                name="Flour",
                quantity=Valid(raw="200.0", parsed=FloatQuantity(200.0)),
                converted=Computed(FloatQuantity(400.0)),
            ),
            Ingredient(name="Sugar"),
        ],
    )
    assert to_markdown(recipe) == "Name\n\n# Ingredients\n- Flour, 200\n- Sugar"


def test_round_trip_resets_converted_column():
    recipe = Recipe.new(
        "Name",
        [
            Ingredient(
                name="Flour",
                quantity=Valid(raw="200", parsed=FloatQuantity(200.0)),
                converted=Computed(FloatQuantity(400.0)),
            ),
            Ingredient(name="Sugar"),
        ],
    )
    reparsed = parse(to_markdown(recipe))
    assert reparsed.name == "Name"
    flour, sugar = reparsed.ingredients
    assert flour.name == "Flour"
    assert value_of(flour.quantity) == FloatQuantity(200.0)
    assert flour.converted == EMPTY
    assert sugar == Ingredient(name="Sugar")


def test_serialize_skips_blank_names_and_valueless_quantities():
    recipe = Recipe.new(
        "Soup",
        [
            Ingredient(name="  ", quantity=Valid(raw="1", parsed=FloatQuantity(1.0))),
            Ingredient(name="Leek", quantity=Invalid(raw="two")),
            Ingredient(name="Stock", quantity=Valid(raw="1 1/2", parsed=FractionQuantity(Fraction(3, 2)))),
        ],
    )
    assert to_markdown(recipe) == "Soup\n\n# Ingredients\n- Leek\n- Stock, 3/2"
    stock = parse(to_markdown(recipe)).ingredients.get(1)
    assert value_of(stock.quantity) == FractionQuantity(Fraction(3, 2))


def test_parse_lines_with_and_without_dash():
    text = "Cake\n\n# Ingredients\n- Flour, 250\nEggs, 3\n\n  \n- Vanilla\n"
    recipe = parse(text)
    assert [ing.name for ing in recipe.ingredients] == ["Flour", "Eggs", "Vanilla"]
    assert value_of(recipe.ingredients.get(1).quantity) == FloatQuantity(3.0)
    assert recipe.ingredients.get(2).quantity == EMPTY


def test_parse_keeps_empty_title():
    recipe = parse("\n\n# Ingredients\n- Salt")
    assert recipe.name == ""
    assert len(recipe.ingredients) == 1


def test_unparseable_quantity_is_invalid_not_an_error():
    recipe = parse("Tea\n\n# Ingredients\n- Leaves, a handful")
    assert recipe.ingredients.get(0).quantity == Invalid(raw="a handful")


@pytest.mark.parametrize(
    "text",
    [
        "Just a title",
        "A\n\n# Ingredients\n- x\n\n# Ingredients\n- y",
        "Cake\n\n# Ingredients\n- Flour, 250, sifted",
    ],
)
def test_parse_failures(text):
    with pytest.raises(RecipeParseError):
        parse(text)
