from fractions import Fraction

import pytest

from preppy.config import settings
from preppy.services.inputs import EMPTY, Invalid, value_of
from preppy.services.parsing.cooklang import parse
from preppy.services.parsing.errors import RecipeParseError
from preppy.services.quantity import FloatQuantity, FractionQuantity


def _summary(recipe):
    return [(ing.name, value_of(ing.quantity)) for ing in recipe.ingredients]


def test_single_and_braced_ingredients():
    recipe = parse("Mix @flour{200%g} and @sugar")
    assert recipe.name == settings.imported_recipe_name
    assert _summary(recipe) == [("flour (g)", FloatQuantity(200.0)), ("sugar", None)]
    assert recipe.ingredients.get(1).quantity == EMPTY


def test_multi_word_names_and_fractions():
    recipe = parse("Add @sea salt{1/2%tsp}, then @olive oil{2} and @black pepper{}.")
    assert _summary(recipe) == [
        ("sea salt (tsp)", FractionQuantity(Fraction(1, 2))),
        ("olive oil", FloatQuantity(2.0)),
        ("black pepper", None),
    ]


def test_single_word_name_stops_at_punctuation_and_markers():
    recipe = parse("Season with @salt, @pepper.\nServe with @lemon#knife and @basil~{5%min}")
    assert [ing.name for ing in recipe.ingredients] == ["salt", "pepper", "lemon", "basil"]


def test_multibyte_names_survive_byte_scanning():
    recipe = parse("Top with @crème fraîche{2%cuillères} and @jalapeño")
    assert [ing.name for ing in recipe.ingredients] == ["crème fraîche (cuillères)", "jalapeño"]


def test_comment_lines_are_skipped():
    text = "-- use @butter{100%g} if you like\nMelt @chocolate{200%g}\n  -- not a comment @cream"
    assert [ing.name for ing in parse(text).ingredients] == ["chocolate (g)", "cream"]


def test_nameless_ingredients_are_dropped():
    recipe = parse("@{3%cups} of something and @eggs{3}")
    assert _summary(recipe) == [("eggs", FloatQuantity(3.0))]


def test_unparseable_quantity_is_invalid():
    recipe = parse("@water{a splash}")
    assert recipe.ingredients.get(0).quantity == Invalid(raw="a splash")


def test_unclosed_brace_falls_back_to_single_word():
    recipe = parse("@rice{2%cups and more")
    assert [ing.name for ing in recipe.ingredients] == ["rice"]


@pytest.mark.parametrize("text", ["", "No markers here", "-- @only{1} in a comment", "@ @"])
def test_no_ingredients_is_a_failure(text):
    with pytest.raises(RecipeParseError):
        parse(text)
