class RecipeParseError(ValueError):
    """The text does not match a recipe format's grammar."""
