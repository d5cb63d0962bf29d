from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Iterator, Tuple

from preppy.services.inputs import EMPTY, Input, has_value


@dataclass(frozen=True)
class Ingredient:
    name: str
    quantity: Input = EMPTY
    converted: Input = EMPTY


class IngredientList:
    """Immutable, insertion-ordered ingredients; indices are stable handles."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Ingredient] = ()) -> None:
        self._items: Tuple[Ingredient, ...] = tuple(items)

    def append(self, ingredient: Ingredient) -> "IngredientList":
        return IngredientList(self._items + (ingredient,))

    def get(self, index: int) -> Ingredient:
        if not 0 <= index < len(self._items):
            raise IndexError(f"ingredient index {index} out of range (size={len(self._items)})")
        return self._items[index]

    def update(self, index: int, fn: Callable[[Ingredient], Ingredient]) -> "IngredientList":
        if not 0 <= index < len(self._items):
            return self
        items = list(self._items)
        items[index] = fn(items[index])
        return IngredientList(items)

    def map(self, fn: Callable[[Ingredient], Ingredient]) -> "IngredientList":
        return IngredientList(fn(item) for item in self._items)

    def enumerate(self) -> Iterator[Tuple[int, Ingredient]]:
        return enumerate(self._items)

    def __iter__(self) -> Iterator[Ingredient]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IngredientList):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"IngredientList({list(self._items)!r})"


@dataclass(frozen=True)
class Recipe:
    name: str
    ingredients: IngredientList = field(default_factory=IngredientList)

    @classmethod
    def new(cls, name: str, ingredients: Iterable[Ingredient] = ()) -> "Recipe":
        return cls(name=name, ingredients=IngredientList(ingredients))

    def with_name(self, name: str) -> "Recipe":
        return replace(self, name=name)

    def add_ingredient(self, ingredient: Ingredient | None = None) -> "Recipe":
        return replace(self, ingredients=self.ingredients.append(ingredient or Ingredient(name="")))

    def rename_ingredient(self, index: int, name: str) -> "Recipe":
        self.ingredients.get(index)
        return replace(
            self,
            ingredients=self.ingredients.update(index, lambda ing: replace(ing, name=name)),
        )

    def reset_converted(self) -> "Recipe":
        return replace(
            self, ingredients=self.ingredients.map(lambda ing: replace(ing, converted=EMPTY))
        )


def converted_editable(ingredient: Ingredient) -> bool:
    """A converted cell only accepts edits once its original quantity has a value."""
    return has_value(ingredient.quantity)
