"""
Edit endpoints. The client sends its whole editor state (recipe + rate) with
each edit and gets the reconciled state back; nothing here is persisted.
"""

from fastapi import APIRouter, HTTPException

from preppy.logging import get_logger
from preppy.schemas.editor import FieldEdit, NameEdit
from preppy.schemas.recipe import EditorState, editor_state, input_from_model, recipe_from_model
from preppy.services import conversion
from preppy.services.recipe import Recipe

router = APIRouter(prefix="/editor")
logger = get_logger(__name__)


def _recipe_with_index(state: EditorState, index: int) -> Recipe:
    recipe = recipe_from_model(state.recipe)
    if not 0 <= index < len(recipe.ingredients):
        raise HTTPException(status_code=404, detail=f"no ingredient at index {index}")
    return recipe


@router.post("/rate", response_model=EditorState)
def edit_rate(body: FieldEdit) -> EditorState:
    result = conversion.change_rate(recipe_from_model(body.state.recipe), body.raw)
    logger.info("editor.rate raw=%r state=%s", body.raw, type(result.rate).__name__)
    return editor_state(result.recipe, result.rate)


@router.post("/name", response_model=EditorState)
def edit_name(body: NameEdit) -> EditorState:
    recipe = conversion.rename(recipe_from_model(body.state.recipe), body.name)
    return editor_state(recipe, input_from_model(body.state.rate))


@router.post("/ingredients", response_model=EditorState)
def add_ingredient(state: EditorState) -> EditorState:
    result = conversion.add_ingredient(recipe_from_model(state.recipe), input_from_model(state.rate))
    return editor_state(result.recipe, result.rate)


@router.post("/ingredients/{index}/name", response_model=EditorState)
def edit_ingredient_name(index: int, body: NameEdit) -> EditorState:
    recipe = _recipe_with_index(body.state, index)
    recipe = conversion.rename_ingredient(recipe, index, body.name)
    return editor_state(recipe, input_from_model(body.state.rate))


@router.post("/ingredients/{index}/quantity", response_model=EditorState)
def edit_quantity(index: int, body: FieldEdit) -> EditorState:
    recipe = _recipe_with_index(body.state, index)
    result = conversion.change_quantity(recipe, input_from_model(body.state.rate), index, body.raw)
    logger.info("editor.quantity index=%s raw=%r", index, body.raw)
    return editor_state(result.recipe, result.rate)


@router.post("/ingredients/{index}/converted", response_model=EditorState)
def edit_converted(index: int, body: FieldEdit) -> EditorState:
    recipe = _recipe_with_index(body.state, index)
    result = conversion.change_converted(recipe, input_from_model(body.state.rate), index, body.raw)
    logger.info(
        "editor.converted index=%s raw=%r rate_state=%s",
        index,
        body.raw,
        type(result.rate).__name__,
    )
    return editor_state(result.recipe, result.rate)
