import re

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import PlainTextResponse

from preppy.config import settings
from preppy.logging import get_logger
from preppy.schemas.editor import ImportRequest, ImportResponse, SaveRecipeRequest, StoredText
from preppy.schemas.recipe import EditorState, editor_state, recipe_from_model
from preppy.services.fetch.page_client import PageFetchError, page_client
from preppy.services.parsing.errors import RecipeParseError
from preppy.services.parsing.markdown_list import to_markdown
from preppy.services.parsing.recipe_parser import load_document, parse_recipe_text
from preppy.services.recipe import Recipe
from preppy.services.status import Outcome, StatusFlag, status_board
from preppy.storage.db import get_session
from preppy.storage.repositories import load_text, save_text

router = APIRouter()
logger = get_logger(__name__)

NOT_A_RECIPE = "not a recipe"


def _export_filename(name: str) -> str:
    stem = re.sub(r"[^A-Za-z0-9_-]+", "-", name.strip()).strip("-").lower() or "recipe"
    return stem + settings.export_filename_suffix


def _import(text: str) -> ImportResponse:
    try:
        document = load_document(text, page_client)
    except PageFetchError as e:
        status_board.report(StatusFlag.LOAD, Outcome.FAILURE)
        raise HTTPException(status_code=502, detail=str(e))
    except RecipeParseError:
        status_board.report(StatusFlag.LOAD, Outcome.FAILURE)
        raise HTTPException(status_code=422, detail=NOT_A_RECIPE)
    status_board.report(StatusFlag.LOAD, Outcome.SUCCESS)
    return ImportResponse(format=document.format, state=editor_state(document.recipe))


@router.get("/storage", response_model=StoredText)
def get_storage() -> StoredText:
    with get_session() as session:
        return StoredText(text=load_text(session, settings.storage_key))


@router.put("/storage", response_model=StoredText)
def put_storage(body: StoredText) -> StoredText:
    with get_session() as session:
        save_text(session, settings.storage_key, body.text)
    return body


@router.get("/recipe", response_model=EditorState)
def get_recipe() -> EditorState:
    """Current document. A blank or unreadable store yields a fresh recipe."""
    with get_session() as session:
        text = load_text(session, settings.storage_key)
    if not text:
        return editor_state(Recipe.new(settings.new_recipe_name))
    try:
        document = parse_recipe_text(text)
    except RecipeParseError:
        logger.warning("recipe.stored_unreadable key=%s length=%s", settings.storage_key, len(text))
        return editor_state(Recipe.new(settings.new_recipe_name))
    return editor_state(document.recipe)


@router.put("/recipe", response_model=StoredText)
def put_recipe(body: SaveRecipeRequest) -> StoredText:
    text = to_markdown(recipe_from_model(body.recipe))
    with get_session() as session:
        save_text(session, settings.storage_key, text)
    return StoredText(text=text)


@router.post("/recipes/import", response_model=ImportResponse)
def import_recipe(body: ImportRequest) -> ImportResponse:
    logger.info("recipes.import.start length=%s", len(body.text))
    return _import(body.text)


@router.post("/recipes/upload", response_model=ImportResponse)
async def upload_recipe(file: UploadFile = File(...)) -> ImportResponse:
    content = await file.read()
    logger.info("recipes.upload.start filename=%s bytes=%s", file.filename, len(content))
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("recipes.upload.not_utf8 filename=%s", file.filename)
        status_board.report(StatusFlag.LOAD, Outcome.FAILURE)
        raise HTTPException(status_code=400, detail="file is not UTF-8 text")
    return _import(text)


@router.post("/recipes/export")
def export_recipe(body: SaveRecipeRequest) -> PlainTextResponse:
    recipe = recipe_from_model(body.recipe)
    filename = _export_filename(recipe.name)
    logger.info("recipes.export filename=%s ingredients=%s", filename, len(recipe.ingredients))
    return PlainTextResponse(
        to_markdown(recipe),
        media_type="text/markdown",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
