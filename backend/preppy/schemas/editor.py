from pydantic import BaseModel

from preppy.schemas.recipe import EditorState, RecipeModel
from preppy.services.status import Outcome


class FieldEdit(BaseModel):
    state: EditorState
    raw: str = ""


class NameEdit(BaseModel):
    state: EditorState
    name: str = ""


class ImportRequest(BaseModel):
    text: str


class ImportResponse(BaseModel):
    format: str
    state: EditorState


class StoredText(BaseModel):
    text: str = ""


class SaveRecipeRequest(BaseModel):
    recipe: RecipeModel


class StatusReport(BaseModel):
    outcome: Outcome


class StatusResponse(BaseModel):
    flags: dict[str, str] = {}
