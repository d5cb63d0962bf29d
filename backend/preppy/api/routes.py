from fastapi import APIRouter

from preppy.api.editor import router as editor_router
from preppy.api.health import router as health_router
from preppy.api.recipes import router as recipes_router
from preppy.api.status import router as status_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(editor_router)
router.include_router(recipes_router)
router.include_router(status_router)
