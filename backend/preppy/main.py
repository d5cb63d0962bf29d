from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from preppy.api.routes import router as api_router
from preppy.logging import configure_logging, get_logger
from preppy.storage.db import create_db_and_tables

app = FastAPI(title="Preppy Recipe Converter API")
logger = get_logger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
def on_startup() -> None:
    configure_logging()
    logger.info("startup: creating storage tables")
    create_db_and_tables()


app.include_router(api_router)
