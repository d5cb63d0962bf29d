from sqlmodel import SQLModel, Session, create_engine

from preppy.config import settings


def _connect_args(dsn: str) -> dict:
    # FastAPI runs sync endpoints in a threadpool.
    if dsn.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_dsn,
    connect_args=_connect_args(settings.database_dsn),
    pool_pre_ping=True,
)


def create_db_and_tables() -> None:
    SQLModel.metadata.create_all(engine)


def get_session() -> Session:
    return Session(engine)
