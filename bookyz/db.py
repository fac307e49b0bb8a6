# bookyz/db.py

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from .config import DATABASE_URL, SQL_ECHO


def make_engine(url: str = DATABASE_URL):
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}  # required for SQLite + FastAPI
    if url in ("sqlite://", "sqlite:///:memory:"):
        # one shared connection, otherwise every session sees an empty database
        kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=SQL_ECHO, **kwargs)


def init_db(engine) -> None:
    # models must be imported so their tables are registered on the metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
