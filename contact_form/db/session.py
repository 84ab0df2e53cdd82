from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from contact_form.db.base import Base
from contact_form.db import models  # noqa: F401  (registers tables on Base)


class Database:
    """Engine and session factory for one application instance."""

    def __init__(self, url: str):
        connect_args = {}
        if make_url(url).get_backend_name() == "sqlite":
            # route handlers run in FastAPI's threadpool
            connect_args["check_same_thread"] = False
        self.engine = create_engine(url, pool_pre_ping=True, connect_args=connect_args)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
