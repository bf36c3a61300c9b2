from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from spinwin.core.config import settings


class Base(DeclarativeBase):
    pass


def engine_options(url: str, sslmode: str | None = None) -> dict:
    connect_args: dict = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    elif sslmode:
        connect_args["sslmode"] = sslmode
    return {"connect_args": connect_args, "pool_pre_ping": True}


engine = create_engine(
    settings.DATABASE_URL,
    **engine_options(settings.DATABASE_URL, settings.DATABASE_SSLMODE),
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
