from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import DATABASE_URL


def get_engine_arguments(url: str) -> dict:
    """
    SQLite needs to be shared between threads, in-memory databases additionally
    need a single connection so every session sees the same tables.
    """

    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}

    arguments = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        arguments["poolclass"] = StaticPool
    return arguments


engine = create_engine(DATABASE_URL, **get_engine_arguments(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
