from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


def build_engine(database_url: str) -> Engine:
    """
    Create the SQLAlchemy engine for ``database_url``.

    SQLite needs ``check_same_thread=False`` because FastAPI runs sync routes
    in a threadpool; an in-memory SQLite database additionally has to share a
    single connection or every session would see an empty database.
    """
    kwargs = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    # Objects stay readable after commit (e.g. a just-deleted user is still
    # serialized in the DELETE response).
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
