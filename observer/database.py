import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from observer.config import settings
from observer.services.errors import ConnectionFailure

LOGGER = logging.getLogger(__name__)

Base = declarative_base()

engine: Engine | None = None
SessionLocal: sessionmaker | None = None


def _build_database_url(raw_url: str) -> str:
    if raw_url.startswith("postgresql://"):
        return raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
    return raw_url


def init_db(database_url: str | None = None) -> Engine:
    """Build the process-wide engine and session factory and create the tables.

    Called once during startup; every store operation shares the handle built
    here. Raises ConnectionFailure when the URL is missing or the database
    cannot be reached.
    """
    global engine, SessionLocal

    url = _build_database_url((database_url or settings.database_url).strip())
    if not url:
        raise ConnectionFailure(
            "Required environment variable OBSERVER_DATABASE_URL is missing."
        )

    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    try:
        new_engine = create_engine(
            url,
            pool_pre_ping=True,
            echo=settings.sql_echo,
            connect_args=connect_args,
        )
        from observer.models.schema import entry as _entry  # noqa: F401
        from observer.models.schema import token as _token  # noqa: F401

        with new_engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=new_engine)
    except SQLAlchemyError as exc:
        raise ConnectionFailure(f"Unable to connect to the database: {exc}") from exc

    if engine is not None:
        engine.dispose()
    engine = new_engine
    SessionLocal = sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
    )
    LOGGER.info("Database ready dialect=%s", engine.dialect.name)
    return engine


def close_db() -> None:
    global engine, SessionLocal
    if engine is not None:
        engine.dispose()
    engine = None
    SessionLocal = None


@contextmanager
def session_scope():
    if SessionLocal is None:
        raise ConnectionFailure("Database is not initialized")
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
