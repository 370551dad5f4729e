"""
SQLAlchemy engine and session. Supports SQLite (the pre-populated trivia file) and any client-server URL.
Read-only usage: one short-lived session per request or per script, always closed.
"""
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from app.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ships with FK enforcement off; restrict-on-delete needs it on every connection."""
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def make_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    """Create an engine; SQLite connections get check_same_thread=False and foreign keys on."""
    is_sqlite = database_url.startswith("sqlite")
    connect_args = kwargs.pop("connect_args", {})
    if is_sqlite:
        connect_args = {"check_same_thread": False, **connect_args}
    eng = create_engine(
        database_url,
        pool_pre_ping=not is_sqlite,
        connect_args=connect_args,
        echo=echo,
        **kwargs,
    )
    if is_sqlite:
        event.listen(eng, "connect", _enable_sqlite_foreign_keys)
    return eng


engine = make_engine(settings.database_url, echo=settings.sql_echo)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_sqlite_db(bind: Engine | None = None):
    """When using SQLite: create any missing tables. Existing (seeded) tables are left untouched."""
    bind = bind or engine
    if bind.dialect.name != "sqlite":
        return
    # Import all models so they register with Base before create_all
    from app.models import answer, category, difficulty, question, question_type, incorrect_answer  # noqa: F401
    Base.metadata.create_all(bind=bind)
    logger.info("SQLite init: schema ready at %s", bind.url.render_as_string(hide_password=True))


def get_db():
    """Dependency: yield a DB session, close after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope(factory: sessionmaker | None = None):
    """Context-managed session for scripts; closed on every exit path."""
    db = (factory or SessionLocal)()
    try:
        yield db
    finally:
        db.close()
