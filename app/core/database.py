import logging
import re
from typing import Any, Dict, List, Mapping, Sequence

from sqlalchemy import create_engine, event, text
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import Session, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)


def create_db_engine(url: str, **kwargs):
    """
    Create a SQLAlchemy engine for the given URL.

    SQLite connections get foreign key enforcement switched on so the
    jobs -> companies reference behaves the same as on PostgreSQL.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)  # Verify connections before using them

    db_engine = create_engine(url, **kwargs)

    if db_engine.dialect.name == "sqlite":
        @event.listens_for(db_engine, "connect")
        def _enable_sqlite_fks(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


# Create SQLAlchemy engine
engine = create_db_engine(settings.DATABASE_URL)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """
    Initialize database.

    Imports the models so they register on Base.metadata. Tables are created
    by "alembic upgrade head"; set AUTO_CREATE_TABLES for throwaway
    databases (local SQLite, demos).
    """
    from app.models import company, job  # noqa: F401  Import models to register them
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=bind or engine)


_PLACEHOLDER = re.compile(r"\$(\d+)")


def bind_positional(statement: str, params: Sequence[Any]) -> tuple:
    """
    Rewrite `$1..$n` placeholders as named binds.

    Returns (statement, {"p1": ..., "pn": ...}) suitable for
    sqlalchemy.text(). Raises ValueError when the statement references a
    position that has no parameter.
    """
    bound: Dict[str, Any] = {f"p{i}": value for i, value in enumerate(params, start=1)}

    def _replace(match):
        name = f"p{match.group(1)}"
        if name not in bound:
            raise ValueError(f"No parameter for placeholder ${match.group(1)}")
        return f":{name}"

    return _PLACEHOLDER.sub(_replace, statement), bound


def execute(db: Session, statement: str, params: Sequence[Any] = ()) -> List[Mapping[str, Any]]:
    """
    Execute a `$n`-parameterized statement and return its rows as dicts.

    Statements without a result set (no RETURNING) return an empty list.
    Does not commit; callers own the transaction.
    """
    sql, bound = bind_positional(statement, params)
    logger.debug("SQL: %s | params: %s", " ".join(sql.split()), bound)

    result = db.execute(text(sql), bound)
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]
