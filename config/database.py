"""Database engine, session factory and the FastAPI session dependency."""
import logging
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from config import settings
from models.base_model import base
# Imported so that every table is registered on base.metadata
from models.category import CategoryModel  # noqa: F401

logger = logging.getLogger(__name__)

Base = base


def _engine_kwargs(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
    }


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    **_engine_kwargs(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session for the duration of one request.

    Repositories commit their own writes, so this only guarantees the
    session is closed (and any half-finished transaction rolled back).
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def create_tables() -> None:
    """Create all tables that do not exist yet."""
    logger.info("Ensuring database tables exist")
    Base.metadata.create_all(bind=engine)
