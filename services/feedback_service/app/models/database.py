import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from ..config.settings import settings

logger = logging.getLogger(__name__)

# Base class for ORM models to inherit from
Base = declarative_base()

engine = create_engine(settings.database_url, pool_pre_ping=True)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


def get_db():
    """Yield a session scoped to a single request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """
    Create the feedback table if it does not exist yet.

    Any failure here is fatal: it is logged and re-raised so that the
    server refuses to start.
    """
    bind = bind if bind is not None else engine
    try:
        Base.metadata.create_all(bind=bind)
    except Exception:
        logger.exception("Database schema bootstrap failed")
        raise
    logger.info("Database schema ready")
