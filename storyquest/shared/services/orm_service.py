"""
Database engine and session management.
Contains the session dependency used by every router.
"""
import logging
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from storyquest.config import DATABASE_URL
from storyquest.business.models import Base

logger = logging.getLogger(__name__)

# SQLite needs to share connections with the threadpool FastAPI runs sync work on
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Database setup
engine = create_engine(DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """
    Verify the database is reachable and create any missing tables.
    Raises if the connection cannot be established.
    """
    bind = bind or engine
    try:
        with bind.connect() as connection:
            connection.execute(text("SELECT 1"))
    except Exception:
        logger.exception(f"[init_db] Unable to connect to the database at {bind.url!r}")
        raise
    Base.metadata.create_all(bind=bind)
    logger.info("[init_db] Database connection has been established successfully.")


def get_db():
    """
    Dependency that provides a database session.
    Automatically closes the session after the request is complete.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
