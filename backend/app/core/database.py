"""
Database connection and session management.
"""
import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import DATABASE_URL

logger = logging.getLogger(__name__)

if not DATABASE_URL:
    raise ValueError("DATABASE_URL not configured. Create app/config_local.py from config_local.example.py")


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # Route handlers run in a thread pool
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_recycle": 3600,  # Recycle connections after 1 hour
        "pool_size": 10,
        "max_overflow": 20,
        "pool_timeout": 60,
        "connect_args": {
            "connect_timeout": 30,
            "read_timeout": 300,
            "write_timeout": 300,
        } if "pymysql" in url else {},
    }


engine = create_engine(DATABASE_URL, echo=False, **_engine_options(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency for FastAPI to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        try:
            db.close()
        except Exception as e:
            # Connection may already be gone; the request outcome is already decided
            logger.warning(f"Error closing database session (connection may be lost): {str(e)}")
