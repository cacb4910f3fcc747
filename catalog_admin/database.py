"""Database configuration and session management."""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from catalog_admin.config import settings
from catalog_admin.utils.logger import logger


def _engine_options(database_url: str) -> dict:
    """Build engine options that bound how long a store call may block."""
    if database_url.startswith("sqlite"):
        return {
            "connect_args": {
                "check_same_thread": False,
                "timeout": settings.store_timeout_seconds,
            }
        }
    return {
        "pool_timeout": settings.store_timeout_seconds,
        "pool_pre_ping": True,
    }


# Create engine
engine = create_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options(settings.database_url),
)

# Create session factory
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)

# Create base class for models
Base = declarative_base()


def init_db():
    """Initialize database tables, then seed if empty."""
    import catalog_admin.models  # noqa: F401 - register all models with Base.metadata

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise

    if settings.seed_demo_data:
        from catalog_admin.seed import seed_if_empty

        db = SessionLocal()
        try:
            seed_if_empty(db)
        finally:
            db.close()
