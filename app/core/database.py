import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)

if settings.DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        settings.DATABASE_URL,
        connect_args={"check_same_thread": False}
    )
else:
    engine = create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,  # Connection pool size
        max_overflow=20  # Allow up to 20 connections beyond pool_size
    )

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


def init_db():
    """
    Initialize database.

    Tables are created by Alembic ("alembic upgrade head"), so this only
    registers the models and seeds the skill catalog when enabled.
    """
    from app import models  # noqa: F401  Import models to register them
    from app.crud import skill as skill_crud

    if not settings.SEED_SKILL_CATALOG:
        logger.info("Skill catalog seeding disabled")
        return

    db = SessionLocal()
    try:
        added = skill_crud.seed_catalog(db)
        logger.info(f"Skill catalog seeded ({added} new skills)")
    finally:
        db.close()
