"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and `init_db`, which creates the
tables and seeds the exercise and food catalogues when they are empty.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from core import config
from core.logger import get_logger
from .models import Base, Exercise, FoodItem
from data.seed_data import EXERCISES, FOOD_ITEMS

logger = get_logger("database")


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's worker threads.
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


write_engine = create_engine(config.WRITE_DATABASE_URL, connect_args=_connect_args(config.WRITE_DATABASE_URL))
read_engine = create_engine(config.READ_DATABASE_URL, connect_args=_connect_args(config.READ_DATABASE_URL))

WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def init_db(seed: bool = config.SEED_DATA):
    """Create all tables and, if `seed` is set, fill empty catalogues.

    Seeding is per table: exercises and food items are each only inserted
    when their table has no rows.
    """
    Base.metadata.create_all(bind=write_engine)
    if not seed:
        return
    session = WriteSessionLocal()
    try:
        if session.query(Exercise).count() == 0:
            session.add_all(Exercise(**item) for item in EXERCISES)
            logger.info("Seeded %s exercises", len(EXERCISES))
        if session.query(FoodItem).count() == 0:
            session.add_all(FoodItem(**item) for item in FOOD_ITEMS)
            logger.info("Seeded %s food items", len(FOOD_ITEMS))
        session.commit()
    finally:
        session.close()


def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope."""
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used for read endpoints where routing reads to a replica may be desired.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
