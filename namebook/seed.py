"""
namebook/seed.py
----------------
Creates the ``names`` table if it does not already exist and fills it with
a few sample rows. Run this module directly to prepare a fresh database:
    python -m namebook.seed
"""

from concurrent.futures import ThreadPoolExecutor

from sqlalchemy.engine import Engine
from sqlalchemy.schema import CreateTable

from namebook.logger import get_logger
from namebook.models import Name, insert_ignoring_duplicates

logger = get_logger(__name__)

SEED_NAMES = (
    ("Rohan", "rohan@tcl.com"),
    ("Rebecca", "rebecca@tcl.com"),
    ("Vivek", "vivek@gmail.com"),
)


def ensure_schema(engine: Engine) -> None:
    """CREATE TABLE IF NOT EXISTS names. Safe to call multiple times."""
    with engine.begin() as conn:
        conn.execute(CreateTable(Name.__table__, if_not_exists=True))
    logger.info('Ensured "names" table exists')


def _insert_one(engine: Engine, name: str, email: str) -> None:
    stmt = insert_ignoring_duplicates(engine.dialect.name, name, email)
    with engine.begin() as conn:
        conn.execute(stmt)


def seed(engine: Engine) -> int:
    """
    Ensure the table exists, then insert every SEED_NAMES row concurrently,
    each on its own pooled connection. Rows whose email is already present
    are skipped by the database.

    Returns:
        The number of seed statements executed.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: from table creation or any insert.
    """
    ensure_schema(engine)
    with ThreadPoolExecutor(max_workers=len(SEED_NAMES)) as pool:
        futures = [pool.submit(_insert_one, engine, name, email) for name, email in SEED_NAMES]
        # result() re-raises the first failing insert
        done = [f.result() for f in futures]
    logger.info(f"Seeded {len(done)} users")
    return len(done)


if __name__ == "__main__":
    from namebook.config import settings
    from namebook.database import create_db_engine

    _engine = create_db_engine(settings.DATABASE_URL)
    try:
        seed(_engine)
    finally:
        _engine.dispose()
    print("Database seeded successfully.")
