"""
namebook/names.py
-----------------
Data access for the ``names`` table: the page loader plus the three
single-statement write operations behind the form actions.
"""

from typing import List, Optional

from sqlalchemy import delete, func, inspect, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session

from namebook.logger import get_logger
from namebook.models import Name, insert_ignoring_duplicates
from namebook.seed import seed

logger = get_logger(__name__)


# ── READ ──────────────────────────────────────────────

def _select_all(engine: Engine) -> List[Name]:
    with Session(engine) as db:
        return list(db.scalars(select(Name).order_by(Name.id)).all())


def _table_missing(engine: Engine) -> bool:
    return not inspect(engine).has_table(Name.__tablename__)


def load_names(engine: Engine) -> List[Name]:
    """
    Fetch every contact for the page.

    If the read fails because the table does not exist yet, create and seed it,
    then read once more. Any other database fault, and any failure of the
    second read, propagates to the caller.
    """
    try:
        return _select_all(engine)
    except DBAPIError:
        if not _table_missing(engine):
            raise
        logger.warning("Table does not exist, creating and seeding it with dummy data now...")
    seed(engine)
    return _select_all(engine)


# ── WRITE ─────────────────────────────────────────────

def create_name(engine: Engine, name: str, email: str) -> bool:
    """
    Insert a contact. An email that is already stored is a silent no-op.

    Returns:
        True if a row was added, False if the email already existed.
    """
    conn = engine.connect()
    try:
        result = conn.execute(insert_ignoring_duplicates(engine.dialect.name, name, email))
        conn.commit()
        created = result.rowcount > 0
        if created:
            logger.info(f"Created contact {email}")
        return created
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to create contact {email}: {e}")
        raise
    finally:
        conn.close()


def update_name(
    engine: Engine, name_id: int, name: Optional[str] = None, email: Optional[str] = None
) -> bool:
    """
    Replace name and/or email of one contact; a None value keeps the stored one.

    Returns:
        True if a row matched ``name_id``.
    """
    stmt = (
        update(Name)
        .where(Name.id == name_id)
        .values(
            email=func.coalesce(email, Name.email),
            name=func.coalesce(name, Name.name),
        )
    )
    conn = engine.connect()
    try:
        result = conn.execute(stmt)
        conn.commit()
        return result.rowcount > 0
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to update contact #{name_id}: {e}")
        raise
    finally:
        conn.close()


def delete_name(engine: Engine, name_id: int) -> bool:
    """
    Delete a contact by id. A missing id is not an error.

    Returns:
        True if a row was deleted.
    """
    conn = engine.connect()
    try:
        result = conn.execute(delete(Name).where(Name.id == name_id))
        conn.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted contact #{name_id}")
        return deleted
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to delete contact #{name_id}: {e}")
        raise
    finally:
        conn.close()
