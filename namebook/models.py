from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Mapped, mapped_column

from namebook.database import Base


class Name(Base):
    """
    One contact row. The timestamp column is literally named "createdAt"
    (quoted identifier in Postgres); Python code uses created_at.
    """
    __tablename__ = "names"
    # never hand out an id again after the highest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), server_default=func.now()
    )


_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def insert_ignoring_duplicates(dialect_name: str, name: str, email: str):
    """INSERT INTO names (name, email) ... ON CONFLICT (email) DO NOTHING."""
    try:
        insert = _INSERT_BY_DIALECT[dialect_name]
    except KeyError:
        raise NotImplementedError(f"ON CONFLICT inserts are not supported for {dialect_name!r}")
    return (
        insert(Name)
        .values(name=name, email=email)
        .on_conflict_do_nothing(index_elements=["email"])
    )


class NameOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    email: str
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")
