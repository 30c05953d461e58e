# namebook/database.py
from __future__ import annotations

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase

from namebook.logger import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


def normalize_database_url(url: str) -> str:
    """
    Hosted Postgres providers hand out ``postgres://`` URLs, which SQLAlchemy
    no longer accepts. Map them onto the psycopg2 driver; leave anything else alone.
    """
    if url.startswith("postgres://"):
        return "postgresql+psycopg2://" + url[len("postgres://"):]
    return url


def create_db_engine(url: str) -> Engine:
    """
    Build the process-wide engine (and with it the connection pool).
    No connection is opened until the first query.
    """
    url = normalize_database_url(url)
    connect_args = {}
    if make_url(url).get_backend_name() == "sqlite":
        # request handlers run on the threadpool, not the thread that opened the connection
        connect_args["check_same_thread"] = False
    engine = create_engine(url, connect_args=connect_args)
    logger.info(f"Database engine created for {engine.url.render_as_string(hide_password=True)}")
    return engine


def get_engine(request: Request) -> Engine:
    """FastAPI dependency: the engine built by create_app()."""
    return request.app.state.engine
