"""
Configuration and connection-provider tests.
"""

import logging

from namebook import logger as logger_module
from namebook.config import Settings
from namebook.database import create_db_engine, normalize_database_url
from namebook.main import create_app


class TestSettings:

    def test_database_url_from_env(self, monkeypatch):
        monkeypatch.delenv("POSTGRES_URL", raising=False)
        monkeypatch.setenv("DATABASE_URL", "sqlite:///./from-env.db")
        assert Settings().DATABASE_URL == "sqlite:///./from-env.db"

    def test_postgres_url_is_accepted(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("POSTGRES_URL", "postgres://u:p@db.example.com:5432/verceldb")
        assert Settings().DATABASE_URL == "postgres://u:p@db.example.com:5432/verceldb"


class TestDatabaseUrl:

    def test_postgres_scheme_is_rewritten(self):
        assert (
            normalize_database_url("postgres://u:p@host/db")
            == "postgresql+psycopg2://u:p@host/db"
        )

    def test_other_urls_pass_through(self):
        for url in ("postgresql://u:p@host/db", "sqlite:///./data.db"):
            assert normalize_database_url(url) == url


class TestEngine:

    def test_engine_is_lazy(self, tmp_path):
        path = tmp_path / "lazy.db"
        engine = create_db_engine(f"sqlite:///{path}")
        assert engine.dialect.name == "sqlite"
        assert not path.exists()
        engine.dispose()

    def test_app_owns_one_engine(self, settings):
        app = create_app(settings)
        assert app.state.engine.url.database == settings.DATABASE_URL.removeprefix("sqlite:///")
        assert app.state.settings is settings
        app.state.engine.dispose()


class TestLogging:

    def test_existing_root_handlers_are_reused(self, monkeypatch):
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        monkeypatch.setattr(logger_module, "_configured", False)
        try:
            before = list(root.handlers)
            logger_module.get_logger("namebook.test")
            logger_module.get_logger("namebook.test")
            assert root.handlers == before
        finally:
            root.removeHandler(handler)

    def test_package_level_follows_settings(self, monkeypatch):
        monkeypatch.setattr(logger_module, "_configured", False)
        logger_module.configure_logging("debug")
        assert logging.getLogger("namebook").level == logging.DEBUG
        logger_module.configure_logging("info")  # already configured, ignored
        assert logging.getLogger("namebook").level == logging.DEBUG
        logging.getLogger("namebook").setLevel(logging.INFO)
