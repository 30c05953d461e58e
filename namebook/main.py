# namebook/main.py
from __future__ import annotations

import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from starlette.staticfiles import StaticFiles

# local imports
from namebook.config import Settings, settings as default_settings
from namebook.database import create_db_engine
from namebook.logger import get_logger
from namebook.routes_names import router as names_router

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    app.state.engine.dispose()
    logger.info("Database engine disposed.")


# -----------------------------------------------------------------------------
# App factory
# -----------------------------------------------------------------------------
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    # --- Database -------------------------------------------------------------
    # One engine (and pool) per app; handlers get it through get_engine().
    app.state.settings = settings
    app.state.engine = create_db_engine(settings.DATABASE_URL)

    # --- Templates ------------------------------------------------------------
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.globals["now"] = lambda: datetime.now(timezone.utc)
    app.state.templates = templates

    # --- Static files (if you use /static) -----------------------------------
    if os.path.isdir("static"):
        app.mount("/static", StaticFiles(directory="static"), name="static")

    # --- Routes ---------------------------------------------------------------
    app.include_router(names_router, tags=["names"])

    logger.info(f"{settings.APP_NAME} started ({settings.ENV})")
    return app


# Uvicorn entrypoint expects "app"
app = create_app()
