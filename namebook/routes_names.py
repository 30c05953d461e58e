# namebook/routes_names.py
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import FormData, UploadFile

from namebook import names
from namebook.database import get_engine
from namebook.logger import get_logger
from namebook.models import NameOut

logger = get_logger(__name__)

# A bad id only fails once it reaches the database: int() rejects non-numbers,
# drivers raise OverflowError for ids wider than the column.
ACTION_ERRORS = (SQLAlchemyError, ValueError, OverflowError)

# --- Router ------------------------------------------------------------------
router = APIRouter()

# --- Utilities ---------------------------------------------------------------


def form_value(data: FormData, key: str) -> Optional[str]:
    """
    A submitted field is either text or an uploaded file. For a file we take
    its filename, which is what browsers put there when the field is a file
    input. Empty and missing fields both come back as None.
    """
    value = data.get(key)
    if isinstance(value, UploadFile):
        value = value.filename
    if value is None:
        return None
    value = str(value)
    return value or None


def _required_id(data: FormData, operation: str) -> str:
    raw = form_value(data, "id")
    if raw is None:
        raise HTTPException(status_code=400, detail=f"ID is required for {operation} operation")
    return raw


def _wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


def _action_result(request: Request, payload: Dict[str, Any]):
    """Browsers posting the page's forms go back to the list; API clients get JSON."""
    if _wants_html(request):
        return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    return payload


# --- Routes ------------------------------------------------------------------


@router.get("/")
async def names_page(request: Request, engine: Engine = Depends(get_engine)):
    """
    Render the page with every stored contact.
    """
    rows = await run_in_threadpool(names.load_names, engine)
    return request.app.state.templates.TemplateResponse(
        request,
        "names.html",
        {"names": rows, "title": request.app.state.settings.APP_NAME},
    )


@router.get("/names")
async def names_data(engine: Engine = Depends(get_engine)):
    rows = await run_in_threadpool(names.load_names, engine)
    return {"names": [NameOut.model_validate(r).model_dump(mode="json", by_alias=True) for r in rows]}


@router.post("/create")
async def create_action(request: Request, engine: Engine = Depends(get_engine)):
    data = await request.form()
    name = form_value(data, "name")
    email = form_value(data, "email")
    if not email or not name:
        raise HTTPException(status_code=400, detail="Email and name are required for create operation")

    try:
        await run_in_threadpool(names.create_name, engine, name, email)
    except ACTION_ERRORS:
        logger.exception("Error creating user")
        raise HTTPException(status_code=500, detail="Failed to create user")
    return _action_result(request, {"success": True})


@router.post("/update")
async def update_action(request: Request, engine: Engine = Depends(get_engine)):
    data = await request.form()
    name_id = _required_id(data, "update")

    try:
        await run_in_threadpool(
            names.update_name,
            engine,
            int(name_id),
            name=form_value(data, "update_name"),
            email=form_value(data, "new_email"),
        )
    except ACTION_ERRORS:
        logger.exception("Error updating email")
        raise HTTPException(status_code=500, detail="Failed to update email")
    return _action_result(request, {"emailUpdated": True})


@router.post("/delete")
async def delete_action(request: Request, engine: Engine = Depends(get_engine)):
    data = await request.form()
    name_id = _required_id(data, "delete")

    try:
        await run_in_threadpool(names.delete_name, engine, int(name_id))
    except ACTION_ERRORS:
        logger.exception("Error deleting user")
        raise HTTPException(status_code=500, detail="Failed to delete user")
    return _action_result(request, {"success": True})
