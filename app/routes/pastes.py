"""
Paste routes.
Handles list, fetch and create. Validation and lookup run as dependencies,
so each handler only builds its success response.
"""
import logging

from fastapi import APIRouter, Depends

from app.database import PasteStore
from app.dependencies import body_has_text_property, get_store, paste_exists
from app.models import Paste, PasteCreate

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/pastes")
async def list_pastes(store: PasteStore = Depends(get_store)) -> dict:
    """List every paste in insertion order."""
    return {"data": [paste.to_response() for paste in store.list_pastes()]}


@router.get("/pastes/{paste_id}")
async def fetch_paste(paste: Paste = Depends(paste_exists)) -> dict:
    """
    Fetch a paste by id.

    Raises:
        NotFoundError: If the paste does not exist (404), via paste_exists
    """
    return {"data": paste.to_response()}


@router.post("/pastes", status_code=201)
async def create_paste(
    draft: PasteCreate = Depends(body_has_text_property),
    store: PasteStore = Depends(get_store),
) -> dict:
    """
    Create a new paste.

    Args:
        draft: The ``data`` object of the request, already checked for ``text``
        store: Paste store

    Returns:
        The stored paste, including its new id

    Raises:
        ValidationError: If ``data.text`` is missing (400), via body_has_text_property
    """
    paste = store.save_paste(draft)
    logger.debug(f"Created paste {paste.id} ({store.count} total)")
    return {"data": paste.to_response()}
