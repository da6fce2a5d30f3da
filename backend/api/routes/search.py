"""
Search API routes (used by SearchForm.html).
"""
from typing import Optional

from fastapi import APIRouter, Depends, Form

from api.dependencies import get_inventory
from services.inventory import InventoryService
from settings import as_bool

router = APIRouter()


@router.post("")
def search_form(
    id: Optional[str] = Form(None),
    includePhoto: Optional[str] = Form(None),
    inventory: InventoryService = Depends(get_inventory),
):
    """Look an item up by id; the form checkbox sends includePhoto=on."""
    return inventory.search(id, include_photo=as_bool(includePhoto))


@router.get("")
def search_query(
    id: Optional[str] = None,
    includePhoto: Optional[str] = None,
    inventory: InventoryService = Depends(get_inventory),
):
    """Any non-empty includePhoto value asks for the photo URL."""
    return inventory.search(id, include_photo=bool(includePhoto))
