"""
Inventory API routes.

Handlers are plain `def` so FastAPI runs them in its threadpool; the
database and filesystem calls they make are blocking.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import FileResponse
from pydantic import BaseModel

from api.dependencies import get_inventory, to_photo_upload
from domain.models import Item
from services.inventory import InventoryService

router = APIRouter()


class ItemResponse(BaseModel):
    id: int
    inventory_name: str
    description: str
    photoFile: Optional[str] = None


class ItemUpdate(BaseModel):
    inventory_name: Optional[str] = None
    description: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


def item_to_response(item: Item) -> ItemResponse:
    """Convert domain Item to API response."""
    return ItemResponse(**item.to_dict())


@router.post("/register", response_model=ItemResponse, status_code=201)
def register_item(
    inventory_name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    inventory: InventoryService = Depends(get_inventory),
):
    """Register a new item, optionally with a photo."""
    item = inventory.register(inventory_name, description, to_photo_upload(photo))
    return item_to_response(item)


@router.get("/inventory", response_model=List[ItemResponse])
def list_items(inventory: InventoryService = Depends(get_inventory)):
    """List all items in ascending id order."""
    return [item_to_response(i) for i in inventory.list_items()]


@router.get("/inventory/{item_id}", response_model=ItemResponse)
def get_item(item_id: int, inventory: InventoryService = Depends(get_inventory)):
    return item_to_response(inventory.get_item(item_id))


@router.put("/inventory/{item_id}", response_model=ItemResponse)
def update_item(
    item_id: int,
    data: Optional[ItemUpdate] = None,
    inventory: InventoryService = Depends(get_inventory),
):
    """Update the name and/or description. The photo is left alone."""
    data = data or ItemUpdate()
    item = inventory.update_metadata(item_id, name=data.inventory_name, description=data.description)
    return item_to_response(item)


@router.get("/inventory/{item_id}/photo", response_class=FileResponse)
def get_photo(item_id: int, inventory: InventoryService = Depends(get_inventory)):
    return FileResponse(inventory.photo_path(item_id))


@router.put("/inventory/{item_id}/photo", response_model=ItemResponse)
def replace_photo(
    item_id: int,
    photo: Optional[UploadFile] = File(None),
    inventory: InventoryService = Depends(get_inventory),
):
    """Replace the item's photo; the previous file is deleted."""
    item = inventory.replace_photo(item_id, to_photo_upload(photo))
    return item_to_response(item)


@router.delete("/inventory/{item_id}", response_model=MessageResponse)
def delete_item(item_id: int, inventory: InventoryService = Depends(get_inventory)):
    """Delete an item together with its photo."""
    inventory.delete_item(item_id)
    return MessageResponse(message="Deleted")
