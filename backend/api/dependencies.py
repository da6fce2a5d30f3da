from typing import Optional

from fastapi import Request, UploadFile

from domain.models import PhotoUpload
from services.inventory import InventoryService


def get_inventory(request: Request) -> InventoryService:
    """FastAPI dependency returning the service built at app creation."""
    return request.app.state.inventory


def to_photo_upload(photo: Optional[UploadFile]) -> Optional[PhotoUpload]:
    """Wrap a multipart file; an empty file field counts as no upload."""
    if photo is None or not photo.filename:
        return None
    return PhotoUpload(filename=photo.filename, data=photo.file)
