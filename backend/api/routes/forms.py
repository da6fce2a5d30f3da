"""
Static HTML forms for registering and searching items from a browser.
"""
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

router = APIRouter()

STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


@router.get("/RegisterForm.html", response_class=FileResponse, include_in_schema=False)
def register_form():
    return FileResponse(STATIC_DIR / "RegisterForm.html", media_type="text/html")


@router.get("/SearchForm.html", response_class=FileResponse, include_in_schema=False)
def search_form():
    return FileResponse(STATIC_DIR / "SearchForm.html", media_type="text/html")
