"""
FastAPI application entry point.

Run with: uvicorn --factory api.main:create_app --reload
or:       python cli.py --host 0.0.0.0 --port 3000 --cache ./uploads
"""
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.errors import register_error_handlers
from api.routes import forms, items, search
from repositories import build_item_store
from services.inventory import InventoryService
from settings import Settings, settings as default_settings
from storage.file_storage import FileStorage


def build_inventory(app_settings: Settings) -> InventoryService:
    """Wire the configured item store and the cache directory into one service."""
    return InventoryService(
        items=build_item_store(app_settings),
        assets=FileStorage(app_settings.CACHE_PATH),
    )


def create_app(
    app_settings: Optional[Settings] = None,
    inventory: Optional[InventoryService] = None,
) -> FastAPI:
    app_settings = app_settings or default_settings
    app = FastAPI(
        title="Inventory Service API",
        description="Catalog of inventory items with one optional photo each",
        version="1.0.0",
    )
    app.state.settings = app_settings
    app.state.inventory = inventory or build_inventory(app_settings)

    # CORS middleware for the HTML forms and other browser clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(items.router, tags=["inventory"])
    app.include_router(search.router, prefix="/search", tags=["search"])
    app.include_router(forms.router)

    @app.on_event("startup")
    def startup_event():
        """Initialize the item store (tables) on startup."""
        app.state.inventory.items.init_schema()

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
