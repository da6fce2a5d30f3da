import os
from pathlib import Path
from typing import Optional
from urllib.parse import quote_plus

# Basic settings helper to read environment configuration.

BASE_DIR = Path(__file__).resolve().parent


def as_bool(val: Optional[str], default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    host = os.getenv("DB_HOST")
    if host:
        user = os.getenv("DB_USER", "")
        password = quote_plus(os.getenv("DB_PASSWORD", ""))
        name = os.getenv("DB_NAME", "")
        port = os.getenv("DB_PORT", "5432")
        return f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}"
    return f"sqlite:///{BASE_DIR / 'inventory.db'}"


class Settings:
    def __init__(self) -> None:
        self.SERVER_HOST: str = os.getenv("SERVER_HOST", "0.0.0.0")
        self.SERVER_PORT: int = int(os.getenv("SERVER_PORT", "3000"))
        self.CACHE_PATH: str = os.getenv("CACHE_PATH", "./uploads")
        self.ITEM_STORE: str = os.getenv("ITEM_STORE", "sql").strip().lower()
        self.DATABASE_URL: str = _database_url()
        self.DATABASE_ECHO: bool = as_bool(os.getenv("DATABASE_ECHO"), False)
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
