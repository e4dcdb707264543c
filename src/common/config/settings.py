"""Application settings and environment variables."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_DATABASE: str = os.getenv("DB_NAME", "inventory_db")
    DB_USER: str = os.getenv("DB_USER", "user")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "password")

    INVENTORY_API_BASE_URL: Optional[str] = os.getenv("INVENTORY_API_BASE_URL")
    INVENTORY_API_TOKEN: Optional[str] = os.getenv("INVENTORY_API_TOKEN")
    INVENTORY_API_TIMEOUT: int = int(os.getenv("INVENTORY_API_TIMEOUT", "30"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE")  # Also write plain-text logs here when set
    LOG_SHOW_PATH: bool = os.getenv("LOG_SHOW_PATH", "false").lower() in ("1", "true", "yes")


settings = Settings()
