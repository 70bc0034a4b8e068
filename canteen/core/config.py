"""
Core configuration for the canteen API
"""
import os
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Configuration
    PROJECT_NAME: str = "MEC Canteen API"
    API_V1_STR: str = "/api/v1"

    # Storage backend: "local" (SQLite key-value store) or "firestore"
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "local")

    # Local key-value store
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./canteen.db"  # SQLite for development
    )

    # Firestore Configuration (credentials come from GOOGLE_APPLICATION_CREDENTIALS)
    FIRESTORE_PROJECT_ID: str = os.getenv("FIRESTORE_PROJECT_ID", "")
    FIRESTORE_DATABASE: str = os.getenv("FIRESTORE_DATABASE", "(default)")

    # Live updates
    POLL_INTERVAL_SECONDS: float = 5.0

    # CORS Configuration
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",  # Vite dev server
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "*",  # Allow all for development
    ]

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Global settings instance
settings = Settings()
