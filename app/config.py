"""
Configuration module for the Pastes API.
Loads environment variables and provides config objects.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

TRUTHY = ("true", "1", "yes")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "8000"))
        self.DEBUG: bool = os.getenv("DEBUG", "False").lower() in TRUTHY
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        # Same default limit as a stock JSON body parser (100kb)
        self.MAX_BODY_BYTES: int = int(os.getenv("MAX_BODY_BYTES", "102400"))
        self.CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origins_list(self) -> List[str]:
        """CORS origins as a list, split on commas."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
