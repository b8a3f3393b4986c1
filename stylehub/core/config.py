"""
Centralized configuration for the StyleHub API
"""
import json
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment and .env"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Settings
    API_TITLE: str = "StyleHub API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Storefront backend: catalog, WhatsApp checkout and admin panel"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "postgresql://localhost:5432/stylehub"
    DB_CONNECT_RETRIES: int = 3
    DB_RETRY_DELAY: float = 1.0

    # CORS - comma-separated string or JSON array
    # Example: "http://localhost:3000,https://stylehub.in" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000"

    # Admin authentication
    AUTH_SECRET: str = "change-me-in-production"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 720
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD_HASH: str = ""
    ADMIN_PASSWORD: str = "admin123"

    # Storefront
    STORE_NAME: str = "StyleHub"
    WHATSAPP_NUMBER: str = "919004401145"
    CURRENCY_SYMBOL: str = "₹"
    DEFAULT_PRODUCT_STOCK: int = 100
    ORDER_RATE_LIMIT_PER_MINUTE: int = 10
    SUGGESTIONS_RATE_LIMIT_PER_MINUTE: int = 120
    ALLOW_PUBLIC_SEED: bool = True

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()
