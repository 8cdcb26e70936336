"""
Environment configuration for the Eco-Stay Connect client.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ecostay.core.exceptions import ConfigurationError

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    # Application configuration
    APP_NAME: str = "Eco-Stay Connect"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Remote store (hosted database-as-a-service); the Vite names are
    # accepted so a shared .env keeps working
    SUPABASE_URL: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SUPABASE_URL", "VITE_SUPABASE_URL"),
    )
    SUPABASE_ANON_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY"),
    )
    STORE_TIMEOUT_SECONDS: Optional[float] = None
    PHOTO_BUCKET: str = "event-photos"
    VIDEO_BUCKET: str = "event-videos"

    # Chat proxy
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash"
    CHAT_PROXY_URL: str = "http://localhost:5174/api/gemini"
    HOST: str = "0.0.0.0"
    PORT: int = 5174
    CORS_ORIGINS: List[str] = Field(default=["*"])

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE: Optional[str] = None

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse CORS_ORIGINS from string to list"""
        if isinstance(v, str):
            # Handle JSON string format from .env
            if v.startswith('[') and v.endswith(']'):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    def require_store_config(self) -> None:
        """Fail fast when the remote store cannot be reached at all."""
        if not self.SUPABASE_URL or not self.SUPABASE_ANON_KEY:
            raise ConfigurationError(
                "Missing Supabase environment variables",
                details={
                    "SUPABASE_URL": bool(self.SUPABASE_URL),
                    "SUPABASE_ANON_KEY": bool(self.SUPABASE_ANON_KEY),
                },
            )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
