"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List, Literal, Optional
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port")

    # CORS Settings
    allowed_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    # Frontend
    static_dir: str = Field(
        default="public",
        description="Directory of the client-side frontend, mounted at / when present"
    )

    # Database Configuration
    mongo_uri: str = Field(
        default="mongodb://localhost:27017/flipball",
        description="MongoDB connection string"
    )
    mongodb_database: str = Field(
        default="flipball",
        description="Database name used when the connection string has none"
    )
    storage_backend: Literal["mongodb", "memory"] = Field(
        default="mongodb",
        description="Account store backend: mongodb or memory"
    )

    # Game
    game_random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the blue box random source (unseeded when empty)"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Observability
    logfire_token: str = Field(
        default="",
        description="Logfire observability token"
    )

    @field_validator("allowed_origins")
    @classmethod
    def parse_origins(cls, v: str) -> List[str]:
        """Parse comma-separated origins into a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("game_random_seed", mode="before")
    @classmethod
    def empty_seed_is_unseeded(cls, v):
        """Treat GAME_RANDOM_SEED= (empty) as no seed."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("mongo_uri")
    @classmethod
    def validate_mongo_uri(cls, v: str) -> str:
        """Validate that the connection string uses a MongoDB scheme."""
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGO_URI must start with mongodb:// or mongodb+srv://")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"

    @property
    def database_name(self) -> str:
        """
        Database named in the connection string path, e.g. ``flipball`` in
        ``mongodb://localhost:27017/flipball``.
        """
        path = urlsplit(self.mongo_uri).path.lstrip("/")
        return path or self.mongodb_database


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    return Settings()
