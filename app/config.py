"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="MealMuse", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # TheMealDB settings
    mealdb_base_url: str = Field(
        default="https://www.themealdb.com/api/json/v1/1",
        description="TheMealDB JSON API base URL",
    )
    default_category: str = Field(
        default="Dessert", description="Category used for random recipes"
    )

    # Wikimedia Commons settings
    wikimedia_api_url: str = Field(
        default="https://commons.wikimedia.org/w/api.php",
        description="Wikimedia Commons action API endpoint",
    )
    image_search_suffix: str = Field(
        default=" food", description="Text appended to fallback image searches"
    )
    image_search_limit: int = Field(
        default=5, ge=1, le=50, description="Maximum fallback image search hits"
    )

    # Outbound HTTP settings
    http_timeout_sec: float = Field(
        default=10.0, gt=0, description="Timeout for outbound API calls"
    )
    image_probe_timeout_sec: float = Field(
        default=5.0, gt=0, description="Timeout for image reachability probes"
    )
    user_agent: str = Field(
        default="MealMuse/1.0 (recipe fetcher)",
        description="User-Agent header sent to external APIs",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["GET"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(
        default="MealMuse API", description="API documentation title"
    )
    api_description: str = Field(
        default="Random and by-id recipes from TheMealDB with image fallback",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("mealdb_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


# Global settings instance
settings = Settings()
