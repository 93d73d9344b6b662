"""Configuration management for the forge mock service."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for the mock resource service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Server configuration
    HOST: str = Field(default="127.0.0.1", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Logging format: json or text")

    # Security settings
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["*"], description="CORS allowed origins")

    # Authentication bootstrap (no credential checks are performed)
    MOCK_ACCESS_TOKEN: str = Field(
        default="mock-jwt-token-12345",
        min_length=1,
        description="Static token handed out by /auth/login"
    )

    # Synthetic rate-limit headers on create responses
    ENABLE_RATE_LIMIT_HEADERS: bool = Field(default=True, description="Emit X-RateLimit-* headers on create")
    RATE_LIMIT_LIMIT: int = Field(default=1000, ge=1, description="Advertised request limit")
    RATE_LIMIT_COST: int = Field(default=5, ge=0, description="Fixed decrement reported as consumed")
    RATE_LIMIT_RESET_SECONDS: int = Field(default=3600, ge=1, le=86400, description="Seconds until advertised reset")

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level"""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator('LOG_FORMAT')
    @classmethod
    def validate_log_format(cls, v):
        """Validate log format"""
        valid_formats = ['json', 'text']
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of {valid_formats}")
        return v.lower()

    @property
    def cors_origins(self) -> list[str]:
        """Get CORS allowed origins."""
        return self.CORS_ORIGINS


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings (for dependency injection)"""
    return settings
