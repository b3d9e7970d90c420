"""Client configuration management."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with environment variable support."""

    # Jamments API Configuration
    endpoint: str = ""
    cached_files_uri: str = ""
    timeout: float | None = None  # seconds, None disables the httpx timeout

    # Comment tree Configuration
    strict_parent_references: bool = False

    # Logging Configuration
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="JAMMENTS_", env_file=".env", env_file_encoding="utf-8"
    )


class ClientConfig(BaseModel):
    """Immutable endpoint/cache pair a client is built from."""

    endpoint: str = Field(..., description="Absolute base URL of the Jamments API")
    cached_files_uri: str = Field(
        ...,
        alias="cachedFilesURI",
        description="Path segment under which the static JSON files are served",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("endpoint")
    @classmethod
    def _clean_endpoint(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("endpoint must be a non-empty string")
        return value

    @field_validator("cached_files_uri")
    @classmethod
    def _clean_cached_files_uri(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value:
            raise ValueError("cachedFilesURI must be a non-empty string")
        return value


# Global settings instance
settings = Settings()
