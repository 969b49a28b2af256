from typing import List, Literal, Optional

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FSKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="fskit", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment mode"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", description="Log output format"
    )

    dir_permissions: int = Field(
        default=0o755, description="Mode bits for directories created by fskit"
    )
    file_permissions: int = Field(
        default=0o644, description="Mode bits for files created by fskit"
    )
    copy_chunk_size: int = Field(
        default=64 * 1024, description="Buffer size in bytes used by copy_file"
    )

    image_formats: List[str] = Field(
        default=["PNG", "JPEG", "GIF"],
        description="Image container formats accepted by header decoding",
    )

    @field_validator("copy_chunk_size")
    @classmethod
    def validate_chunk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("copy_chunk_size must be positive")
        return v

    @field_validator("image_formats")
    @classmethod
    def validate_image_formats(cls, v: List[str]) -> List[str]:
        return [fmt.upper() for fmt in v]

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str, info: ValidationInfo) -> str:
        if info.data.get("environment") == "production":
            return "json"
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


settings = get_settings()
