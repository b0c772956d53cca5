from typing import List, Optional
from pydantic import Field
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class CORSSettings(BaseSettings):
    """CORS configuration settings."""

    model_config = SettingsConfigDict(env_prefix="CORS_", extra="ignore")

    allowed_origins: List[str] = Field(default=["*"])
    allowed_methods: List[str] = Field(default=["*"])
    allowed_headers: List[str] = Field(default=["*"])
    allow_credentials: bool = Field(default=True)


class UploadSettings(BaseSettings):
    """Claims upload configuration settings."""

    model_config = SettingsConfigDict(env_prefix="UPLOAD_", extra="ignore")

    max_file_size: int = Field(default=10 * 1024 * 1024)  # 10MB in bytes
    encoding: str = Field(default="utf-8-sig")
    allowed_content_types: List[str] = Field(
        default=["text/csv", "application/vnd.ms-excel", "text/plain", "application/octet-stream"]
    )


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    level: str = Field(default="INFO")
    json_format: bool = Field(default=False)
    format: str = Field(default="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    file: Optional[str] = Field(default=None)
    max_bytes: int = Field(default=10 * 1024 * 1024)
    backup_count: int = Field(default=5)


class Settings(BaseSettings):
    PROJECT_NAME: str = Field(default="Claims Ingestion Service")
    VERSION: str = Field(default="1.0.0")
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)

    cors_settings: CORSSettings = Field(default_factory=CORSSettings)
    upload: UploadSettings = Field(default_factory=UploadSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", env_file_encoding="utf-8")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
