"""
Configuration models for apiwire.

Pydantic-based models providing validation and documentation for every
setting, plus the environment-variable settings that override them.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from apiwire.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_MAX_WORKERS,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_TIMEOUT_SECONDS,
    MAX_WORKERS,
    MIN_LOG_FILE_SIZE_BYTES,
)
from apiwire.models import Endpoint, HeaderField


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class EndpointConfig(BaseModel):
    """Where the API lives."""

    host: str = Field(..., min_length=1, description="API host name")
    base_path: Optional[str] = Field(None, description="Path prefix for every request")
    name: Optional[str] = Field(None, description="Display name used in bulletins")

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        if "://" in v or "/" in v:
            raise ValueError("host must be a bare host name, without scheme or path")
        return v

    def to_endpoint(self) -> Endpoint:
        return Endpoint(host=self.host, base_path=self.base_path, name=self.name or self.host)


class ClientConfig(BaseModel):
    """API client behaviour."""

    authorization_header: str = Field(
        HeaderField.AUTHORIZATION,
        min_length=1,
        description="Header carrying the authorization token",
    )
    debug_print_requests: bool = Field(False, description="Log every outgoing request")
    timeout: float = Field(
        DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        le=MAX_TIMEOUT_SECONDS,
        description="Request timeout in seconds",
    )
    max_workers: int = Field(
        DEFAULT_MAX_WORKERS, ge=1, le=MAX_WORKERS, description="Concurrent sends"
    )
    credentials_file: Optional[Path] = Field(
        None, description="Encrypted authorization file (default: ~/.apiwire/authorization.enc)"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(f"output must contain only: {', '.join(sorted(valid_outputs))}")
        return v


class APIWireConfig(BaseModel):
    """Main apiwire configuration model."""

    endpoint: EndpointConfig
    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class APIWireSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    apiwire_host: Optional[str] = Field(None, alias="APIWIRE_HOST")
    apiwire_base_path: Optional[str] = Field(None, alias="APIWIRE_BASE_PATH")
    apiwire_endpoint_name: Optional[str] = Field(None, alias="APIWIRE_ENDPOINT_NAME")

    apiwire_authorization_header: Optional[str] = Field(
        None, alias="APIWIRE_AUTHORIZATION_HEADER"
    )
    apiwire_debug: Optional[bool] = Field(None, alias="APIWIRE_DEBUG")
    apiwire_timeout: Optional[float] = Field(None, alias="APIWIRE_TIMEOUT")
    apiwire_max_workers: Optional[int] = Field(None, alias="APIWIRE_MAX_WORKERS")
    apiwire_credentials_file: Optional[str] = Field(None, alias="APIWIRE_CREDENTIALS_FILE")

    apiwire_logging_level: Optional[str] = Field(None, alias="APIWIRE_LOGGING_LEVEL")
    apiwire_logging_format: Optional[str] = Field(None, alias="APIWIRE_LOGGING_FORMAT")
    apiwire_logging_output: Optional[str] = Field(None, alias="APIWIRE_LOGGING_OUTPUT")
    apiwire_logging_file_path: Optional[str] = Field(None, alias="APIWIRE_LOGGING_FILE_PATH")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
