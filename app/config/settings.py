"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def parse_environment(value) -> Environment:
    """Normalize an environment name, accepting the short "test" alias"""
    if isinstance(value, Environment):
        return value
    value = str(value).strip().lower()
    if value == "test":
        return Environment.TESTING
    return Environment(value)


class S3Settings(BaseSettings):
    """Object store configuration for product images"""

    bucket_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("S3_BUCKET_URL", "NEXT_PUBLIC_S3_BUCKET_URL", "bucket_url"),
        description="Base URL of the bucket serving product images",
    )
    placeholder_image_url: str = Field(default="/placeholder.jpg")
    max_product_images: int = Field(default=10, ge=1, le=20)

    @field_validator("bucket_url", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    model_config = {
        "env_prefix": "S3_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }


class MonitoringSettings(BaseSettings):
    """Request instrumentation configuration"""

    slow_request_threshold_ms: int = Field(default=1000, ge=1)

    model_config = {"env_prefix": "MONITORING_"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="meo-stationery")
    app_version: str = Field(
        default="1.0.0",
        validation_alias=AliasChoices("APP_VERSION", "npm_package_version", "app_version"),
    )
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias=AliasChoices("ENVIRONMENT", "environment"),
    )
    node_env: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("NODE_ENV", "node_env"),
        description="Raw runtime environment name, reported as-is by the health check",
    )
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Database Configuration
    database_url: str = Field(default="sqlite:///./meo_stationery.db")
    database_echo: bool = Field(default=False)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", description="json or text")

    # Nested Settings
    s3: S3Settings = Field(default_factory=S3Settings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        return parse_environment(v)

    @field_validator("node_env", mode="before")
    @classmethod
    def blank_node_env_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def reported_environment(self) -> str:
        """Environment name shown to clients: NODE_ENV verbatim, else the deployment environment"""
        return self.node_env or self.environment.value

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
