"""
Settings for the pedometer service and command line
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with PEDOMETER_ prefix"""

    model_config = SettingsConfigDict(
        env_prefix="PEDOMETER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Service identification
    service_name: str = Field(
        default="pedometer",
        description="Name of the service for logging",
    )
    environment: str = Field(
        default="development",
        description="Deployment environment",
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="text", description="Log format: json or text"
    )

    # HTTP server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8015, description="Server port")

    # Diagnostics
    report_diagnostics: bool = Field(
        default=True,
        description="Emit threshold, rate and peak events for every analysis",
    )


settings = Settings()
