"""
Process-level settings for genkit.

Observability settings are read from ``GENKIT_*`` environment variables or a
``.env`` file using Pydantic Settings.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Observability settings with environment variable support.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="GENKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Logfire settings
    logfire_token: Optional[str] = Field(default=None)
    logfire_service_name: str = Field(default="genkit")
    logfire_environment: str = Field(default="development")
    logfire_send: bool = Field(
        default=False,
        description="Ship spans to Logfire (needs a token)"
    )
    logfire_console: bool = Field(
        default=False,
        description="Print spans to the console"
    )

    # Standard library logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Level of the genkit logger; an explicit LoggingConfig.log_level on an engine overrides it"
    )


settings = Settings()
