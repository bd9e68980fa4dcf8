"""
Logfire and logging setup for applications embedding genkit.

The library itself only emits spans and log records; calling
``configure_observability`` once decides where they go.
"""

import logging
from typing import Optional

import logfire

from genkit.settings import Settings, settings as default_settings


def configure_observability(settings: Optional[Settings] = None) -> None:
    """Configure logfire and the ``genkit`` logger from settings."""
    settings = settings or default_settings

    logfire.configure(
        token=settings.logfire_token or None,
        service_name=settings.logfire_service_name,
        environment=settings.logfire_environment,
        send_to_logfire=settings.logfire_send and bool(settings.logfire_token),
        console=None if settings.logfire_console else False
    )

    logging.getLogger("genkit").setLevel(getattr(logging, settings.log_level))

    logfire.info(
        "Observability configured",
        service_name=settings.logfire_service_name,
        environment=settings.logfire_environment
    )
