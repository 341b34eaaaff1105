"""Logfire setup for the comments API.

Services call logfire directly:

    logfire.info("Comment created", comment_id=str(comment.id))

    with logfire.span("comment_service.delete_comment", comment_id=...):
        ...

This module only decides where the telemetry goes and which libraries are
traced automatically.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from lostfound.config import Settings

SERVICE_NAME = "lostfound-comments"

# Endpoint arguments that carry student credentials
CREDENTIAL_ARGUMENTS = frozenset({"authorization", "auth_token"})


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins; otherwise send only when a token is configured."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is created.

    Without OBSERVABILITY__LOGFIRE_TOKEN everything stays on the console.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _redact_credentials(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Keep endpoint arguments on the request span, minus tokens."""
    values = {
        name: value
        for name, value in attributes.get("values", {}).items()
        if name not in CREDENTIAL_ARGUMENTS
    }
    return {**attributes, "values": values}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_redact_credentials,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the queries run by the comment repositories.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
