"""Logfire setup and instrumentation.

Services log through logfire directly:

    import logfire

    with logfire.span("invite_service.create_invite", from_user_id=user_id):
        ...
        logfire.info("Invite created", invite_id=invite.id)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from breakloop.config import ObservabilitySettings, Settings

SERVICE_NAME = "breakloop-social"
SERVICE_VERSION = "0.1.0"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Explicit ``send_to_logfire`` wins, otherwise send iff a token is set."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Console output is always on. Telemetry leaves the process only when
    ``should_send_to_logfire`` says so.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = should_send_to_logfire(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
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
        send_to_logfire=send,
        has_token=bool(observability.logfire_token),
    )


def _request_attributes(request, attributes):
    """Add method, path and the acting user to request spans."""
    result = {**attributes}
    if hasattr(request, "method"):
        result["method"] = request.method
    if hasattr(request, "url"):
        result["path"] = request.url.path
    if hasattr(request, "headers") and request.headers.get("x-user-id"):
        result["user_id"] = request.headers["x-user-id"]
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request of ``app``."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement run through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented")
