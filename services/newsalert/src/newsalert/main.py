"""
NewsAlert service entry point.

Plays the host for a single :class:`AlertListWidget`: builds the host
context from settings, activates the widget on request, forwards theme
changes, and serves the resulting page region along with the
configuration schema, environment label, health, and metrics endpoints.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from prometheus_client import make_asgi_app

from na_common.config import Settings, get_settings
from na_common.logging import configure_logging
from na_common.models import Theme

from newsalert import health
from newsalert.dom import Element
from newsalert.errors import ListFetchError
from newsalert.host import HostContext, HostEnvironment, StaticTokenProvider
from newsalert.list_client import ListClient
from newsalert.widget import AlertListWidget

logger = structlog.get_logger()

ROOT_ELEMENT_ID = "newsAlertWebPart"


def build_widget(settings: Settings, *, list_client: ListClient | None = None) -> AlertListWidget:
    """Assemble the host context and widget described by *settings*."""
    credentials = StaticTokenProvider(settings.access_token)
    context = HostContext(
        site_url=settings.site_url,
        credentials=credentials,
        environment=HostEnvironment(
            host_name=settings.teams_host_name or None,
            is_local=settings.is_served_from_localhost,
        ),
        dom_element=Element(ROOT_ELEMENT_ID),
    )
    if list_client is None:
        list_client = ListClient(
            settings.site_url,
            credentials,
            timeout=settings.request_timeout_s,
        )
    return AlertListWidget(settings.widget_config(), context, list_client=list_client)


def _widget(request: Request) -> AlertListWidget:
    return request.app.state.widget


def create_app(
    settings: Settings | None = None,
    *,
    list_client: ListClient | None = None,
) -> FastAPI:
    """Build the FastAPI host adapter.

    Args:
        settings: Service settings (defaults to :func:`get_settings`).
        list_client: Optional list client override (used by tests).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Startup / shutdown lifecycle."""
        widget = build_widget(settings, list_client=list_client)
        app.state.widget = widget
        logger.info(
            "newsalert_started",
            list_name=widget.config.list_name,
            environment=widget.describe_environment(),
        )
        yield
        await widget.close()
        logger.info("newsalert_stopped")

    app = FastAPI(title="NewsAlert", version="0.1.0", lifespan=lifespan)
    app.include_router(health.router)
    app.mount("/metrics", make_asgi_app())

    @app.get("/widget", response_class=HTMLResponse)
    async def render_widget(request: Request) -> HTMLResponse:
        widget = _widget(request)
        try:
            await widget.activate()
        except ListFetchError as exc:
            # The page keeps its previous content.
            logger.warning("widget_render_skipped", error_type=type(exc).__name__)
        return HTMLResponse(widget.dom_element.outer_html)

    @app.get("/widget/environment")
    async def widget_environment(request: Request) -> dict[str, str]:
        return {"environment": _widget(request).describe_environment()}

    @app.post("/widget/theme")
    async def widget_theme(request: Request, theme: Theme | None = None) -> dict[str, str]:
        widget = _widget(request)
        widget.on_theme_changed(theme)
        return widget.dom_element.style.as_dict()

    @app.get("/widget/configuration")
    async def widget_configuration(request: Request) -> dict[str, Any]:
        return _widget(request).configuration_schema()

    return app


def main() -> None:
    """Run the host adapter under uvicorn."""
    settings = get_settings()
    configure_logging("newsalert", level=settings.log_level, json_logs=settings.log_json)
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
