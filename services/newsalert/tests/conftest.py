"""Shared fixtures for NewsAlert widget service tests."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

# Make helpers in this module importable from test files
# (needed with --import-mode=importlib).
sys.path.insert(0, str(Path(__file__).resolve().parent))

from na_common.models import AlertRecord, WidgetConfig  # noqa: E402

from newsalert.dom import Element  # noqa: E402
from newsalert.host import HostContext, HostEnvironment, StaticTokenProvider  # noqa: E402
from newsalert.list_client import ListClient  # noqa: E402
from newsalert.widget import AlertListWidget  # noqa: E402

SITE_URL = "https://contoso.sharepoint.com/sites/news"
LIST_NAME = "NewsAlerts"
ITEMS_URL = f"{SITE_URL}/_api/web/Lists/GetByTitle('{LIST_NAME}')/Items"
TOKEN = "test-token"


def make_record(
    title: str,
    *,
    position: float | None = 1,
    active: bool | None = True,
    description: str | None = "details",
    alert_type: Any = "Info",
) -> AlertRecord:
    """Build an :class:`AlertRecord` from its column values."""
    return AlertRecord.model_validate(
        {
            "Title": title,
            "Description": description,
            "AlertType": alert_type,
            "Active": active,
            "Position": position,
        }
    )


def items_body(*records: dict[str, Any]) -> dict[str, Any]:
    """Wrap raw list items in the store's ``{"value": [...]}`` envelope."""
    return {"value": list(records)}


def make_transport(
    handler: Callable[[httpx.Request], httpx.Response],
    seen: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Return a mock transport recording each request into *seen*."""

    def _handle(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return handler(request)

    return httpx.MockTransport(_handle)


def json_transport(body: Any, status: int = 200, seen: list[httpx.Request] | None = None):
    """Mock transport answering every request with *body* as JSON."""
    return make_transport(
        lambda _req: httpx.Response(status, content=json.dumps(body).encode()),
        seen,
    )


# ─── Fixtures ────────────────────────────────────────────────


@pytest.fixture()
def root_element() -> Element:
    return Element("newsAlertWebPart")


@pytest.fixture()
def host_context(root_element: Element) -> HostContext:
    return HostContext(
        site_url=SITE_URL,
        credentials=StaticTokenProvider(TOKEN),
        environment=HostEnvironment(host_name=None, is_local=False),
        dom_element=root_element,
    )


@pytest.fixture()
def widget_config() -> WidgetConfig:
    return WidgetConfig(list_name=LIST_NAME)


@pytest.fixture()
def scenario_a_items() -> dict[str, Any]:
    """Two active records out of order and one inactive record."""
    return items_body(
        {"Title": "A", "Description": "first", "AlertType": "Info", "Active": True, "Position": 2},
        {"Title": "B", "Description": "second", "AlertType": "Warning", "Active": True, "Position": 1},
        {"Title": "C", "Description": "hidden", "AlertType": "Info", "Active": False, "Position": 5},
    )


@pytest.fixture()
def make_widget(
    widget_config: WidgetConfig, host_context: HostContext,
) -> Callable[..., AlertListWidget]:
    """Factory building a widget whose list client uses the given transport."""

    def _make(
        transport: httpx.AsyncBaseTransport,
        *,
        config: WidgetConfig | None = None,
    ) -> AlertListWidget:
        client = ListClient(SITE_URL, host_context.credentials, transport=transport)
        return AlertListWidget(config or widget_config, host_context, list_client=client)

    return _make
