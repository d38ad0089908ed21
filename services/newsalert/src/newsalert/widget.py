"""
Alert list widget for NewsAlert.

Owns the full widget lifecycle: on activation it writes its shell markup
and runs a render cycle; on theme change it copies three colour tokens
onto CSS custom properties; on request it describes the host environment.

Render cycle
------------
1. Read the configured list from the remote store (one request).
2. Keep records with ``Active = true`` and order them by ``Position``.
3. Render the records and replace the content of ``#spListContainer``.

A failed read aborts the cycle: the error is logged and re-raised, and the
container keeps whatever it showed before. Cycles are not serialised; two
overlapping cycles both write, and the later completion wins.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from typing import Any

import structlog

from na_common.metrics import render_cycles_total, rendered_alerts
from na_common.models import AlertRecord, Theme, WidgetConfig

from newsalert.dom import Element
from newsalert.environment import describe_environment
from newsalert.errors import ListFetchError
from newsalert.host import ClientSideWidget, HostContext
from newsalert.list_client import ListClient
from newsalert.renderer import render_markup
from newsalert.selection import select_and_order

logger = structlog.get_logger()

CONTAINER_ID = "spListContainer"
DATA_VERSION = "1.0"

SHELL_MARKUP = f'<section><div id="{CONTAINER_ID}"></div></section>'

# CSS custom property → semantic colour token.
THEME_VARIABLES: dict[str, str] = {
    "--bodyText": "body_text",
    "--link": "link",
    "--linkHovered": "link_hovered",
}


class WidgetState(str, enum.Enum):
    """Informational lifecycle state; never used to guard a cycle."""

    IDLE = "idle"
    RENDERING = "rendering"


class AlertListWidget(ClientSideWidget):
    """Displays the active alerts of a remote list, ordered by position.

    Args:
        config: Widget configuration supplied by the host.
        context: Host-supplied site URL, credentials, environment, and root element.
        list_client: Optional pre-built :class:`ListClient` (defaults to one
                     built from *context*).
    """

    def __init__(
        self,
        config: WidgetConfig,
        context: HostContext,
        *,
        list_client: ListClient | None = None,
    ) -> None:
        self.config = config
        self.context = context
        self.state = WidgetState.IDLE
        self._list_client = list_client or ListClient(context.site_url, context.credentials)

    @property
    def dom_element(self) -> Element:
        return self.context.dom_element

    @property
    def data_version(self) -> str:
        return DATA_VERSION

    # ── render cycle ──

    async def fetch_records(self) -> list[AlertRecord]:
        """Read all records of the configured list.

        Raises:
            ListFetchError: ``NetworkError`` or ``RemoteStoreError``; logged
                            before being re-raised.
        """
        try:
            return await self._list_client.get_items(self.config.list_name)
        except ListFetchError as exc:
            logger.error(
                "list_fetch_failed",
                list_name=self.config.list_name,
                request_url=exc.url,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise

    @staticmethod
    def select_and_order(records: Iterable[AlertRecord]) -> list[AlertRecord]:
        """Keep active records and sort them ascending by position."""
        return select_and_order(records)

    def render(self, records: Sequence[AlertRecord]) -> bool:
        """Replace the container content with markup for *records*.

        Returns:
            ``True`` if the container was written, ``False`` when it is
            missing (logged as ``render_target_missing``).
        """
        html = render_markup(records, title_font_size=self.config.title_font_size)
        container = self.dom_element.get_element_by_id(CONTAINER_ID)
        if container is None:
            logger.error("render_target_missing", container_id=CONTAINER_ID)
            return False
        container.inner_html = html
        rendered_alerts.set(len(records))
        logger.info("alert_list_rendered", count=len(records))
        return True

    async def render_cycle(self) -> None:
        """Fetch, select, and render once.

        Raises:
            ListFetchError: If the read fails; nothing is rendered.
        """
        log = logger.bind(list_name=self.config.list_name)
        self.state = WidgetState.RENDERING
        try:
            try:
                records = await self.fetch_records()
            except ListFetchError as exc:
                render_cycles_total.labels(outcome="fetch_failed").inc()
                log.error("render_cycle_failed", error=str(exc))
                raise
            selected = self.select_and_order(records)
            log.debug("records_selected", fetched=len(records), selected=len(selected))
            written = self.render(selected)
            render_cycles_total.labels(outcome="rendered" if written else "target_missing").inc()
        finally:
            self.state = WidgetState.IDLE

    # ── ClientSideWidget interface ──

    async def activate(self) -> None:
        """Write the shell markup, then run the first render cycle.

        Raises:
            ListFetchError: Propagated from :meth:`render_cycle`.
        """
        logger.info("environment_detected", environment=self.describe_environment())
        root = self.dom_element
        if root.get_element_by_id(CONTAINER_ID) is None:
            root.inner_html = SHELL_MARKUP
            root.clear_children()
            root.append_child(Element(CONTAINER_ID))
        await self.render_cycle()

    def on_theme_changed(self, theme: Theme | None) -> None:
        """Copy body text, link, and hovered link colours onto the root style.

        Tokens missing from the theme clear their variable.
        """
        if theme is None or theme.semantic_colors is None:
            return
        colors = theme.semantic_colors
        style = self.dom_element.style
        for variable, token in THEME_VARIABLES.items():
            style.set_property(variable, getattr(colors, token))
        logger.debug("theme_applied", variables=style.as_dict())

    def configuration_schema(self) -> dict[str, Any]:
        """Return the property pane: one page, one group, two text fields."""
        return {
            "pages": [
                {
                    "header": {"description": "Configure the news alert list"},
                    "groups": [
                        {
                            "groupName": "Basic settings",
                            "groupFields": [
                                {"type": "text", "targetProperty": "listName", "label": "List Name"},
                                {
                                    "type": "text",
                                    "targetProperty": "titleFontSize",
                                    "label": "Title Font Size",
                                },
                            ],
                        },
                    ],
                },
            ],
        }

    def describe_environment(self) -> str:
        """Return the label for the host surface the widget is running in."""
        return describe_environment(self.context.environment)

    async def close(self) -> None:
        """Release the remote list client."""
        await self._list_client.close()
