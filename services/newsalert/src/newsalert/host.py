"""
Host contract for the NewsAlert widget.

The host platform activates the widget, notifies it of theme changes, and
asks for its configuration schema through :class:`ClientSideWidget`. Site
URL, credentials, the environment descriptor, and the root page element
come in explicitly through :class:`HostContext`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from na_common.models import Theme

from newsalert.dom import Element


class CredentialProvider(ABC):
    """Supplies the bearer token attached to remote list requests."""

    @abstractmethod
    async def get_token(self) -> str | None:
        """Return a bearer token, or ``None`` to send the request unauthenticated."""
        ...  # pragma: no cover


class StaticTokenProvider(CredentialProvider):
    """Credential provider returning a fixed token.

    Args:
        token: Bearer token; an empty string means no ``Authorization`` header.
    """

    def __init__(self, token: str | None) -> None:
        self._token = token or None

    async def get_token(self) -> str | None:
        return self._token


@dataclass(frozen=True)
class HostEnvironment:
    """Where the widget is running.

    Attributes:
        host_name: Host surface reported by the Teams SDK (``Office``,
                   ``Outlook``, ``Teams``, ``TeamsModern``, …). ``None``
                   when there is no Teams context, i.e. a plain SharePoint page.
        is_local: Whether the widget is served from a local dev origin.
    """

    host_name: str | None = None
    is_local: bool = False


@dataclass
class HostContext:
    """Everything the host supplies to the widget at construction.

    Attributes:
        site_url: Absolute URL of the current site.
        credentials: Token source for remote list requests.
        environment: Host surface descriptor.
        dom_element: Root element the widget owns.
    """

    site_url: str
    credentials: CredentialProvider
    environment: HostEnvironment
    dom_element: Element


class ClientSideWidget(ABC):
    """Lifecycle hooks the host invokes on an embedded widget."""

    @abstractmethod
    async def activate(self) -> None:
        """Write the widget's shell markup and run the first render."""
        ...  # pragma: no cover

    @abstractmethod
    def on_theme_changed(self, theme: Theme | None) -> None:
        """Apply colour tokens from the host theme."""
        ...  # pragma: no cover

    @abstractmethod
    def configuration_schema(self) -> dict[str, Any]:
        """Return the property pane description the host renders."""
        ...  # pragma: no cover
