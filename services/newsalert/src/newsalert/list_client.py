"""
Remote list client for NewsAlert.

Reads the items of a named list from the site's REST endpoint
(``/_api/web/Lists/GetByTitle('<name>')/Items``) and decodes the
``{"value": [...]}`` body into :class:`AlertRecord` objects. One request per
call: no caching, no retry.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx
import structlog
from pydantic import ValidationError

from na_common.metrics import list_fetch_duration_seconds
from na_common.models import AlertRecord, ListItemsResponse

from newsalert.errors import NetworkError, RemoteStoreError
from newsalert.host import CredentialProvider

logger = structlog.get_logger()

_ACCEPT = "application/json;odata=nometadata"


def build_items_url(site_url: str, list_name: str) -> str:
    """Return the items endpoint for *list_name* under *site_url*.

    Single quotes in the list title are doubled (OData string literal) and
    the result is percent-encoded for use in a path segment.
    """
    literal = list_name.replace("'", "''")
    return f"{site_url.rstrip('/')}/_api/web/Lists/GetByTitle('{quote(literal, safe='')}')/Items"


class ListClient:
    """Async reader for remote list items.

    Args:
        site_url: Absolute URL of the site hosting the list.
        credentials: Source of the bearer token for each request.
        timeout: Request timeout in seconds; ``None`` disables it.
        transport: Optional ``httpx`` transport (used by tests).
    """

    def __init__(
        self,
        site_url: str,
        credentials: CredentialProvider,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.site_url = site_url
        self.timeout = timeout
        self._credentials = credentials
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Return (and lazily create) the shared ``httpx.AsyncClient``."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def _headers(self) -> dict[str, str]:
        headers = {"Accept": _ACCEPT}
        token = await self._credentials.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def get_items(self, list_name: str) -> list[AlertRecord]:
        """Fetch every item of *list_name*.

        Returns:
            The decoded records in store order (possibly empty).

        Raises:
            NetworkError: If the request could not complete.
            RemoteStoreError: On a non-2xx response or an unreadable body.
        """
        url = build_items_url(self.site_url, list_name)
        log = logger.bind(list_name=list_name, request_url=url)
        log.debug("list_fetch_started")

        client = await self._get_client()
        headers = await self._headers()
        try:
            with list_fetch_duration_seconds.time():
                resp = await client.get(url, headers=headers)
        except httpx.TransportError as exc:
            raise NetworkError(url, f"list request failed: {exc}") from exc

        if not resp.is_success:
            raise RemoteStoreError(
                url,
                f"list store returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            body = ListItemsResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise RemoteStoreError(
                url,
                f"unreadable list items body: {exc}",
                status_code=resp.status_code,
            ) from exc

        log.debug("list_items_received", count=len(body.value))
        return body.value

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
