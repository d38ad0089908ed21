"""
Exception types raised by the NewsAlert widget.

Only list fetch failures are exceptions. A missing render target is
reported through the ``render_target_missing`` log event, and an
unrecognised host surface simply selects the unknown-environment label.
"""

from __future__ import annotations


class WidgetError(Exception):
    """Base class for NewsAlert widget errors."""


class ListFetchError(WidgetError):
    """The list items read could not produce a record collection.

    Args:
        url: The request URL.
        message: Human-readable failure description.
    """

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class NetworkError(ListFetchError):
    """The request never completed (connection, DNS, TLS, timeout)."""


class RemoteStoreError(ListFetchError):
    """The store answered with a non-success status or an unreadable body.

    Args:
        url: The request URL.
        message: Human-readable failure description.
        status_code: HTTP status of the response, if one was received.
    """

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(url, message)
        self.status_code = status_code
