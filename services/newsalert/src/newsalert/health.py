"""
Health check endpoint for the NewsAlert widget service.

Reports whether the host adapter has a widget mounted, along with the list
it reads and the widget's current lifecycle state. The remote list is
not probed.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request) -> dict[str, str]:
    """Return ``status`` plus the mounted widget's list name and state."""
    widget = getattr(request.app.state, "widget", None)
    if widget is None:
        return {"status": "starting"}
    return {
        "status": "ok",
        "list_name": widget.config.list_name,
        "widget_state": widget.state.value,
    }
