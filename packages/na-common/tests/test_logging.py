"""Tests for the structlog service-name processor."""

from __future__ import annotations

from na_common.logging import _add_service


class TestAddService:
    def test_adds_service(self) -> None:
        event = _add_service("newsalert")(None, "info", {"event": "started"})
        assert event == {"event": "started", "service": "newsalert"}

    def test_keeps_explicit_service(self) -> None:
        event = _add_service("newsalert")(None, "info", {"event": "e", "service": "other"})
        assert event["service"] == "other"
