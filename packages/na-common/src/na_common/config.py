"""
Environment-based configuration management for NewsAlert.

Uses pydantic-settings to load configuration values from environment
variables and .env files. The host adapter reads its settings from this
module and hands the widget an explicit ``WidgetConfig``; the widget itself
never reads the environment.

All environment variables are prefixed with ``NA_`` to avoid collisions.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from na_common.models.widget_config import WidgetConfig


class Settings(BaseSettings):
    """Central configuration loaded from ``NA_``-prefixed environment variables.

    Attributes:
        site_url: Absolute URL of the site hosting the alert list.
        list_name: Title of the remote list holding alert records.
        title_font_size: Display size applied to alert titles.
        access_token: Bearer token sent to the list store.
        teams_host_name: Host surface reported by the Teams SDK (None = SharePoint).
        is_served_from_localhost: Whether the widget runs from a local dev origin.
        request_timeout_s: Read timeout for the list request (None = no timeout).
        api_host: Bind address for the host adapter.
        api_port: Bind port for the host adapter.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Render logs as JSON lines instead of console output.
    """

    model_config = SettingsConfigDict(
        env_prefix="NA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Remote list ──
    site_url: str = Field(
        default="https://contoso.sharepoint.com/sites/news",
        description="Absolute URL of the site hosting the alert list.",
    )
    list_name: str = Field(default="NewsAlerts", description="Remote list title.")
    title_font_size: str = Field(default="", description="Alert title display size.")
    access_token: str = Field(default="", description="Bearer token for the list store.")
    request_timeout_s: float | None = Field(
        default=None,
        gt=0.0,
        description="List request timeout in seconds (None = no timeout).",
    )

    # ── Host environment ──
    teams_host_name: str | None = Field(
        default=None,
        description="Teams SDK host name (Office, Outlook, Teams, TeamsModern).",
    )
    is_served_from_localhost: bool = Field(
        default=False,
        description="Whether the widget is served from a local dev origin.",
    )

    # ── API ──
    api_host: str = Field(default="0.0.0.0", description="Host adapter bind address.")
    api_port: int = Field(default=8000, ge=1, le=65535, description="Host adapter bind port.")

    # ── Logging ──
    log_level: str = Field(default="INFO", description="Logging level.")
    log_json: bool = Field(default=True, description="Emit JSON log lines.")

    def widget_config(self) -> WidgetConfig:
        """Build the validated widget configuration from these settings.

        Raises:
            pydantic.ValidationError: If ``list_name`` is blank.
        """
        return WidgetConfig(
            list_name=self.list_name,
            title_font_size=self.title_font_size or None,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached application settings singleton.

    Returns:
        The global ``Settings`` instance.
    """
    return Settings()
