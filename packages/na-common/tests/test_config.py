"""
Tests for na-common configuration module.

Validates that environment-based configuration loading, default values,
validation constraints, and the widget-config bridge work correctly via
pydantic-settings.
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from na_common.config import Settings, get_settings
from na_common.models import WidgetConfig


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _clear_settings_cache() -> None:
    """Reset the ``get_settings`` lru_cache between tests."""
    get_settings.cache_clear()


def _clean_env() -> dict[str, str]:
    """Remove NA_ env vars so Settings reads only hardcoded defaults."""
    return {k: v for k, v in os.environ.items() if not k.startswith("NA_")}


# ---------------------------------------------------------------------------
# Tests: default values
# ---------------------------------------------------------------------------


class TestSettingsDefaults:
    """Verify that ``Settings`` populates sane defaults when no env vars are set."""

    def test_default_list_name(self) -> None:
        with patch.dict(os.environ, _clean_env(), clear=True):
            assert Settings(_env_file=None).list_name == "NewsAlerts"  # type: ignore[call-arg]

    def test_default_request_timeout_is_none(self) -> None:
        with patch.dict(os.environ, _clean_env(), clear=True):
            assert Settings(_env_file=None).request_timeout_s is None  # type: ignore[call-arg]

    def test_default_not_local(self) -> None:
        with patch.dict(os.environ, _clean_env(), clear=True):
            assert Settings(_env_file=None).is_served_from_localhost is False  # type: ignore[call-arg]

    def test_default_no_teams_host(self) -> None:
        with patch.dict(os.environ, _clean_env(), clear=True):
            assert Settings(_env_file=None).teams_host_name is None  # type: ignore[call-arg]

    def test_default_api_port(self) -> None:
        with patch.dict(os.environ, _clean_env(), clear=True):
            assert Settings(_env_file=None).api_port == 8000  # type: ignore[call-arg]

    def test_default_log_level(self) -> None:
        with patch.dict(os.environ, _clean_env(), clear=True):
            assert Settings(_env_file=None).log_level == "INFO"  # type: ignore[call-arg]


# ---------------------------------------------------------------------------
# Tests: environment variable overrides
# ---------------------------------------------------------------------------


class TestSettingsFromEnv:
    """Verify that env vars with NA_ prefix override defaults."""

    def test_override_site_url(self) -> None:
        with patch.dict(os.environ, {"NA_SITE_URL": "https://fabrikam.sharepoint.com"}):
            s = Settings()
        assert s.site_url == "https://fabrikam.sharepoint.com"

    def test_override_list_name(self) -> None:
        with patch.dict(os.environ, {"NA_LIST_NAME": "Bulletins"}):
            s = Settings()
        assert s.list_name == "Bulletins"

    def test_override_is_local(self) -> None:
        with patch.dict(os.environ, {"NA_IS_SERVED_FROM_LOCALHOST": "true"}):
            s = Settings()
        assert s.is_served_from_localhost is True

    def test_override_timeout(self) -> None:
        with patch.dict(os.environ, {"NA_REQUEST_TIMEOUT_S": "2.5"}):
            s = Settings()
        assert s.request_timeout_s == pytest.approx(2.5)


# ---------------------------------------------------------------------------
# Tests: validation constraints
# ---------------------------------------------------------------------------


class TestSettingsValidation:
    """Verify pydantic validators on ``Settings`` fields."""

    def test_api_port_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            Settings(api_port=70000)  # type: ignore[call-arg]

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(request_timeout_s=0)  # type: ignore[call-arg]


# ---------------------------------------------------------------------------
# Tests: widget config bridge
# ---------------------------------------------------------------------------


class TestWidgetConfigFromSettings:
    """Verify ``Settings.widget_config()``."""

    def test_builds_widget_config(self) -> None:
        cfg = Settings(list_name="Alerts", title_font_size="18px").widget_config()  # type: ignore[call-arg]
        assert isinstance(cfg, WidgetConfig)
        assert cfg.list_name == "Alerts"
        assert cfg.title_font_size == "18px"

    def test_empty_font_size_becomes_none(self) -> None:
        cfg = Settings(list_name="Alerts", title_font_size="").widget_config()  # type: ignore[call-arg]
        assert cfg.title_font_size is None

    def test_blank_list_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(list_name="   ").widget_config()  # type: ignore[call-arg]


# ---------------------------------------------------------------------------
# Tests: get_settings singleton
# ---------------------------------------------------------------------------


class TestGetSettings:
    """Verify the cached ``get_settings()`` helper."""

    def setup_method(self) -> None:
        _clear_settings_cache()

    def teardown_method(self) -> None:
        _clear_settings_cache()

    def test_returns_settings_instance(self) -> None:
        assert isinstance(get_settings(), Settings)

    def test_cached(self) -> None:
        assert get_settings() is get_settings()
