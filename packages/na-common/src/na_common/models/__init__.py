"""
Shared Pydantic data models for NewsAlert.

This package contains the alert records read from the remote list, the
widget configuration, and the host theme tokens.
"""

from na_common.models.alert_record import AlertRecord, ListItemsResponse
from na_common.models.theme import SemanticColors, Theme
from na_common.models.widget_config import WidgetConfig

__all__ = [
    "AlertRecord",
    "ListItemsResponse",
    "SemanticColors",
    "Theme",
    "WidgetConfig",
]
