"""
na-common: Shared library for NewsAlert.

Provides the shared data models, configuration management, structured
logging setup, and Prometheus metric definitions used by the NewsAlert
widget service.
"""

from na_common.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
