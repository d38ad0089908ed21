"""
Alert record models for NewsAlert.

Defines the read-only ``AlertRecord`` returned by the remote list store and
the ``ListItemsResponse`` envelope (``{"value": [...]}``) that wraps it.
Field aliases match the list's column names.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AlertRecord(BaseModel):
    """One alert entry from the remote list.

    Attributes:
        title: Text label.
        description: Text body.
        alert_type: Category value; no fixed set of values, rendered as text.
        active: Only records with ``True`` are displayed.
        position: Ascending display ordering key.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str | None = Field(default=None, alias="Title", description="Text label.")
    description: str | None = Field(
        default=None,
        alias="Description",
        description="Text body.",
    )
    alert_type: Any = Field(default=None, alias="AlertType", description="Category value.")
    active: bool | None = Field(
        default=None,
        alias="Active",
        description="Display flag.",
    )
    position: float | None = Field(
        default=None,
        alias="Position",
        description="Display ordering key.",
    )

    # A malformed column value on one item must not reject the whole list.

    @field_validator("title", "description", mode="before")
    @classmethod
    def _text_or_none(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("active", mode="before")
    @classmethod
    def _bool_or_none(cls, value: Any) -> bool | None:
        # Only a real boolean counts; "yes", 1 and "true" are not active.
        return value if isinstance(value, bool) else None

    @field_validator("position", mode="before")
    @classmethod
    def _number_or_none(cls, value: Any) -> float | None:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            return None
        try:
            number = float(value)
        except ValueError:
            return None
        return number if math.isfinite(number) else None


class ListItemsResponse(BaseModel):
    """Body of a list items read: ``{"value": AlertRecord[]}``."""

    model_config = ConfigDict(extra="ignore")

    value: list[AlertRecord] = Field(default_factory=list, description="List items.")
