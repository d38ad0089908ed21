"""
Widget configuration model for NewsAlert.

The host owns the configuration and supplies it to the widget at
construction time. Wire names (``listName``, ``titleFontSize``) match the
host's property pane fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WidgetConfig(BaseModel):
    """Typed configuration of the alert list widget.

    Attributes:
        list_name: Title of the remote list to query.
        title_font_size: Display size for alert titles (free text, optional).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    list_name: str = Field(..., alias="listName", max_length=255, description="Remote list title.")
    title_font_size: str | None = Field(
        default=None,
        alias="titleFontSize",
        description="Alert title display size.",
    )

    @field_validator("list_name")
    @classmethod
    def _list_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("listName must not be empty")
        return value

    @field_validator("title_font_size")
    @classmethod
    def _blank_font_size_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None
