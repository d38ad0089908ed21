"""
Host theme models for NewsAlert.

A theme-change notification carries an optional set of semantic colour
tokens. Only the three tokens the widget applies are modelled; anything
else the host sends is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SemanticColors(BaseModel):
    """Named colour tokens from the host theme."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    body_text: str | None = Field(default=None, alias="bodyText", description="Body text colour.")
    link: str | None = Field(default=None, alias="link", description="Link colour.")
    link_hovered: str | None = Field(
        default=None,
        alias="linkHovered",
        description="Hovered link colour.",
    )


class Theme(BaseModel):
    """Theme record delivered with a theme-change notification."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    semantic_colors: SemanticColors | None = Field(
        default=None,
        alias="semanticColors",
        description="Semantic colour tokens.",
    )
