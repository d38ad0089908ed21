"""
Markup renderer for the NewsAlert widget.

Turns an ordered list of alert records into the widget's HTML fragment:
an outer ``card_parent`` wrapper with one ``image_item`` block per record
exposing title, description, alert type, and active flag as text. Field
values are HTML-escaped by the template environment.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog
from jinja2 import Environment, FileSystemLoader, select_autoescape

from na_common.models import AlertRecord

logger = structlog.get_logger()

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
ALERT_LIST_TEMPLATE = "alert_list.html.j2"

_CSS_SIZE = re.compile(
    r"^(?:\d+(?:\.\d+)?(?:px|pt|em|rem|%|vw|vh)"
    r"|xx-small|x-small|small|medium|large|x-large|xx-large|smaller|larger)$",
)
_BARE_NUMBER = re.compile(r"^\d+(?:\.\d+)?$")


def _or_empty(value: Any) -> Any:
    return "" if value is None else value


def _js_bool(value: Any) -> str:
    if value is None:
        return ""
    return "true" if value else "false"


def _build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "j2"], default_for_string=True),
    )
    env.filters["or_empty"] = _or_empty
    env.filters["js_bool"] = _js_bool
    return env


_env = _build_environment()


def normalize_font_size(value: str | None) -> str | None:
    """Return a CSS font-size for *value*, or ``None`` if it is not usable.

    Bare numbers are taken as pixels; anything that is not a plain CSS
    length, percentage, or size keyword is rejected with a warning.
    """
    if not value:
        return None
    value = value.strip().lower()
    if _BARE_NUMBER.match(value):
        return f"{value}px"
    if _CSS_SIZE.match(value):
        return value
    logger.warning("title_font_size_ignored", title_font_size=value)
    return None


def render_markup(
    records: Sequence[AlertRecord],
    *,
    title_font_size: str | None = None,
) -> str:
    """Render *records*, in the given order, as the alert list fragment."""
    template = _env.get_template(ALERT_LIST_TEMPLATE)
    return template.render(
        records=records,
        title_font_size=normalize_font_size(title_font_size),
    )
