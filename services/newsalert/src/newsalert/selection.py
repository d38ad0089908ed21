"""
Record selection for the NewsAlert widget.

Keeps active records and orders them by display position.
"""

from __future__ import annotations

from collections.abc import Iterable

from na_common.models import AlertRecord


def _position_key(record: AlertRecord) -> tuple[bool, float]:
    # Records without a position sort after every positioned record.
    if record.position is None:
        return (True, 0.0)
    return (False, record.position)


def select_and_order(records: Iterable[AlertRecord]) -> list[AlertRecord]:
    """Return the records with ``active is True`` sorted ascending by position.

    ``sorted`` is stable, so records sharing a position keep their input
    order. Applying the function to its own output returns it unchanged.
    """
    return sorted((r for r in records if r.active is True), key=_position_key)
