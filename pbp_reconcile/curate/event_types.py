#!/usr/bin/env python3
"""
Raw PL report type codes -> canonical event categories.
"""

from pbp_reconcile.errors import UnsupportedEventCode
from pbp_reconcile.model.plays import EventCategory


def normalize_event_type(event_id: int, type_code: str, config) -> EventCategory:
    """
    Map a raw type code to its category.

    Args:
        event_id: Event number, for error reporting
        type_code: Raw code from the report (any case)
        config: PBPConfig carrying the type-code map

    Returns:
        EventCategory

    Raises:
        UnsupportedEventCode: code not in the map
    """
    category = config.event_type_codes.get(type_code.strip().lower())
    if category is None:
        raise UnsupportedEventCode(event_id, type_code)
    return EventCategory(category)
