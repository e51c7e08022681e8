#!/usr/bin/env python3
"""
Team attribution from the leading word of an event description.
"""

from typing import Optional

from pbp_reconcile.model.plays import ReportHeader


def attribute_team(description: str, header: ReportHeader, config) -> Optional[str]:
    """
    Work out which team an event belongs to.

    The first word is compared with the report's own (raw) header codes;
    only a match is rewritten to the feed's canonical code.

    Args:
        description: Event description
        header: Raw away/home codes from the report
        config: PBPConfig carrying the alias table

    Returns:
        Canonical team code, or None when the description does not start
        with either team's code (period boundaries, stoppages)
    """
    words = description.strip().lower().split()
    if not words:
        return None

    first_word = words[0]
    for raw_code in (header.away, header.home):
        if first_word == raw_code.strip().lower():
            return config.canonical_team(raw_code)
    return None
