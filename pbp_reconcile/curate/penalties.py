#!/usr/bin/env python3
"""
Penalty duration and severity.
"""

import re
from typing import Optional, Tuple

from pbp_reconcile.errors import PenaltyFormatError

PENALTY_MINUTES = re.compile(r'\(\s*(\d+)\s*min\)')


def penalty_severity(minutes: int, description: str) -> Optional[str]:
    """
    Severity for a minute count. Rules are checked in order; minute counts
    outside the table have no severity.
    """
    text = description.lower()
    if minutes == 0:
        return 'penalty shot'
    if minutes == 2:
        return 'bench minor' if '(bench' in text else 'minor'
    if minutes == 4:
        return 'minor'
    if minutes == 5:
        return 'major'
    if minutes == 10:
        if 'game misconduct' in text:
            return 'game misconduct'
        if 'misconduct' in text:
            return 'misconduct'
        return 'match'
    return None


def classify_penalty(event_id: int, description: str) -> Tuple[int, Optional[str]]:
    """
    Read penalty minutes and severity from a penalty description.

    Args:
        event_id: Event number, for error reporting
        description: Penalty event description

    Returns:
        Tuple of (minutes, severity or None)

    Raises:
        PenaltyFormatError: no "(N min)" in the description
    """
    match = PENALTY_MINUTES.search(description.lower())
    if not match:
        raise PenaltyFormatError(event_id)
    minutes = int(match.group(1))
    return minutes, penalty_severity(minutes, description)
