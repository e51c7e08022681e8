#!/usr/bin/env python3
"""
Rink zone resolution.

Report descriptions name the zone from the credited team's point of view
("Off. Zone"). Events carry a pair [zone for away team, zone for home team].
"""

from typing import List, Optional

from pbp_reconcile.model.plays import EventCategory

ZONE_PHRASES = (
    ('def. zone', 'd'),
    ('off. zone', 'o'),
    ('neu. zone', 'n'),
)

FLIP = {'o': 'd', 'd': 'o', 'n': 'n'}


def flip_zone(zone: str) -> str:
    """The same spot of ice seen from the other team."""
    return FLIP[zone]


def find_zone(description: str) -> Optional[str]:
    """Zone code named in the description, or None."""
    text = description.lower()
    for phrase, zone in ZONE_PHRASES:
        if phrase in text:
            return zone
    return None


def resolve_zones(description: str, team: Optional[str], category: EventCategory,
                  away_team: str, home_team: str) -> Optional[List[str]]:
    """
    Compute the [away, home] zone pair for an event.

    Args:
        description: Event description
        team: Canonical code of the credited team
        category: Event category
        away_team: Canonical away code
        home_team: Canonical home code

    Returns:
        Two-element zone list, or None when there is no zone phrase or no team
    """
    zone = find_zone(description)
    if zone is None or team is None:
        return None

    if team == away_team:
        zones = [zone, flip_zone(zone)]
    elif team == home_team:
        zones = [flip_zone(zone), zone]
    else:
        return None

    # Blocks are described from the blocking team's side; report the shooter's.
    if category == EventCategory.BLOCKED_SHOT:
        zones.reverse()
    return zones
