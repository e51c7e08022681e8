#!/usr/bin/env python3
"""
Player Role Grammars
====================

Per-category grammars that read the players named in a lowercased report
description, e.g.

    hit:      "mtl #11 gallagher hit tor #3 phaneuf, off. zone"
    block:    "tor #19 lupul blocked by mtl #26 gorges, wrist, def. zone"
    faceoff:  "mtl won neu. zone - mtl #14 plekanec vs tor #43 kadri"
    goal:     "tor #16 marner(1), wrist, off. zone, 17 ft. assists: #43 kadri(1); #44 rielly(2)"
    penalty:  "tor #3 phaneuf hooking(2 min), def. zone drawn by: mtl #11 gallagher"

Each extractor is a pure function (description, team, header) -> [RoleToken]
and raises RoleExtractionFailure when a required role is missing.
"""

import re
from typing import Callable, Dict, List, Optional

from pbp_reconcile.errors import RoleExtractionFailure
from pbp_reconcile.model.plays import EventCategory, ReportHeader, RoleToken


# "<3-char team> #<digits>"; report teams may be punctuated ("n.j")
TEAM_JERSEY = re.compile(r'([a-z.]{3}) #(\d+)')
# bare "#<digits>" where the team is implied
JERSEY = re.compile(r'#(\d+)')

HIT_SPLIT = ' hit '
BLOCK_SPLIT = ' blocked by '
FACEOFF_SPLIT = ' vs '
ASSISTS = re.compile(r' assists?: ')
SERVED_BY = re.compile(r' served by: #(\d+)')
DRAWN_BY = re.compile(r' drawn by: (?:([a-z.]{3}) )?#(\d+)')

Extractor = Callable[[int, str, Optional[str], ReportHeader], List[RoleToken]]


def _team_token(event_id: int, category: EventCategory, text: str, role: str) -> RoleToken:
    match = TEAM_JERSEY.search(text)
    if not match:
        raise RoleExtractionFailure(event_id, category.value, f"no {role}")
    return RoleToken(roleTag=role, team=match.group(1), jersey=int(match.group(2)))


def _split_pair(event_id: int, category: EventCategory, description: str, separator: str,
                roles: tuple) -> List[RoleToken]:
    parts = description.split(separator, 1)
    if len(parts) != 2:
        raise RoleExtractionFailure(event_id, category.value, f"no '{separator.strip()}'")
    return [_team_token(event_id, category, part, role) for part, role in zip(parts, roles)]


def _require_team(event_id: int, category: EventCategory, team: Optional[str]) -> str:
    if not team:
        raise RoleExtractionFailure(event_id, category.value, "event has no team")
    return team


def extract_hit(event_id: int, description: str, team: Optional[str], header: ReportHeader) -> List[RoleToken]:
    return _split_pair(event_id, EventCategory.HIT, description, HIT_SPLIT, ('hitter', 'hittee'))


def extract_blocked_shot(event_id: int, description: str, team: Optional[str],
                         header: ReportHeader) -> List[RoleToken]:
    return _split_pair(event_id, EventCategory.BLOCKED_SHOT, description, BLOCK_SPLIT, ('shooter', 'blocker'))


def extract_missed_shot(event_id: int, description: str, team: Optional[str],
                        header: ReportHeader) -> List[RoleToken]:
    return [_team_token(event_id, EventCategory.MISSED_SHOT, description, 'shooter')]


def extract_shot(event_id: int, description: str, team: Optional[str], header: ReportHeader) -> List[RoleToken]:
    """Shots on goal print only the jersey ("tor onGoal - #16 marner"); the team is the event's."""
    team = _require_team(event_id, EventCategory.SHOT, team)
    match = JERSEY.search(description)
    if not match:
        raise RoleExtractionFailure(event_id, EventCategory.SHOT.value, "no shooter")
    return [RoleToken(roleTag='shooter', team=team, jersey=int(match.group(1)))]


def extract_faceoff(event_id: int, description: str, team: Optional[str], header: ReportHeader) -> List[RoleToken]:
    """
    The away player is listed first, the home player second. The event team
    won the draw.
    """
    team = _require_team(event_id, EventCategory.FACEOFF, team)
    away_token, home_token = _split_pair(event_id, EventCategory.FACEOFF, description, FACEOFF_SPLIT,
                                         ('away', 'home'))

    if team == header.away:
        winner, loser = away_token, home_token
    else:
        winner, loser = home_token, away_token

    return [
        RoleToken(roleTag='winner', team=winner.team, jersey=winner.jersey),
        RoleToken(roleTag='loser', team=loser.team, jersey=loser.jersey),
    ]


def extract_goal(event_id: int, description: str, team: Optional[str], header: ReportHeader) -> List[RoleToken]:
    parts = ASSISTS.split(description, maxsplit=1)
    tokens = [_team_token(event_id, EventCategory.GOAL, parts[0], 'scorer')]

    if len(parts) == 2:
        team = _require_team(event_id, EventCategory.GOAL, team)
        for number, jersey in enumerate(JERSEY.findall(parts[1]), start=1):
            tokens.append(RoleToken(roleTag=f'assist{number}', team=team, jersey=int(jersey)))
    return tokens


def extract_penalty(event_id: int, description: str, team: Optional[str], header: ReportHeader) -> List[RoleToken]:
    """
    Penalized player from the second word ("tor #3 ..."); bench penalties
    ("tor team ...") have none. Served-by jerseys belong to the penalized
    team; drawn-by uses the printed team when present.
    """
    tokens = []
    words = description.split()

    if len(words) > 1 and '#' in words[1]:
        match = TEAM_JERSEY.match(f'{words[0]} {words[1]}')
        if not match:
            raise RoleExtractionFailure(event_id, EventCategory.PENALTY.value, "unreadable penalized player")
        tokens.append(RoleToken(roleTag='penaltyon', team=match.group(1), jersey=int(match.group(2))))

    served = SERVED_BY.search(description)
    if served:
        served_team = _require_team(event_id, EventCategory.PENALTY, team)
        tokens.append(RoleToken(roleTag='servedby', team=served_team, jersey=int(served.group(1))))

    drawn = DRAWN_BY.search(description)
    if drawn:
        drawn_team = drawn.group(1) or _require_team(event_id, EventCategory.PENALTY, team)
        tokens.append(RoleToken(roleTag='drewby', team=drawn_team, jersey=int(drawn.group(2))))

    if not tokens:
        raise RoleExtractionFailure(event_id, EventCategory.PENALTY.value, "no player named")
    return tokens


ROLE_EXTRACTORS: Dict[EventCategory, Extractor] = {
    EventCategory.HIT: extract_hit,
    EventCategory.BLOCKED_SHOT: extract_blocked_shot,
    EventCategory.MISSED_SHOT: extract_missed_shot,
    EventCategory.SHOT: extract_shot,
    EventCategory.FACEOFF: extract_faceoff,
    EventCategory.GOAL: extract_goal,
    EventCategory.PENALTY: extract_penalty,
}


def extract_roles(event_id: int, category: EventCategory, description: str, team: Optional[str],
                  header: ReportHeader) -> List[RoleToken]:
    """
    Read the role tokens for an event.

    Args:
        event_id: Event number, for error reporting
        category: Event category
        description: Lowercased event description
        team: Canonical code of the credited team
        header: Canonical away/home codes

    Returns:
        Role tokens in role order; empty for categories without players
    """
    extractor = ROLE_EXTRACTORS.get(category)
    if extractor is None:
        return []
    return extractor(event_id, description, team, header)
