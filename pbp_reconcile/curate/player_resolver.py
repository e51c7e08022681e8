#!/usr/bin/env python3
"""
Resolve description role tokens to live-feed player ids.
"""

from typing import List

from pbp_reconcile.errors import AmbiguousPlayer, PlayerNotFound
from pbp_reconcile.model.plays import EventPlayer, RoleToken
from pbp_reconcile.utils.roster_index import RosterIndex


def resolve_players(event_id: int, tokens: List[RoleToken], roster: RosterIndex, config) -> List[EventPlayer]:
    """
    Replace each token's team/jersey with the roster's player id.

    Args:
        event_id: Event number, for error reporting
        tokens: Role tokens in role order
        roster: Roster index for the game
        config: PBPConfig carrying the alias table

    Returns:
        Resolved players in the same order

    Raises:
        PlayerNotFound: no roster entry for a token
        AmbiguousPlayer: several roster entries share the token
    """
    players = []
    for token in tokens:
        team = config.canonical_team(token.team)
        matches = roster.find(team, token.jersey)
        if not matches:
            raise PlayerNotFound(event_id, team, token.jersey)
        if len(matches) > 1:
            raise AmbiguousPlayer(event_id, team, token.jersey)
        players.append(EventPlayer(roleTag=token.roleTag, playerId=matches[0].id))
    return players
