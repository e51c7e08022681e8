#!/usr/bin/env python3
"""
Roster index for resolving report jersey numbers to live-feed player ids.
Built from the boxscore section of a game's live-feed document.
"""

import logging
import re
from typing import Dict, List, Any, Tuple

from pbp_reconcile.errors import MalformedFeed
from pbp_reconcile.model.plays import RosterPlayer

logger = logging.getLogger(__name__)

VENUES = ('away', 'home')
JERSEY_PATTERN = re.compile(r"^\d+$", re.ASCII)


class RosterIndex:
    """
    (team, jersey) -> player lookup for one game.

    Players without a jersey number (scratches) are kept in `players` but
    left out of the jersey lookup.
    """

    def __init__(self, players: List[RosterPlayer]):
        """
        Initialize the roster index.

        Args:
            players: Every roster entry from both teams
        """
        self.players: List[RosterPlayer] = list(players)
        self.teams: Dict[str, str] = {}  # venue -> canonical team code
        self.jersey_lookup: Dict[Tuple[str, int], List[RosterPlayer]] = {}  # (team, jersey) -> players

        for player in self.players:
            if player.jersey is None:
                continue
            self.jersey_lookup.setdefault((player.team, player.jersey), []).append(player)

    @classmethod
    def from_feed(cls, feed: Dict[str, Any], config=None) -> 'RosterIndex':
        """
        Build the index from a live-feed document.

        Args:
            feed: Live-feed document with liveData.boxscore.teams.{away,home}
            config: PBPConfig used to canonicalize team codes

        Returns:
            RosterIndex for the game
        """
        try:
            teams = feed['liveData']['boxscore']['teams']
        except (KeyError, TypeError):
            raise MalformedFeed("missing liveData.boxscore.teams")

        players = []
        venue_teams = {}
        for venue in VENUES:
            team_data = teams.get(venue)
            if not isinstance(team_data, dict):
                raise MalformedFeed(f"missing boxscore team '{venue}'")

            abbrev = (team_data.get('team') or {}).get('abbreviation')
            if not abbrev:
                raise MalformedFeed(f"missing team abbreviation for '{venue}'")
            team = config.canonical_team(abbrev) if config else abbrev.strip().lower()
            venue_teams[venue] = team

            for key, player_data in (team_data.get('players') or {}).items():
                players.append(cls._roster_player(team, key, player_data))

        index = cls(players)
        index.teams = venue_teams
        logger.debug(f"Indexed {len(index.jersey_lookup)} jerseys from {len(players)} roster entries")
        return index

    @staticmethod
    def _roster_player(team: str, key: str, player_data: Dict[str, Any]) -> RosterPlayer:
        """Convert one boxscore player entry."""
        person = player_data.get('person') or {}
        player_id = person.get('id')
        if player_id is None:
            raise MalformedFeed(f"player entry '{key}' has no person id")

        try:
            player_id = int(player_id)
        except (TypeError, ValueError) as e:
            raise MalformedFeed(f"player entry '{key}' has non-numeric person id {player_id!r}") from e

        jersey = player_data.get('jerseyNumber')
        jersey = '' if jersey is None else str(jersey).strip()

        return RosterPlayer(
            team=team,
            id=player_id,
            name=person.get('fullName', ''),
            position=(player_data.get('position') or {}).get('code', ''),
            jersey=int(jersey) if JERSEY_PATTERN.match(jersey) else None,
        )

    def find(self, team: str, jersey: int) -> List[RosterPlayer]:
        """Return every player wearing `jersey` for `team` (normally one)."""
        return self.jersey_lookup.get((team, jersey), [])

    def player_ids(self) -> set:
        return {player.id for player in self.players}
