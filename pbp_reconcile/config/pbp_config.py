#!/usr/bin/env python3
"""
Play-by-Play Reconciliation Configuration
=========================================

Static lookup tables and settings for merging the NHL HTML play-by-play
report into the live-feed document. Tables are carried on a config object
and handed to each stage explicitly.
"""

import logging
from typing import Dict, Any, Optional


# Report-form team abbreviations that differ from the live feed's codes.
# Anything not listed is already in canonical form.
TEAM_ALIASES = {
    'l.a': 'lak',
    'n.j': 'njd',
    's.j': 'sjs',
    't.b': 'tbl',
}

# Loggers created by the package; 'verbose' lowers all of them to DEBUG
PACKAGE_LOGGERS = (
    'pbp_reconcile',
    'PlayReportParser',
    'PlayByPlayReconciler',
    'EventValidator',
)

# Raw PL report type codes -> canonical event categories
EVENT_TYPE_CODES = {
    'pstr': 'period_start',
    'pend': 'period_end',
    'gend': 'game_end',
    'fac': 'faceoff',
    'stop': 'stop',
    'goal': 'goal',
    'shot': 'shot',
    'block': 'blocked_shot',
    'miss': 'missed_shot',
    'take': 'takeaway',
    'give': 'giveaway',
    'hit': 'hit',
    'penl': 'penalty',
}


class PBPConfig:
    """
    Configuration for the play-by-play reconciliation pipeline.

    Holds the team alias table, the type-code map and the game-id rules
    used to tell regular-season games from playoff games.
    """

    def __init__(self, config_dict: Dict[str, Any] = None):
        """Initialize the configuration."""
        if config_dict is None:
            config_dict = {}

        self.verbose = config_dict.get('verbose', False)

        # Lookup tables (user entries extend or override the built-ins)
        self.team_aliases = dict(TEAM_ALIASES)
        self.team_aliases.update(
            {k.strip().lower(): v.strip().lower() for k, v in config_dict.get('team_aliases', {}).items()}
        )
        self.event_type_codes = dict(EVENT_TYPE_CODES)
        self.event_type_codes.update(
            {k.strip().lower(): v for k, v in config_dict.get('event_type_codes', {}).items()}
        )

        # Game ids are YYYYTTNNNN; TT == 02 is the regular season
        self.regular_season_game_type = config_dict.get('regular_season_game_type', '02')

        if self.verbose:
            for name in PACKAGE_LOGGERS:
                logging.getLogger(name).setLevel(logging.DEBUG)

    def canonical_team(self, code: str) -> str:
        """
        Rewrite a report-form team code into the live feed's form.

        Args:
            code: Team code as printed in the report (any case)

        Returns:
            Lowercase canonical team code
        """
        code = code.strip().lower()
        return self.team_aliases.get(code, code)

    def is_regular_season(self, game_id: Optional[int]) -> bool:
        """Return True when the game id falls in the regular-season range."""
        if game_id is None:
            return False
        game_id_str = str(game_id)
        if len(game_id_str) != 10 or not game_id_str.isdigit():
            return False
        return game_id_str[4:6] == self.regular_season_game_type


def create_default_config() -> Dict[str, Any]:
    """Create default configuration dictionary."""
    return {
        'verbose': False,
        'team_aliases': {},
        'event_type_codes': {},
        'regular_season_game_type': '02',
    }
