#!/usr/bin/env python3
"""
Event Validator for Reconciled Play-by-Play
===========================================

Checks a reconciled event list for integrity problems and cross-checks it
against the live feed's boxscore before it replaces the feed's play list.
"""

import logging
from typing import Dict, List, Any, Optional
from datetime import datetime
import pandas as pd

from pbp_reconcile.model.plays import EventCategory, NormalizedEvent, ROLE_BEARING_CATEGORIES, ZONE_CODES
from pbp_reconcile.utils.roster_index import RosterIndex, VENUES


def events_to_frame(events: List[NormalizedEvent]) -> pd.DataFrame:
    """
    Flatten events into a DataFrame, one row per event.

    Args:
        events: Reconciled events

    Returns:
        DataFrame with event columns plus player_count and player_ids
    """
    records = []
    for event in events:
        record = event.model_dump(mode='json', exclude={'players'})
        record['player_count'] = len(event.players or [])
        record['player_ids'] = [player.playerId for player in event.players or []]
        records.append(record)

    columns = ['id', 'period', 'periodType', 'timeSeconds', 'category', 'description', 'team',
               'zones', 'penMins', 'penSeverity', 'player_count', 'player_ids']
    return pd.DataFrame(records, columns=columns)


class EventValidator:
    """
    Validator for reconciled play-by-play events.

    Errors are integrity failures that make the event list unusable;
    warnings are disagreements with other sources worth a look.
    """

    def __init__(self, config=None):
        """Initialize the event validator."""
        self.config = config
        self.logger = logging.getLogger('EventValidator')

    def validate_events(self, events: List[NormalizedEvent], roster: Optional[RosterIndex] = None) -> Dict[str, Any]:
        """
        Validate a reconciled event list.

        Args:
            events: Reconciled events in report order
            roster: Roster index used to confirm every player id

        Returns:
            Dictionary containing validation results
        """
        result = {
            'timestamp': datetime.now().isoformat(),
            'valid': True,
            'errors': [],
            'warnings': [],
            'quality_score': 0.0,
            'validation_details': {}
        }

        events_df = events_to_frame(events)
        if events_df.empty:
            result['warnings'].append("No events to validate")
            return result

        # Event ids
        ids = events_df['id']
        if ids.duplicated().any():
            result['errors'].append(f"Duplicate event ids: {sorted(ids[ids.duplicated()].unique().tolist())}")
        if not ids.is_monotonic_increasing:
            result['errors'].append("Event ids are not increasing")

        # Zone pairs
        zoned = events_df[events_df['zones'].notna()]
        if not zoned.empty:
            well_formed = zoned['zones'].apply(lambda z: len(z) == 2 and all(c in ZONE_CODES for c in z)).astype(bool)
            bad_zones = zoned[~well_formed]
            if not bad_zones.empty:
                result['errors'].append(f"Malformed zone pairs on events: {bad_zones['id'].tolist()}")

        # Players
        role_bearing = events_df['category'].isin([c.value for c in ROLE_BEARING_CATEGORIES])
        missing_players = events_df[role_bearing & (events_df['player_count'] == 0)]
        if not missing_players.empty:
            result['errors'].append(f"Events without players: {missing_players['id'].tolist()}")
        stray_players = events_df[~role_bearing & (events_df['player_count'] > 0)]
        if not stray_players.empty:
            result['errors'].append(f"Players on non-player events: {stray_players['id'].tolist()}")

        if roster is not None:
            known_ids = roster.player_ids()
            unknown = events_df[events_df['player_ids'].apply(lambda pids: any(p not in known_ids for p in pids)).astype(bool)]
            if not unknown.empty:
                result['errors'].append(f"Player ids not on the roster: events {unknown['id'].tolist()}")

        # Penalty fields only on penalties
        penalties = events_df['category'] == EventCategory.PENALTY.value
        stray_penalty = events_df[~penalties & events_df['penMins'].notna()]
        if not stray_penalty.empty:
            result['errors'].append(f"Penalty minutes on non-penalty events: {stray_penalty['id'].tolist()}")
        unknown_severity = events_df[penalties & events_df['penSeverity'].isna()]
        if not unknown_severity.empty:
            result['warnings'].append(f"Penalties without a severity: {unknown_severity['id'].tolist()}")

        result['validation_details'] = {
            'total_events': len(events_df),
            'events_by_category': events_df['category'].value_counts().to_dict(),
            'events_with_team': int(events_df['team'].notna().sum()),
            'events_with_zones': int(events_df['zones'].notna().sum()),
        }

        # Share of role-bearing events with players
        total_role_bearing = int(role_bearing.sum())
        if total_role_bearing:
            resolved = int((role_bearing & (events_df['player_count'] > 0)).sum())
            result['quality_score'] = resolved / total_role_bearing
        else:
            result['quality_score'] = 1.0

        result['valid'] = not result['errors']
        if not result['valid']:
            self.logger.warning(f"Event validation found {len(result['errors'])} errors")
        return result

    def validate_against_boxscore(self, events: List[NormalizedEvent], feed: Dict[str, Any],
                                  roster: RosterIndex) -> Dict[str, Any]:
        """
        Compare per-team goal counts with the boxscore's team totals.

        Shootout goals are not counted; the boxscore leaves them out too.

        Args:
            events: Reconciled events
            feed: Live-feed document
            roster: Roster index for the game (maps venues to team codes)

        Returns:
            Dictionary with 'consistent', 'warnings' and per-team goal counts
        """
        result = {
            'consistent': True,
            'warnings': [],
            'goals': {}
        }

        events_df = events_to_frame(events)
        goals_df = events_df[(events_df['category'] == EventCategory.GOAL.value) &
                             (events_df['periodType'] != 'shootout')]
        pbp_goals = goals_df.groupby('team').size().to_dict() if not goals_df.empty else {}

        teams = feed.get('liveData', {}).get('boxscore', {}).get('teams', {})
        for venue in VENUES:
            team = roster.teams.get(venue)
            box_goals = (teams.get(venue, {}).get('teamStats', {})
                         .get('teamSkaterStats', {}).get('goals'))
            counted = int(pbp_goals.get(team, 0))
            result['goals'][team] = {'play_by_play': counted, 'boxscore': box_goals}

            if box_goals is None:
                result['warnings'].append(f"No boxscore goal total for {team}")
            elif int(box_goals) != counted:
                result['consistent'] = False
                result['warnings'].append(f"{team}: {counted} goals in play-by-play, {box_goals} in boxscore")

        return result
