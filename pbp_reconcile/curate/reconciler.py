#!/usr/bin/env python3
"""
Play-by-Play Reconciliation
===========================

Merges the HTML play-by-play report into a game's live-feed document whose
play list is empty. Every report row runs through the same fixed stages:

    type code -> team -> zones -> role tokens -> player ids -> penalty

Each stage takes the event built so far and returns an updated copy. The
first failure aborts the whole game; no partial event list is returned.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Dict, List, Any, Optional

from pbp_reconcile.config.pbp_config import PBPConfig
from pbp_reconcile.curate.event_types import normalize_event_type
from pbp_reconcile.curate.penalties import classify_penalty
from pbp_reconcile.curate.periods import derive_period_type
from pbp_reconcile.curate.player_resolver import resolve_players
from pbp_reconcile.curate.teams import attribute_team
from pbp_reconcile.curate.zones import resolve_zones
from pbp_reconcile.errors import ReconciliationError
from pbp_reconcile.model.plays import (
    EventCategory, NormalizedEvent, RawPlayRow, ReportHeader, ROLE_BEARING_CATEGORIES,
)
from pbp_reconcile.parse.play_report_parser import PlayReportParser
from pbp_reconcile.parse.role_grammars import extract_roles
from pbp_reconcile.utils.roster_index import RosterIndex


@dataclass
class GameContext:
    """Per-game inputs shared by every stage."""
    game_id: Optional[int]
    header: ReportHeader  # raw report codes
    teams: ReportHeader   # canonical codes
    roster: RosterIndex
    config: PBPConfig


def build_event(row: RawPlayRow, ctx: GameContext) -> NormalizedEvent:
    """Start an event from a report row: timing, period type and category."""
    return NormalizedEvent(
        id=row.id,
        period=row.period,
        periodType=derive_period_type(row.period, ctx.game_id, ctx.config),
        timeSeconds=row.timeSeconds,
        category=normalize_event_type(row.id, row.typeCode, ctx.config),
        description=row.description.lower(),
    )


def add_team(event: NormalizedEvent, ctx: GameContext) -> NormalizedEvent:
    team = attribute_team(event.description, ctx.header, ctx.config)
    if team is None:
        return event
    return event.model_copy(update={'team': team})


def add_zones(event: NormalizedEvent, ctx: GameContext) -> NormalizedEvent:
    zones = resolve_zones(event.description, event.team, event.category, ctx.teams.away, ctx.teams.home)
    if zones is None:
        return event
    return event.model_copy(update={'zones': zones})


def add_role_tokens(event: NormalizedEvent, ctx: GameContext) -> NormalizedEvent:
    if event.category not in ROLE_BEARING_CATEGORIES:
        return event
    tokens = extract_roles(event.id, event.category, event.description, event.team, ctx.teams)
    return event.model_copy(update={'roleTokens': tokens})


def add_players(event: NormalizedEvent, ctx: GameContext) -> NormalizedEvent:
    if event.category not in ROLE_BEARING_CATEGORIES:
        return event
    players = resolve_players(event.id, event.roleTokens, ctx.roster, ctx.config)
    return event.model_copy(update={'players': players, 'roleTokens': []})


def add_penalty(event: NormalizedEvent, ctx: GameContext) -> NormalizedEvent:
    if event.category != EventCategory.PENALTY:
        return event
    minutes, severity = classify_penalty(event.id, event.description)
    return event.model_copy(update={'penMins': minutes, 'penSeverity': severity})


STAGES = (add_team, add_zones, add_role_tokens, add_players, add_penalty)


class PlayByPlayReconciler:
    """
    Builds a game's normalized event list from the HTML report and the
    live feed's boxscore.
    """

    def __init__(self, config: PBPConfig = None):
        """
        Initialize the reconciler.

        Args:
            config: PBPConfig instance, or None for defaults
        """
        self.config = config if config is not None else PBPConfig()
        self.logger = logging.getLogger('PlayByPlayReconciler')
        self.parser = PlayReportParser(self.config)

    def reconcile(self, report_html: str, feed: Dict[str, Any], game_id: Optional[int] = None) -> List[NormalizedEvent]:
        """
        Produce the normalized events for one game.

        Args:
            report_html: PL report HTML
            feed: Live-feed document for the same game
            game_id: Game id; defaults to the feed's gamePk

        Returns:
            Events in report order

        Raises:
            ReconciliationError: any stage failure; the game is abandoned
        """
        if game_id is None:
            game_id = feed.get('gamePk')

        try:
            header, rows = self.parser.parse(report_html)
            roster = RosterIndex.from_feed(feed, self.config)
            ctx = GameContext(
                game_id=game_id,
                header=header,
                teams=ReportHeader(away=self.config.canonical_team(header.away),
                                   home=self.config.canonical_team(header.home)),
                roster=roster,
                config=self.config,
            )
            self._check_teams(ctx)

            events = [self.process_row(row, ctx) for row in rows]
        except ReconciliationError as e:
            self.logger.error(f"Game {game_id}: reconciliation aborted: {e}")
            raise

        self.logger.debug(f"Game {game_id}: reconciled {len(events)} events")
        return events

    def process_row(self, row: RawPlayRow, ctx: GameContext) -> NormalizedEvent:
        """Run one report row through every stage."""
        event = build_event(row, ctx)
        for stage in STAGES:
            event = stage(event, ctx)
        return event

    def merge_into_feed(self, report_html: str, feed: Dict[str, Any], game_id: Optional[int] = None) -> Dict[str, Any]:
        """
        Return a copy of the feed with its play list filled from the report.

        Args:
            report_html: PL report HTML
            feed: Live-feed document; left unmodified
            game_id: Game id; defaults to the feed's gamePk

        Returns:
            New feed document with liveData.plays.allPlays replaced
        """
        events = self.reconcile(report_html, feed, game_id)

        merged = copy.deepcopy(feed)
        plays = merged.setdefault('liveData', {}).setdefault('plays', {})
        if plays.get('allPlays'):
            self.logger.warning(f"Game {merged.get('gamePk')}: replacing {len(plays['allPlays'])} existing plays")
        plays['allPlays'] = [event.to_feed_play() for event in events]
        return merged

    def _check_teams(self, ctx: GameContext) -> None:
        """Warn when the report's teams are not the feed's teams."""
        report_teams = {ctx.teams.away, ctx.teams.home}
        feed_teams = set(ctx.roster.teams.values())
        if report_teams != feed_teams:
            self.logger.warning(
                f"Game {ctx.game_id}: report teams {sorted(report_teams)} differ from feed teams {sorted(feed_teams)}"
            )
