#!/usr/bin/env python3
"""
Errors raised while reconciling a game's play-by-play.

Every error is fatal to the game being processed. Callers can catch
ReconciliationError to handle any of them.
"""

from typing import Optional


class ReconciliationError(Exception):
    """Base class for all reconciliation failures."""


class MalformedRow(ReconciliationError):
    """The report is missing an expected cell, header or well-formed value."""

    def __init__(self, reason: str, row_index: Optional[int] = None):
        self.reason = reason
        self.row_index = row_index
        where = f"row {row_index}: " if row_index is not None else ""
        super().__init__(f"Malformed report {where}{reason}")


class MalformedFeed(ReconciliationError):
    """The live feed lacks the boxscore structure needed for the roster."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed live feed: {reason}")


class UnsupportedEventCode(ReconciliationError):
    """Raw type code is not in the known set."""

    def __init__(self, event_id: int, code: str):
        self.event_id = event_id
        self.code = code
        super().__init__(f"Event {event_id}: unsupported event code '{code}'")


class RoleExtractionFailure(ReconciliationError):
    """The category grammar found no match for a required role."""

    def __init__(self, event_id: int, category: str, detail: str = ""):
        self.event_id = event_id
        self.category = category
        message = f"Event {event_id}: could not extract {category} roles"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class PlayerNotFound(ReconciliationError):
    """No roster entry for a team/jersey token."""

    def __init__(self, event_id: int, team: str, jersey: int):
        self.event_id = event_id
        self.team = team
        self.jersey = jersey
        super().__init__(f"Event {event_id}: no player #{jersey} on {team} roster")


class AmbiguousPlayer(PlayerNotFound):
    """More than one roster entry shares a team/jersey token."""

    def __init__(self, event_id: int, team: str, jersey: int):
        super().__init__(event_id, team, jersey)
        self.args = (f"Event {event_id}: more than one player #{jersey} on {team} roster",)


class PenaltyFormatError(ReconciliationError):
    """Penalty event without a '(N min)' minute count."""

    def __init__(self, event_id: int):
        self.event_id = event_id
        super().__init__(f"Event {event_id}: penalty minutes not found in description")
