#!/usr/bin/env python3
"""
Play-by-Play Data Models
========================

Pydantic models for report rows, roster entries and the normalized events
that replace the live feed's empty play list.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict, Any
from enum import Enum


ZONE_CODES = ('o', 'd', 'n')


class EventCategory(str, Enum):
    """Canonical event categories."""
    PERIOD_START = 'period_start'
    PERIOD_END = 'period_end'
    GAME_END = 'game_end'
    FACEOFF = 'faceoff'
    STOP = 'stop'
    GOAL = 'goal'
    SHOT = 'shot'
    BLOCKED_SHOT = 'blocked_shot'
    MISSED_SHOT = 'missed_shot'
    TAKEAWAY = 'takeaway'
    GIVEAWAY = 'giveaway'
    HIT = 'hit'
    PENALTY = 'penalty'


class PeriodType(str, Enum):
    """Period types as the live feed labels them."""
    REGULAR = 'regular'
    OVERTIME = 'overtime'
    SHOOTOUT = 'shootout'


# Categories whose descriptions name the players involved
ROLE_BEARING_CATEGORIES = frozenset({
    EventCategory.HIT,
    EventCategory.BLOCKED_SHOT,
    EventCategory.MISSED_SHOT,
    EventCategory.SHOT,
    EventCategory.FACEOFF,
    EventCategory.GOAL,
    EventCategory.PENALTY,
})


class ReportHeader(BaseModel):
    """Team codes from the report's '<TEAM> On Ice' headings, as printed."""
    model_config = ConfigDict(frozen=True)

    away: str = Field(..., description="Away team code in report form, lowercased")
    home: str = Field(..., description="Home team code in report form, lowercased")


class RawPlayRow(BaseModel):
    """One row of the HTML play-by-play table."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Event number within the game")
    period: int = Field(..., description="Period number (4 = OT, 5 = SO in the regular season)")
    elapsed: str = Field(..., description="Raw elapsed/remaining time text, e.g. '0:00 20:00'")
    timeSeconds: int = Field(..., ge=0, description="Elapsed seconds read from `elapsed`")
    typeCode: str = Field(..., description="Raw event type code, e.g. 'FAC'")
    description: str = Field(..., description="Event description with line breaks flattened")


class RoleToken(BaseModel):
    """A role read from a description before roster resolution."""
    model_config = ConfigDict(frozen=True)

    roleTag: str = Field(..., description="Role label, e.g. 'hitter', 'assist1'")
    team: str = Field(..., description="Team code as written in the description")
    jersey: int = Field(..., description="Jersey number")


class EventPlayer(BaseModel):
    """A resolved player and the role they played in an event."""
    model_config = ConfigDict(frozen=True)

    roleTag: str = Field(..., description="Role label")
    playerId: int = Field(..., description="Live-feed player id")


class RosterPlayer(BaseModel):
    """A player dressed (or listed) for one side of the game."""
    model_config = ConfigDict(frozen=True)

    team: str = Field(..., description="Canonical team code")
    id: int = Field(..., description="Live-feed player id")
    name: str = Field("", description="Full name")
    position: str = Field("", description="Position code, e.g. 'C', 'D', 'G'")
    jersey: Optional[int] = Field(None, description="Jersey number; absent for scratches")


class NormalizedEvent(BaseModel):
    """A play-by-play event in the live feed's play-list shape."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Event number within the game")
    period: int = Field(..., description="Period number")
    periodType: PeriodType = Field(..., description="regular, overtime or shootout")
    timeSeconds: int = Field(..., ge=0, description="Seconds elapsed in the period")
    category: EventCategory = Field(..., description="Canonical event category")
    description: str = Field(..., description="Lowercased report description")
    team: Optional[str] = Field(None, description="Canonical code of the team credited with the event")
    zones: Optional[List[str]] = Field(None, description="[zone relative to away, zone relative to home]")
    players: Optional[List[EventPlayer]] = Field(None, description="Resolved players in role order")
    penMins: Optional[int] = Field(None, description="Penalty minutes")
    penSeverity: Optional[str] = Field(None, description="Penalty severity")
    roleTokens: List[RoleToken] = Field(default_factory=list, exclude=True,
                                        description="Unresolved roles; cleared by player resolution")

    @field_validator('zones')
    @classmethod
    def _check_zones(cls, zones: Optional[List[str]]) -> Optional[List[str]]:
        if zones is None:
            return zones
        if len(zones) != 2 or any(z not in ZONE_CODES for z in zones):
            raise ValueError(f"zones must be two of {ZONE_CODES}, got {zones}")
        return zones

    def to_feed_play(self) -> Dict[str, Any]:
        """Dump the event as a plain dict for the live feed's play list."""
        return self.model_dump(mode='json', exclude_none=True)
