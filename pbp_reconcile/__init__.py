"""Merge the NHL HTML play-by-play report into a game's live-feed document."""

from pbp_reconcile.config.pbp_config import PBPConfig, create_default_config
from pbp_reconcile.curate.reconciler import PlayByPlayReconciler
from pbp_reconcile.errors import (
    ReconciliationError, MalformedRow, MalformedFeed, UnsupportedEventCode,
    RoleExtractionFailure, PlayerNotFound, AmbiguousPlayer, PenaltyFormatError,
)
from pbp_reconcile.validate.validator import EventValidator, events_to_frame

__version__ = "0.1.0"
