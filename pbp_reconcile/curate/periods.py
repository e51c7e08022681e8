#!/usr/bin/env python3
"""
Period type derivation.
"""

from typing import Optional

from pbp_reconcile.model.plays import PeriodType


def derive_period_type(period: int, game_id: Optional[int], config) -> PeriodType:
    """
    Label a period. Periods past the fourth are a shootout in the regular
    season; playoff games keep playing overtime.
    """
    if period <= 3:
        return PeriodType.REGULAR
    if period == 4:
        return PeriodType.OVERTIME
    if config.is_regular_season(game_id):
        return PeriodType.SHOOTOUT
    return PeriodType.OVERTIME
