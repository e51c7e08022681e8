"""Shared pytest fixtures: a crafted PL report and a matching live feed."""

from __future__ import annotations

import pytest

from pbp_reconcile.config.pbp_config import PBPConfig
from pbp_reconcile.model.plays import ReportHeader
from pbp_reconcile.utils.roster_index import RosterIndex


HEADER_TEMPLATE = """
<table>
  <tr>
    <td class="heading + bborder" width="5%">#</td>
    <td class="heading + bborder" width="5%">Per</td>
    <td class="heading + bborder" width="10%">{away} On Ice</td>
    <td class="heading + bborder" width="10%">{home} On Ice</td>
  </tr>
"""

ROW_TEMPLATE = """
  <tr class="evenColor">
    <td align="center" class="lborder + bborder">{id}</td>
    <td class=" + bborder" align="center">{period}</td>
    <td class=" + bborder" align="center">EV</td>
    <td class=" + bborder" align="center">{elapsed}<br/>{remaining}</td>
    <td class=" + bborder" align="center">{code}</td>
    <td class=" + bborder">{description}</td>
    <td class=" + bborder"><font title="Center - PLAYER">14</font></td>
    <td class=" + bborder + rborder"><font title="Center - PLAYER">43</font></td>
  </tr>
"""

GAME_ROWS = [
    (1, 1, '0:00', 'PSTR', 'Period Start- Local time: 7:08 EDT'),
    (2, 1, '0:00', 'FAC', 'TOR won Neu. Zone - TOR #43 KADRI vs MTL #14 PLEKANEC'),
    (3, 1, '0:45', 'HIT', 'MTL #11 GALLAGHER HIT TOR #3 PHANEUF, Off. Zone'),
    (4, 1, '1:10', 'SHOT', 'TOR ONGOAL - #16 MARNER, Wrist, Off. Zone, 36 ft.'),
    (5, 1, '1:30', 'BLOCK', 'TOR #19 LUPUL BLOCKED BY&nbsp; MTL #26 GORGES, Wrist, Def. Zone'),
    (6, 1, '2:00', 'MISS', 'MTL #67 PACIORETTY, Wrist, Wide of Net, Off. Zone, 45 ft.'),
    (7, 1, '2:30', 'GOAL', 'TOR #16 MARNER(1), Wrist, Off. Zone, 17 ft.<br>Assists: #43 KADRI(1); #44 RIELLY(2)'),
    (8, 1, '3:00', 'PENL', 'TOR #3 PHANEUF Hooking(2 min), Def. Zone Drawn By: MTL #11 GALLAGHER'),
    (9, 1, '3:00', 'STOP', 'ICING'),
    (10, 1, '4:00', 'GIVE', 'MTL&nbsp;GIVEAWAY - #14 PLEKANEC, Def. Zone'),
    (11, 1, '5:00', 'TAKE', 'TOR&nbsp;TAKEAWAY - #43 KADRI, Off. Zone'),
    (12, 1, '20:00', 'PEND', 'Period End- Local time: 7:45 EDT'),
    (13, 3, '20:00', 'GEND', 'Game End- Local time: 9:30 EDT'),
]

ROSTERS = {
    'away': ('TOR', [
        (8001, 'Dion Phaneuf', 'D', '3'),
        (8002, 'Leo Komarov', 'C', '8'),
        (8003, 'Mitchell Marner', 'R', '16'),
        (8004, 'Nazem Kadri', 'C', '43'),
        (8005, 'Morgan Rielly', 'D', '44'),
        (8006, 'Joffrey Lupul', 'L', '19'),
        (8007, 'Frederik Andersen', 'G', '31'),
        (8008, 'Scratched Skater', 'D', None),
    ]),
    'home': ('MTL', [
        (8101, 'Brendan Gallagher', 'R', '11'),
        (8102, 'Tomas Plekanec', 'C', '14'),
        (8103, 'Josh Gorges', 'D', '26'),
        (8104, 'Max Pacioretty', 'L', '67'),
        (8105, 'Carey Price', 'G', '31'),
    ]),
}


def _remaining(elapsed: str) -> str:
    try:
        minutes, seconds = (int(part) for part in elapsed.split(':'))
    except ValueError:
        return '20:00'
    left = 20 * 60 - (minutes * 60 + seconds)
    return f"{left // 60}:{left % 60:02d}"


def make_report(rows, away: str = 'TOR', home: str = 'MTL') -> str:
    """Render PL report HTML for (id, period, elapsed, code, description) rows."""
    body = ''.join(
        ROW_TEMPLATE.format(id=event_id, period=period, elapsed=elapsed, remaining=_remaining(elapsed),
                            code=code, description=description)
        for event_id, period, elapsed, code, description in rows
    )
    return f"<html><body>{HEADER_TEMPLATE.format(away=away, home=home)}{body}</table></body></html>"


def make_feed(rosters=None, game_pk: int = 2016020001, goals=None) -> dict:
    """Render a live-feed document with an empty play list."""
    rosters = rosters or ROSTERS
    teams = {}
    for venue, (abbrev, players) in rosters.items():
        team = {
            'team': {'abbreviation': abbrev},
            'players': {},
        }
        for player_id, name, position, jersey in players:
            entry = {
                'person': {'id': player_id, 'fullName': name},
                'position': {'code': position},
            }
            if jersey is not None:
                entry['jerseyNumber'] = jersey
            team['players'][f'ID{player_id}'] = entry
        if goals is not None:
            team['teamStats'] = {'teamSkaterStats': {'goals': goals[venue]}}
        teams[venue] = team

    return {
        'gamePk': game_pk,
        'liveData': {
            'plays': {'allPlays': []},
            'boxscore': {'teams': teams},
        },
    }


@pytest.fixture
def config():
    return PBPConfig()


@pytest.fixture
def report_builder():
    return make_report


@pytest.fixture
def feed_builder():
    return make_feed


@pytest.fixture
def game_report():
    return make_report(GAME_ROWS)


@pytest.fixture
def game_feed():
    return make_feed(goals={'away': 1, 'home': 0})


@pytest.fixture
def roster(game_feed, config):
    return RosterIndex.from_feed(game_feed, config)


@pytest.fixture
def header():
    """Canonical header for the TOR @ MTL fixture game."""
    return ReportHeader(away='tor', home='mtl')
