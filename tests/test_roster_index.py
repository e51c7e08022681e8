"""Tests for utils/roster_index.py module."""

from __future__ import annotations

import pytest

from pbp_reconcile.errors import MalformedFeed
from pbp_reconcile.utils.roster_index import RosterIndex


class TestRosterIndexFromFeed:
    def test_indexes_by_team_and_jersey(self, roster):
        matches = roster.find("tor", 16)

        assert len(matches) == 1
        assert matches[0].id == 8003
        assert matches[0].name == "Mitchell Marner"
        assert matches[0].position == "R"

    def test_records_venue_teams(self, roster):
        assert roster.teams == {"away": "tor", "home": "mtl"}

    def test_same_jersey_on_both_teams(self, roster):
        assert roster.find("tor", 31)[0].id == 8007
        assert roster.find("mtl", 31)[0].id == 8105

    def test_players_without_jersey_are_not_indexed(self, roster):
        [scratched] = [player for player in roster.players if player.id == 8008]

        assert scratched.jersey is None
        assert all(8008 not in [p.id for p in players] for players in roster.jersey_lookup.values())

    def test_canonicalizes_feed_abbreviation(self, config, feed_builder):
        feed = feed_builder(rosters={
            'away': ('N.J', [(1, 'Taylor Hall', 'L', '9')]),
            'home': ('TBL', [(2, 'Steven Stamkos', 'C', '91')]),
        })

        roster = RosterIndex.from_feed(feed, config)

        assert roster.find("njd", 9)[0].id == 1
        assert roster.find("tbl", 91)[0].id == 2

    def test_missing_boxscore_raises(self, config):
        with pytest.raises(MalformedFeed):
            RosterIndex.from_feed({'gamePk': 2016020001, 'liveData': {}}, config)

    def test_missing_venue_raises(self, config, game_feed):
        del game_feed['liveData']['boxscore']['teams']['home']

        with pytest.raises(MalformedFeed):
            RosterIndex.from_feed(game_feed, config)

    def test_missing_person_id_raises(self, config, game_feed):
        game_feed['liveData']['boxscore']['teams']['away']['players']['ID8001']['person'].pop('id')

        with pytest.raises(MalformedFeed):
            RosterIndex.from_feed(game_feed, config)

    def test_non_numeric_person_id_raises(self, config, game_feed):
        game_feed['liveData']['boxscore']['teams']['away']['players']['ID8001']['person']['id'] = 'x8001'

        with pytest.raises(MalformedFeed):
            RosterIndex.from_feed(game_feed, config)

    @pytest.mark.parametrize("jersey", [0, "0", " 00 "])
    def test_jersey_zero_is_indexed(self, config, feed_builder, jersey):
        feed = feed_builder(rosters={
            'away': ('TOR', [(1, 'Zero Wearer', 'C', jersey)]),
            'home': ('MTL', [(2, 'Carey Price', 'G', '31')]),
        })

        roster = RosterIndex.from_feed(feed, config)

        assert [player.id for player in roster.find("tor", 0)] == [1]

    @pytest.mark.parametrize("jersey", ["", "²", "N/A"])
    def test_unreadable_jersey_is_left_unset(self, config, feed_builder, jersey):
        feed = feed_builder(rosters={
            'away': ('TOR', [(1, 'Odd Jersey', 'C', jersey)]),
            'home': ('MTL', [(2, 'Carey Price', 'G', '31')]),
        })

        roster = RosterIndex.from_feed(feed, config)

        assert roster.players[0].jersey is None
