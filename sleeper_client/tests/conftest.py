"""Shared API payloads for tests."""

import pytest


@pytest.fixture
def league_data():
    return {
        "league_id": "123456789",
        "name": "Test League",
        "season": "2024",
        "season_type": "regular",
        "status": "in_season",
        "sport": "nfl",
        "total_rosters": 4,
        "settings": {
            "playoff_teams": 4,
            "playoff_weeks": 2,
            "playoff_week_start": 15,
            "playoff_type": 0,
            "waiver_type": 2,
        },
        "scoring_settings": {"rec": 1.0},
        "roster_positions": ["QB", "RB", "WR", "FLEX", "BN"],
    }


@pytest.fixture
def users_data():
    return [
        {"user_id": "u1", "username": "alice", "display_name": "Alice", "metadata": {"team_name": "Alpha Dogs"}},
        {"user_id": "u2", "username": "bob", "display_name": "Bob", "metadata": {}},
        {"user_id": "u3", "username": "carol", "display_name": "Carol"},
    ]


@pytest.fixture
def rosters_data():
    return [
        {
            "roster_id": 1,
            "owner_id": "u1",
            "players": ["4034", "6794"],
            "starters": ["4034"],
            "settings": {
                "wins": 5, "losses": 2, "ties": 0,
                "fpts": 812, "fpts_decimal": 45,
                "fpts_against": 760, "fpts_against_decimal": 10,
                "ppts": 901, "ppts_decimal": 5,
            },
        },
        {
            "roster_id": 2,
            "owner_id": "u2",
            "players": ["421"],
            "starters": ["421"],
            "settings": {
                "wins": 6, "losses": 1, "ties": 0,
                "fpts": 790, "fpts_decimal": 0,
                "fpts_against": 700, "fpts_against_decimal": 99,
                "ppts": 850, "ppts_decimal": 50,
            },
        },
        {
            "roster_id": 3,
            "owner_id": "u3",
            "players": [],
            "starters": [],
            "settings": {
                "wins": 5, "losses": 2, "ties": 0,
                "fpts": 830, "fpts_decimal": 12,
                "fpts_against": 801, "fpts_against_decimal": 0,
                "ppts": 0, "ppts_decimal": 0,
            },
        },
        {
            "roster_id": 4,
            "owner_id": None,
            "players": [],
            "starters": [],
            "settings": {"wins": 1, "losses": 6, "ties": 0, "fpts": 600, "fpts_decimal": 1},
        },
    ]


@pytest.fixture
def matchups_data():
    return [
        {"roster_id": 1, "matchup_id": 2, "points": 101.5, "starters": ["4034"], "players_points": {"4034": 30.2}},
        {"roster_id": 2, "matchup_id": 1, "points": 99.0, "starters": ["421"], "players_points": {"421": 12.0}},
        {"roster_id": 3, "matchup_id": 2, "points": 88.25, "starters": [], "players_points": {}},
        {"roster_id": 4, "matchup_id": 1, "points": 99.0, "starters": [], "players_points": {}},
    ]


@pytest.fixture
def nfl_state_data():
    return {
        "week": 8,
        "season": "2024",
        "season_type": "regular",
        "display_week": 8,
        "leg": 8,
        "league_season": "2024",
    }
