"""End-to-end tests of the SleeperClient facade over a mock transport."""

import asyncio
import json
from datetime import datetime
import httpx
import pytest

from sleeper_client.client import SleeperClient
from sleeper_client.config import Config
from sleeper_client.services.api import CompositionError, NotFoundError


@pytest.fixture
def payloads(league_data, users_data, rosters_data, matchups_data, nfl_state_data):
    return {
        "state/nfl": nfl_state_data,
        "user/alice": users_data[0],
        "user/u1": users_data[0],
        "league/123": league_data,
        "league/123/users": users_data,
        "league/123/rosters": rosters_data,
        "league/123/matchups/8": matchups_data,
        "league/123/matchups/7": matchups_data,
    }


def run_client(payloads, call, seen=None):
    def handler(request):
        path = request.url.path.replace("/v1/", "", 1)
        if seen is not None:
            seen.append(path)
        if path not in payloads:
            return httpx.Response(404)
        return httpx.Response(200, content=json.dumps(payloads[path]).encode(), headers={"Content-Type": "application/json"})

    async def _run():
        async with SleeperClient(Config(), transport=httpx.MockTransport(handler)) as sleeper:
            return await call(sleeper)

    return asyncio.run(_run())


class TestSleeperClient:
    def test_identity_round_trip(self, payloads):
        async def call(sleeper):
            user_id = await sleeper.get_user_id_by_username("alice")
            return await sleeper.get_username_by_user_id(user_id)

        assert run_client(payloads, call) == "alice"

    def test_standings(self, payloads):
        standings = run_client(payloads, lambda s: s.get_league_standings("123"))
        assert [t.rank for t in standings] == [1, 2, 3, 4]
        assert standings[0].roster_id == 2

    def test_overview_fetches_each_resource_once(self, payloads):
        seen = []
        overview = run_client(payloads, lambda s: s.get_league_overview("123"), seen)

        assert len(overview.teams) == 4
        assert sorted(seen) == ["league/123", "league/123/rosters", "league/123/users"]

    def test_current_week_matchups(self, payloads):
        seen = []
        pairs = run_client(payloads, lambda s: s.get_current_week_matchups("123"), seen)

        assert len(pairs) == 2
        assert "league/123/matchups/8" in seen

    def test_scoreboard(self, payloads):
        # week 7 is before the current week 8, so games are complete
        scoreboard = run_client(payloads, lambda s: s.get_scoreboard("123", 7, as_of=datetime(2024, 10, 20)))

        assert scoreboard[0].team1.name == "Alpha Dogs"
        assert scoreboard[0].winner == "team1"
        assert scoreboard[1].winner == "tie"  # 99.0 vs 99.0

    def test_playoff_structure(self, payloads):
        structure = run_client(payloads, lambda s: s.get_playoff_structure("123"))
        assert structure.bracket.total_games == 3

    def test_missing_resource_in_composition(self, payloads):
        del payloads["league/123/users"]

        with pytest.raises(CompositionError) as exc_info:
            run_client(payloads, lambda s: s.get_league_overview("123"))
        assert isinstance(exc_info.value.cause, NotFoundError)

    def test_unknown_league_in_composition(self, payloads):
        payloads["league/999"] = None

        with pytest.raises(CompositionError, match="Failed to fetch playoff format") as exc_info:
            run_client(payloads, lambda s: s.get_playoff_format("999"))
        assert isinstance(exc_info.value.cause, NotFoundError)

    def test_generate_bracket_structure(self):
        assert SleeperClient.generate_bracket_structure(4, 2, 10).total_games == 3
