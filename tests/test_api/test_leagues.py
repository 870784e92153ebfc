"""Tests for the leagues API."""

from concurrent.futures import ThreadPoolExecutor
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from gridiron.api.main import app
from gridiron.api.services.league_service import league_service

SMALL_LEAGUE = {"num_teams": 4, "weeks": 3, "meetings": 1, "min_rematch_gap": 0, "seed": 1}


@pytest.fixture
def client():
    """Test client whose week simulations run on a thread instead of a process."""
    executor = ThreadPoolExecutor(max_workers=1)
    league_service.use_executor(executor)
    with TestClient(app) as test_client:
        yield test_client
    league_service.use_executor(None)
    executor.shutdown(wait=True)


@pytest.fixture
def league_id(client) -> str:
    response = client.post("/api/v1/leagues", json=SMALL_LEAGUE)
    assert response.status_code == 201
    return response.json()["id"]


class TestAppEndpoints:
    """Tests for the root and health endpoints."""

    def test_root(self, client):
        data = client.get("/").json()
        assert data["name"] == "Gridiron API"
        assert data["docs"] == "/docs"

    def test_health(self, client, league_id):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["active_leagues"] >= 1


class TestCreateLeague:
    """Tests for POST /leagues."""

    def test_creates_league(self, client):
        response = client.post("/api/v1/leagues", json={**SMALL_LEAGUE, "name": "Test League"})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Test League"
        assert data["num_teams"] == 4
        assert data["num_weeks"] == 3
        assert data["week"] == 1
        assert data["games_played"] == 0
        assert data["games_remaining"] == 6
        assert not data["is_complete"]

    def test_infeasible_schedule(self, client):
        """Too few weeks for the matchups should be a 422 with the reason."""
        response = client.post("/api/v1/leagues", json={**SMALL_LEAGUE, "weeks": 2})

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert "cannot fit" in detail["message"]
        assert isinstance(detail["errors"], list)

    def test_invalid_team_count(self, client):
        response = client.post("/api/v1/leagues", json={**SMALL_LEAGUE, "num_teams": 1})
        assert response.status_code == 422


class TestReadLeague:
    """Tests for league, schedule and standings reads."""

    def test_get_league(self, client, league_id):
        response = client.get(f"/api/v1/leagues/{league_id}")
        assert response.status_code == 200
        assert response.json()["id"] == league_id

    def test_unknown_league(self, client):
        assert client.get(f"/api/v1/leagues/{uuid4()}").status_code == 404
        assert client.post(f"/api/v1/leagues/{uuid4()}/sim-week").status_code == 404

    def test_schedule(self, client, league_id):
        data = client.get(f"/api/v1/leagues/{league_id}/schedule").json()

        assert [w["week"] for w in data["weeks"]] == [1, 2, 3]
        for week in data["weeks"]:
            assert [g["game_index"] for g in week["games"]] == [0, 1]
            assert week["byes"] == []
            teams = {t for g in week["games"] for t in (g["home"], g["away"])}
            assert teams == {1, 2, 3, 4}

    def test_standings_before_games(self, client, league_id):
        data = client.get(f"/api/v1/leagues/{league_id}/standings").json()
        assert len(data["standings"]) == 4
        assert all(row["record"] == "0-0" for row in data["standings"])


class TestSimWeek:
    """Tests for POST /leagues/{id}/sim-week."""

    def test_sim_week(self, client, league_id):
        response = client.post(f"/api/v1/leagues/{league_id}/sim-week")

        assert response.status_code == 200
        data = response.json()
        assert data["week"] == 1
        assert len(data["games"]) == 2
        assert data["via_worker"]
        assert data["current_week"] == 2
        assert not data["season_complete"]
        for game in data["games"]:
            assert game["plays"] > 0
            assert game["week"] == 1

    def test_seeded_weeks_repeat(self, client):
        """Two identical leagues simulated with the same seed should match."""
        first = client.post("/api/v1/leagues", json=SMALL_LEAGUE).json()["id"]
        second = client.post("/api/v1/leagues", json=SMALL_LEAGUE).json()["id"]

        a = client.post(f"/api/v1/leagues/{first}/sim-week", json={"seed": 5}).json()
        b = client.post(f"/api/v1/leagues/{second}/sim-week", json={"seed": 5}).json()

        assert a["games"] == b["games"]

    def test_week_results(self, client, league_id):
        client.post(f"/api/v1/leagues/{league_id}/sim-week", json={"seed": 2})

        data = client.get(f"/api/v1/leagues/{league_id}/weeks/1/results").json()
        assert data["week"] == 1
        assert len(data["games"]) == 2

        assert client.get(f"/api/v1/leagues/{league_id}/weeks/2/results").json()["games"] == []
        assert client.get(f"/api/v1/leagues/{league_id}/weeks/4/results").status_code == 404

    def test_full_season(self, client, league_id):
        for _ in range(3):
            data = client.post(f"/api/v1/leagues/{league_id}/sim-week").json()
        assert data["season_complete"]
        assert data["current_week"] == 3

        summary = client.get(f"/api/v1/leagues/{league_id}").json()
        assert summary["is_complete"]
        assert summary["games_played"] == 6

        standings = client.get(f"/api/v1/leagues/{league_id}/standings").json()["standings"]
        assert sum(row["wins"] + row["losses"] + row["ties"] for row in standings) == 12
        assert [row["rank"] for row in standings] == [1, 2, 3, 4]
