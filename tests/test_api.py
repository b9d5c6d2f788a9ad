"""
API Tests

Runs the FastAPI app in-process with TestClient against an in-memory store.
No server, network, or Firestore access is needed.
"""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from server.app import app
from server.config import ServerConfig
from server.services import InMemoryScoreStore, ScoreStoreError
from server.state import AppState, set_state

from conftest import FRIDAY, MONDAY, score


class FailingStore:
    def fetch_scores(self):
        raise ScoreStoreError("offline")


def _records():
    records = [score("Ann", g, MONDAY + timedelta(days=i)) for i, g in enumerate([3, 4, 2, 5, 0])]
    records += [score("Bob", g, MONDAY + timedelta(days=i), hour=12) for i, g in enumerate([4, 4, 6])]
    records.append({"name": "Cat", "guesses": 3})
    return records


class TestApi:
    """Endpoints over a fixed snapshot."""

    @pytest.fixture(autouse=True)
    def setup(self):
        self.state = AppState(ServerConfig(), store=InMemoryScoreStore(_records()))
        set_state(self.state)
        self.client = TestClient(app)
        yield
        set_state(None)

    def test_root(self):
        response = self.client.get("/")
        assert response.status_code == 200
        assert response.json()["store"] == "InMemoryScoreStore"

    def test_health(self):
        response = self.client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_leaderboards(self):
        response = self.client.get("/api/leaderboards", params={"as_of": FRIDAY.isoformat()})
        assert response.status_code == 200
        data = response.json()
        assert data["as_of"] == FRIDAY.isoformat()
        assert data["excluded_count"] == 1
        assert [e["name"] for e in data["daily"]] == ["Ann"]
        assert data["daily"][0]["metric"] == 7
        assert [e["name"] for e in data["most_active"]] == ["Ann", "Bob"]
        assert [e["name"] for e in data["raw_average"]] == ["Ann"]
        assert [e["name"] for e in data["wooden_spoon"]] == ["Ann"]
        assert "cache" in data

    def test_leaderboards_bad_as_of(self):
        response = self.client.get("/api/leaderboards", params={"as_of": "someday"})
        assert response.status_code == 400

    def test_chart(self):
        response = self.client.get(
            "/api/chart",
            params={"mode": "raw", "connect_gaps": "true", "range": "all"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "raw"
        assert data["points"][0]["day"] == MONDAY.isoformat()
        assert data["points"][-1]["values"]["Bob"]["value"] == pytest.approx(14 / 3)

    def test_chart_bad_mode(self):
        assert self.client.get("/api/chart", params={"mode": "median"}).status_code == 400

    def test_chart_bad_range(self):
        assert self.client.get("/api/chart", params={"range": "decade"}).status_code == 400

    def test_chart_bad_flag(self):
        assert self.client.get("/api/chart", params={"connect_gaps": "sometimes"}).status_code == 422

    def test_player_stats(self):
        response = self.client.get("/api/players/Ann/stats")
        assert response.status_code == 200
        data = response.json()
        assert data["played"] == 5
        assert data["wins"] == 4
        assert data["current_streak"] == 0

    def test_unknown_player(self):
        assert self.client.get("/api/players/Zed/stats").status_code == 404

    def test_stats(self):
        data = self.client.get("/api/stats").json()
        assert data["total_records"] == 9
        assert data["valid_records"] == 8
        assert data["excluded_records"] == 1
        assert data["players"] == 2
        assert data["global_mean"] == pytest.approx(35 / 8)

    def test_store_failure_is_503(self):
        set_state(AppState(ServerConfig(), store=FailingStore()))
        assert self.client.get("/api/leaderboards").status_code == 503


class TestStoreSelection:

    def test_missing_json_falls_back_to_empty_store(self, tmp_path):
        config = ServerConfig(data_source="json", scores_json_path=tmp_path / "missing.json")
        state = AppState(config)
        assert state.store_name == "InMemoryScoreStore"

    def test_json_store(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("[]")
        state = AppState(ServerConfig(data_source="json", scores_json_path=path))
        assert state.store_name == "JsonScoreStore"

    def test_rating_config_file(self, tmp_path):
        path = tmp_path / "rating.json"
        path.write_text('{"bayesian": {"recency_days": 30}}')
        state = AppState(ServerConfig(rating_config_path=path), store=InMemoryScoreStore())
        assert state.rating_config.recency_days == 30

    def test_bad_rating_config_uses_defaults(self, tmp_path):
        path = tmp_path / "rating.json"
        path.write_text('{"bayesian": {"alpha": -1}}')
        state = AppState(ServerConfig(rating_config_path=path), store=InMemoryScoreStore())
        assert state.rating_config.prior_strength == 20
