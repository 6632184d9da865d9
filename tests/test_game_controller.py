"""Tests for the HTTP endpoints the game UI calls."""

from conftest import TODAY
from wordle_daily import create_app
from wordle_daily.config import TestingConfig


def start(client, mode=None):
    body = {} if mode is None else {"game_mode": mode}
    return client.post("/api/new_game", json=body)


def guess(client, word):
    return client.post("/api/game/guess", json={"guess": word})


class TestNewGame:
    def test_new_normal_game(self, client):
        response = start(client)
        assert response.status_code == 200
        state = response.get_json()["state"]
        assert state["status"] == "ONGOING"
        assert state["game_mode"] == "NORMAL"
        assert state["answer"] is None
        assert len(state["rows"]) == 6

    def test_invalid_mode(self, client):
        response = start(client, "absurdle")
        assert response.status_code == 400
        assert response.get_json()["success"] is False

    def test_daily_refused_after_finishing(self, client, game_service):
        start(client, "daily")
        guess(client, game_service.session.target)

        response = start(client, "daily")
        assert response.status_code == 400
        assert response.get_json()["error_type"] == "DailyAlreadyPlayed"


class TestGuess:
    def test_state_before_any_game(self, client):
        response = client.get("/api/game/state")
        assert response.status_code == 404

    def test_missing_guess(self, client):
        start(client)
        assert client.post("/api/game/guess", json={}).status_code == 400

    def test_rejected_guess(self, client):
        start(client)
        response = guess(client, "ZZZZZ")
        assert response.status_code == 400
        assert response.get_json()["error"] == "Word not in word list"

    def test_winning_guess(self, client, game_service):
        start(client)
        target = game_service.session.target

        response = guess(client, target.lower())
        assert response.status_code == 200
        state = response.get_json()["state"]
        assert state["status"] == "WON"
        assert state["answer"] == target
        assert state["attempt_rank"] == "Genius"
        assert state["result_saved"] is True

        assert client.get("/api/game/state").get_json()["state"]["won"] is True

    def test_failed_save_then_retry(self, client, game_service, store):
        start(client)
        store.fail_writes = True

        response = guess(client, game_service.session.target)
        assert response.status_code == 503
        assert response.get_json()["error_type"] == "PersistenceError"

        state = client.get("/api/game/state").get_json()["state"]
        assert state["game_over"] is True
        assert state["result_saved"] is False

        store.fail_writes = False
        response = client.post("/api/game/save")
        assert response.status_code == 200
        assert response.get_json()["state"]["result_saved"] is True


class TestStatistics:
    def test_statistics_after_a_win(self, client, game_service):
        start(client)
        guess(client, game_service.session.target)

        data = client.get("/api/statistics").get_json()
        assert data["statistics"]["total_wins"] == 1
        assert data["statistics"]["current_streak"] == 1
        assert data["statistics"]["win_rate"] == 100.0
        assert data["daily_played"] is False
        assert data["degraded"] is False

    def test_statistics_degraded(self, client, store):
        store.fail_reads = True
        response = client.get("/api/statistics")
        assert response.status_code == 200
        data = response.get_json()
        assert data["degraded"] is True
        assert data["statistics"]["total_wins"] == 0
        assert data["daily_played"] is None

    def test_daily_status(self, client):
        data = client.get("/api/daily").get_json()
        assert data["date"] == TODAY.isoformat()
        assert data["already_played"] is False
        assert data["wins_today"] == 0
        assert data["daily_dates"] == []
        assert data["degraded"] is False

    def test_daily_status_after_daily_win(self, client, game_service):
        start(client, "daily")
        guess(client, game_service.session.target)

        data = client.get("/api/daily").get_json()
        assert data["already_played"] is True
        assert data["wins_today"] == 1
        assert data["daily_dates"] == [TODAY.isoformat()]

    def test_daily_status_degraded(self, client, store):
        store.fail_reads = True
        response = client.get("/api/daily")
        assert response.status_code == 200
        data = response.get_json()
        assert data["degraded"] is True
        assert data["already_played"] is None


class TestApp:
    def test_health(self, client):
        data = client.get("/api/health").get_json()
        assert data["status"] == "healthy"
        assert data["word_count"] == 12
        assert data["game_in_progress"] is False

    def test_default_service_uses_bundled_words(self):
        app = create_app(TestingConfig)
        response = app.test_client().post("/api/new_game", json={})
        assert response.status_code == 200
