"""
Tests for the Flask control surface.

Each test gets a fresh process-wide controller so runs never leak
between tests.
"""

import threading
import time

import pytest

import main
from algorithms.pacing import PacingConfig
from config import DEFAULT_ARRAY_SIZE, MAX_ARRAY_SIZE
from engine import RunController


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setattr(
        main, "controller", RunController([5, 3, 8, 1], pacing=PacingConfig(delay_ms=0))
    )
    main.app.config["TESTING"] = True
    with main.app.test_client() as c:
        yield c


class TestRegistryEndpoint:

    def test_lists_six_algorithms(self, client):
        resp = client.get("/api/algorithms")
        assert resp.status_code == 200
        keys = [a["key"] for a in resp.get_json()["algorithms"]]
        assert keys == ["bubble", "insertion", "selection", "quick", "merge", "heap"]


class TestRunEndpoints:

    def test_idle_state(self, client):
        data = client.get("/api/state").get_json()
        assert data["state"] == {"status": "idle", "algorithm": None, "cancel_requested": False}
        assert data["values"] == [5, 3, 8, 1]
        assert data["frame"] is None

    def test_ticking_drives_run_to_completion(self, client):
        resp = client.post("/api/run", json={"algorithm": "bubble"})
        assert resp.status_code == 200
        assert resp.get_json()["state"]["status"] == "running"

        for _ in range(10):
            data = client.post("/api/tick").get_json()
        assert data["state"]["status"] == "completed"
        assert data["values"] == [1, 3, 5, 8]
        assert data["frames_emitted"] == 4
        assert data["frame"]["values"] == [1, 3, 5, 8]

    def test_second_run_rejected(self, client):
        client.post("/api/run", json={"algorithm": "quick"})
        resp = client.post("/api/run", json={"algorithm": "merge"})
        assert resp.status_code == 409
        assert resp.get_json()["state"]["algorithm"] == "quick"

    def test_unknown_algorithm(self, client):
        resp = client.post("/api/run", json={"algorithm": "bogo"})
        assert resp.status_code == 400
        assert main.controller.state.status.value == "idle"

    def test_cancel(self, client):
        client.post("/api/run", json={"algorithm": "insertion"})
        resp = client.post("/api/cancel")
        assert resp.get_json()["state"]["cancel_requested"] is True

        data = client.post("/api/tick").get_json()
        assert data["state"]["status"] == "aborted"
        assert sorted(data["values"]) == [1, 3, 5, 8]

    def test_cancel_when_idle(self, client):
        resp = client.post("/api/cancel")
        assert resp.status_code == 200
        assert resp.get_json()["state"]["status"] == "idle"

    def test_state_is_read_only(self, client):
        client.post("/api/run", json={"algorithm": "bubble"})
        for _ in range(3):
            data = client.get("/api/state").get_json()
        assert data["state"]["status"] == "running"
        assert data["frames_emitted"] == 0
        assert data["values"] == [5, 3, 8, 1]

    def test_tick_when_idle(self, client):
        data = client.post("/api/tick").get_json()
        assert data["advanced"] is False
        assert data["state"]["status"] == "idle"

    def test_concurrent_ticks_are_serialised(self, client):
        def slow_renderer(frame):
            time.sleep(0.2)

        main.controller.on_frame = slow_renderer
        client.post("/api/run", json={"algorithm": "bubble"})

        codes = []

        def tick():
            with main.app.test_client() as c:
                codes.append(c.post("/api/tick").status_code)

        threads = [threading.Thread(target=tick) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert codes == [200, 200]
        assert main.controller.frames_emitted == 2
        assert main.controller.sequence == [3, 5, 1, 8]


class TestResetEndpoint:

    def test_reset_generates_array(self, client):
        resp = client.post("/api/reset", json={"size": 25, "seed": 3})
        assert resp.status_code == 200
        assert len(resp.get_json()["values"]) == 25

    def test_reset_default_size(self, client):
        data = client.post("/api/reset").get_json()
        assert len(data["values"]) == DEFAULT_ARRAY_SIZE

    def test_reset_rejected_while_running(self, client):
        client.post("/api/run", json={"algorithm": "heap"})
        resp = client.post("/api/reset", json={"size": 20})
        assert resp.status_code == 409
        assert main.controller.is_running

    @pytest.mark.parametrize("seed", [[1, 2], {"a": 1}, "abc", 1.5, True])
    def test_reset_invalid_seed(self, client, seed):
        resp = client.post("/api/reset", json={"size": 20, "seed": seed})
        assert resp.status_code == 400
        assert main.controller.sequence == [5, 3, 8, 1]

    @pytest.mark.parametrize("size", [0, MAX_ARRAY_SIZE + 1, "big"])
    def test_reset_invalid_size(self, client, size):
        resp = client.post("/api/reset", json={"size": size})
        assert resp.status_code == 400


class TestSpeedEndpoint:

    def test_speed_slider(self, client):
        resp = client.post("/api/config/speed", json={"speed": 600})
        assert resp.get_json() == {"delay_ms": 400}
        assert main.controller.pacing.delay_ms == 400

    def test_preset(self, client):
        resp = client.post("/api/config/speed", json={"preset": "turbo"})
        assert resp.get_json() == {"delay_ms": 0}

    def test_bad_values(self, client):
        assert client.post("/api/config/speed", json={"preset": "warp"}).status_code == 400
        assert client.post("/api/config/speed", json={"speed": "fast"}).status_code == 400


class TestRecordEndpoint:

    def test_record_returns_frames_without_touching_live_run(self, client):
        resp = client.post("/api/record", json={"algorithm": "bubble"})
        assert resp.status_code == 200
        data = resp.get_json()
        assert [f["values"] for f in data["frames"]] == [
            [3, 5, 8, 1], [3, 5, 1, 8], [3, 1, 5, 8], [1, 3, 5, 8],
        ]
        assert data["metrics"]["status"] == "completed"
        assert main.controller.sequence == [5, 3, 8, 1]
        assert main.controller.state.status.value == "idle"

    def test_record_unknown(self, client):
        assert client.post("/api/record", json={"algorithm": "bogo"}).status_code == 400
