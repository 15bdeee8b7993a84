import main
from engine import replay


def test_index_lists_algorithms(client):
    body = client.get("/").get_json()

    assert body["algorithm"] == "Bubble Sort"
    assert body["data_count"] == 6
    assert len(body["algorithms"]) == 5


def test_algorithm_cards(client):
    cards = client.get("/api/algorithms").get_json()

    assert [c["key"] for c in cards] == ["bubble", "comb", "shell", "cant_believe", "quick"]
    assert cards[0]["pseudocode"]


def test_next_walks_the_event_stream(client):
    first = client.post("/api/playback/next").get_json()
    second = client.post("/api/playback/next").get_json()

    assert first["event"] == {"type": "wait", "duration": 3.0}
    assert second["event"]["type"] == "reset"
    assert sorted(second["event"]["data"]) == list(range(6))
    assert second["state"]["phase"] == "lead_in"


def test_poll_with_explicit_clock(client):
    early = client.post("/api/playback/poll", json={"elapsed": 0.0}).get_json()
    due = client.post("/api/playback/poll", json={"elapsed": 3.0}).get_json()

    assert early["event"] is None
    assert early["deadline"] == 3.0
    assert due["event"]["type"] == "reset"


def test_poll_rejects_bad_clock(client):
    resp = client.post("/api/playback/poll", json={"elapsed": "soon"})

    assert resp.status_code == 400


def test_reset_rebuilds_controller(client):
    body = client.post("/api/playback/reset", json={"data_count": 9, "seed": 1}).get_json()

    assert body["data_count"] == 9
    assert body["algorithm_index"] == 0
    assert body["phase"] == "intermission"


def test_reset_rejects_bad_count(client):
    resp = client.post("/api/playback/reset", json={"data_count": -4})

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_play_toggle_and_speed(client):
    assert client.post("/api/playback/play").get_json() == {"is_playing": False}
    assert client.post("/api/playback/play").get_json() == {"is_playing": True}

    assert client.post("/api/config/speed", json={"speed": "turbo"}).get_json() == {"speed": "turbo"}
    assert client.get("/api/state").get_json()["speed"] == "turbo"
    assert client.post("/api/config/speed", json={"speed": "warp"}).status_code == 400


def test_run_records_a_replayable_log(client):
    body = client.post("/api/run", json={"algo": "comb", "data": [3, 0, 2, 1]}).get_json()

    assert body["algo_key"] == "comb"
    assert replay(body["initial"], body["swaps"]) == [0, 1, 2, 3]


def test_run_with_generated_input(client):
    body = client.post("/api/run", json={"algo": "quick", "data_count": 15, "seed": 4}).get_json()

    assert sorted(body["initial"]) == list(range(15))
    assert body["metrics"]["is_sorted"] is True


def test_run_errors(client):
    assert client.post("/api/run", json={"algo": "bogo"}).status_code == 400
    assert client.post("/api/run", json={"data": [0, 0]}).status_code == 400
    assert client.post("/api/run", json={"data": "nope"}).status_code == 400


def test_compare(client):
    body = client.post("/api/compare", json={
        "left": "bubble", "right": "quick", "data": [5, 4, 3, 2, 1, 0],
    }).get_json()

    assert body["left"]["swap_count"] == 15
    assert body["winner_swaps"] == "Quick Sort"


def test_compare_unknown_algorithm(client):
    resp = client.post("/api/compare", json={"left": "bubble", "right": "bogo"})

    assert resp.status_code == 400


def test_state_exposes_starting_permutation(client):
    state = client.get("/api/state").get_json()
    reset = [client.post("/api/playback/next").get_json() for _ in range(2)][1]

    assert sorted(state["initial_data"]) == list(range(6))
    assert reset["event"]["data"] == state["initial_data"]


def test_run_rejects_oversized_input(client):
    too_many = main.get_runtime().cfg.max_data_count + 1

    by_data = client.post("/api/run", json={"algo": "quick", "data": list(range(too_many))})
    by_count = client.post("/api/compare", json={"data_count": too_many})

    assert by_data.status_code == 400
    assert "limit" in by_data.get_json()["error"]
    assert by_count.status_code == 400


def test_run_quick_on_largest_sorted_input(client):
    limit = main.get_runtime().cfg.max_data_count

    body = client.post("/api/run", json={"algo": "quick", "data": list(range(limit))}).get_json()

    assert body["swaps"] == []
    assert body["metrics"]["is_sorted"] is True


def test_run_rejects_bad_types(client):
    assert client.post("/api/run", json={"data_count": 3.5}).status_code == 400
    assert client.post("/api/run", json={"data_count": True}).status_code == 400
    assert client.post("/api/run", json={"seed": [1]}).status_code == 400


def test_reset_rejects_bad_types(client):
    for body in ({"data_count": 3.5}, {"data_count": "7"}, {"seed": [1]}, {"data_count": 100000}):
        resp = client.post("/api/playback/reset", json=body)

        assert resp.status_code == 400, body
        assert "error" in resp.get_json()

    assert client.get("/api/state").get_json()["data_count"] == 6
