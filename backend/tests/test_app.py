"""
Tests for the Flask transport.

Uses Flask's test client with an injected player so decisions are reproducible.
"""

import os
import random
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import SERVER_HEADER, create_app  # noqa: E402
from config import Settings  # noqa: E402
from domain import VALID_MOVES  # noqa: E402
from players import Player, RandomPlayer  # noqa: E402


def snake_json(snake_id, body):
    return {
        "id": snake_id,
        "name": snake_id,
        "health": 100,
        "body": [{"x": x, "y": y} for x, y in body],
        "head": {"x": body[0][0], "y": body[0][1]},
        "length": len(body),
        "shout": "",
    }


def game_request_json(you_body, *other_bodies, width=11, height=11, turn=0):
    you = snake_json("me", you_body)
    others = [snake_json(f"other-{i}", body) for i, body in enumerate(other_bodies)]
    return {
        "game": {"id": "game-1", "timeout": 500},
        "turn": turn,
        "board": {
            "width": width,
            "height": height,
            "food": [{"x": 0, "y": 0}],
            "snakes": [you] + others,
        },
        "you": you,
    }


@pytest.fixture
def client():
    app = create_app(Settings(), RandomPlayer(rng=random.Random(0)))
    app.config["TESTING"] = True
    return app.test_client()


def test_index_returns_agent_metadata(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.get_json() == {
        "apiversion": "1",
        "author": "jayuuza",
        "color": "#ff6600",
        "head": "pixel",
        "tail": "pixel",
    }


def test_index_uses_configured_appearance():
    settings = Settings(author="someone", color="#123456", head="smile", tail="bolt")
    client = create_app(settings, RandomPlayer()).test_client()
    data = client.get("/").get_json()
    assert data["author"] == "someone"
    assert data["color"] == "#123456"
    assert data["head"] == "smile"
    assert data["tail"] == "bolt"


def test_responses_identify_the_server(client):
    assert client.get("/").headers["Server"] == SERVER_HEADER


def test_start_and_end_acknowledge(client):
    payload = game_request_json([(5, 5)])
    for path in ("/start", "/end"):
        response = client.post(path, json=payload)
        assert response.status_code == 200
        assert response.get_json() == {"ok": True}


def test_move_returns_a_direction_without_shout(client):
    response = client.post("/move", json=game_request_json([(5, 5)]))
    assert response.status_code == 200
    data = response.get_json()
    assert data["move"] in VALID_MOVES
    assert "shout" not in data


def test_move_avoids_occupied_neighbours(client):
    payload = game_request_json([(5, 5)], [(6, 5), (5, 4)])
    for turn in range(30):
        payload["turn"] = turn
        assert client.post("/move", json=payload).get_json()["move"] in {"left", "down"}


def test_move_when_trapped_still_answers(client):
    payload = game_request_json([(5, 5), (5, 6), (4, 6), (4, 5)], [(5, 4), (6, 4), (6, 5)])
    response = client.post("/move", json=payload)
    assert response.status_code == 200
    assert response.get_json()["move"] in VALID_MOVES


def test_move_includes_configured_shout():
    client = create_app(Settings(shout="hiss"), RandomPlayer()).test_client()
    data = client.post("/move", json=game_request_json([(5, 5)])).get_json()
    assert data["shout"] == "hiss"


def test_default_player_follows_bounds_setting():
    # Only "down" leads anywhere, and only under the default bottom-edge rule
    payload = game_request_json([(2, 2), (1, 2)], [(2, 1)], width=3, height=3)

    lenient = create_app(Settings(seed=5)).test_client()
    assert lenient.post("/move", json=payload).get_json()["move"] == "down"

    strict = create_app(Settings(seed=5, strict_bounds=True)).test_client()
    assert strict.post("/move", json=payload).get_json()["move"] in VALID_MOVES


def test_seeded_apps_answer_identically():
    payload = game_request_json([(5, 5)])
    first = create_app(Settings(seed=11)).test_client()
    second = create_app(Settings(seed=11)).test_client()
    moves_first = [first.post("/move", json=payload).get_json()["move"] for _ in range(20)]
    moves_second = [second.post("/move", json=payload).get_json()["move"] for _ in range(20)]
    assert moves_first == moves_second


@pytest.mark.parametrize("path", ["/start", "/move", "/end"])
def test_non_json_body_is_rejected(client, path):
    response = client.post(path, data="not json", content_type="text/plain")
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_missing_you_is_rejected(client):
    payload = game_request_json([(5, 5)])
    del payload["you"]
    response = client.post("/move", json=payload)
    assert response.status_code == 400
    assert "you" in response.get_json()["error"]


def test_empty_body_segments_are_rejected(client):
    payload = game_request_json([(5, 5)])
    payload["you"]["body"] = []
    response = client.post("/move", json=payload)
    assert response.status_code == 400


def test_player_failure_returns_500():
    class BrokenPlayer(Player):
        def get_move(self, game_request):
            raise RuntimeError("boom")

    client = create_app(Settings(), BrokenPlayer()).test_client()
    response = client.post("/move", json=game_request_json([(5, 5)]))
    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to choose a move"}


def test_move_requires_post(client):
    assert client.get("/move").status_code == 405
