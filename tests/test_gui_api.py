import pytest
from fastapi.testclient import TestClient

from glyph_ai.game_setup import new_game
from glyph_ai.gui.app import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "glyph-ai-gui"}


def test_personality_listing(client):
    r = client.get("/api/personalities")
    assert r.status_code == 200
    names = {p["name"] for p in r.json()}
    assert len(names) == 7 and "Bully" in names


def test_personality_detail_and_404(client):
    r = client.get("/api/personalities/vulture")
    assert r.status_code == 200
    assert r.json()["priority"][0] == "steal"
    assert client.get("/api/personalities/gremlin").status_code == 404


def test_new_game(client):
    r = client.post("/api/new-game", json={"seed": 3, "size": "small"})
    assert r.status_code == 200
    assert r.json() == new_game(seed=3, size="small").to_dict()
    assert client.post("/api/new-game", json={"size": "galactic"}).status_code == 400


def test_decide(client):
    state = new_game(seed=4, size="small").to_dict()
    r = client.post("/api/decide", json={"state": state, "personality": "bully", "seed": 1})
    assert r.status_code == 200
    body = r.json()
    assert body["move"]["glyphling"]["owner"] == "yellow"
    assert body["report"]["personality"] == "Bully"


def test_decide_rejects_bad_input(client):
    state = new_game(seed=4, size="small").to_dict()
    r = client.post("/api/decide", json={"state": state, "difficulty": "wizard"})
    assert r.status_code == 400
    r = client.post("/api/decide", json={"state": state, "tuning": {"no_such_knob": 1}})
    assert r.status_code == 400
    off_board = {"tiles": [{"q": 99, "r": 0, "letter": "A", "owner": "yellow"}]}
    assert client.post("/api/decide", json={"state": off_board}).status_code == 400


def test_index_points_at_docs(client):
    body = client.get("/").json()
    assert body["docs"] == "/docs" and body["version"]
