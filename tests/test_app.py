import pytest

import app as app_module
from trie import Trie


@pytest.fixture
def client(monkeypatch):
    t = Trie()
    t.add_string("B", 1)
    t.add_string("Bar", 2)
    monkeypatch.setattr(app_module, "trie", t)
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "GET  /find?q=<key>" in resp.get_json()["endpoints"]


def test_health(client):
    body = client.get("/health").get_json()
    assert body["status"] == "healthy"
    assert body["trie_size"] == 2


def test_stats(client):
    body = client.get("/stats").get_json()
    assert body["total_keys"] == 2
    assert body["total_edges"] == 3


def test_find(client):
    resp = client.get("/find?q=Bar")
    assert resp.status_code == 200
    assert resp.get_json() == {"key": "Bar", "path_exists": True, "value": 2}


def test_find_path_without_value(client):
    resp = client.get("/find?q=Ba")
    assert resp.status_code == 200
    assert resp.get_json()["value"] is None


def test_find_missing_path(client):
    resp = client.get("/find?q=Baz")
    assert resp.status_code == 404
    assert resp.get_json()["path_exists"] is False


def test_find_requires_q(client):
    assert client.get("/find").status_code == 400


def test_find_empty_key_is_root(client):
    resp = client.get("/find?q=")
    assert resp.status_code == 200
    assert resp.get_json()["value"] is None


def test_entries(client):
    body = client.get("/entries").get_json()
    assert body["count"] == 3
    assert body["entries"] == [["B", 1], ["a", None], ["r", 2]]


def test_insert(client):
    resp = client.post("/insert", json={"key": "Baz", "value": 7})
    assert resp.status_code == 201
    assert resp.get_json()["trie_size"] == 3
    assert app_module.trie.find("Baz").value == 7


def test_insert_keeps_key_verbatim(client):
    client.post("/insert", json={"key": "  Mixed ", "value": 1})
    assert "  Mixed " in app_module.trie
    assert "mixed" not in app_module.trie


@pytest.mark.parametrize("body", [
    {},
    {"value": 1},
    {"key": 3, "value": 1},
    {"key": "x"},
    {"key": "x", "value": "1"},
    {"key": "x", "value": 1.5},
    {"key": "x", "value": True},
])
def test_insert_rejects_bad_body(client, body):
    resp = client.post("/insert", json=body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_delete(client):
    resp = client.delete("/delete?q=B")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["deleted"] is True
    assert body["value"] == 1
    assert body["trie_size"] == 1
    # path persists after deletion
    assert client.get("/find?q=B").status_code == 200


def test_delete_missing(client):
    resp = client.delete("/delete?q=nope")
    assert resp.status_code == 404
    assert resp.get_json()["deleted"] is False
    assert app_module.trie.length() == 2


def test_delete_requires_q(client):
    assert client.delete("/delete").status_code == 400
