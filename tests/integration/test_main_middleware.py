from tests.helpers import _h, VIEWER


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_guest_post_rejected_by_readonly_middleware(client):
    r = client.post("/victims/", json={"name": "Nobody"})
    assert r.status_code == 401
    assert "Guest mode is read-only" in r.text


def test_guest_delete_rejected(client):
    r = client.delete("/cases/5b0a3c8e-8d5e-4d1a-9a53-2d7b8f1f0c11")
    assert r.status_code == 401


def test_signed_in_viewer_passes_middleware_but_not_role_check(client):
    r = client.post("/victims/", json={"name": "Nobody"}, headers=_h(VIEWER))
    assert r.status_code == 403


def test_dev_mode_impersonates_local_admin(client, monkeypatch):
    monkeypatch.setenv("DEV_MODE", "true")
    monkeypatch.setenv("APP_BASE_URL", "http://localhost:5173")

    r = client.post("/victims/", json={"name": "Local Victim"})
    assert r.status_code == 201, r.text

    me = client.get("/users/me").json()
    assert me["email"] == "dev@localhost"
    assert me["role"] == "admin"
    assert r.json()["created_by"] == me["id"]
