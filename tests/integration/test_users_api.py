from tests.helpers import _h, ADMIN, INVESTIGATOR, VIEWER


def test_me_reports_bootstrap_roles(client):
    assert client.get("/users/me", headers=_h(ADMIN)).json()["role"] == "admin"
    assert client.get("/users/me", headers=_h(INVESTIGATOR)).json()["role"] == "investigator"
    me = client.get("/users/me", headers=_h(VIEWER)).json()
    assert me["role"] == "viewer"
    assert me["email"] == "viewer@example.com"
    assert me["display_name"] == "viewer"


def test_me_requires_identity(client):
    r = client.get("/users/me")
    assert r.status_code == 401


def test_email_is_normalized(client):
    headers = {"x-forwarded-user": "Mixed", "x-forwarded-email": "  Mixed.Case@Example.COM "}
    r = client.get("/users/me", headers=headers)
    assert r.status_code == 200
    assert r.json()["email"] == "mixed.case@example.com"


def test_default_role_from_env(client, monkeypatch):
    monkeypatch.setenv("DEFAULT_USER_ROLE", "investigator")
    assert client.get("/users/me", headers=_h("newcomer")).json()["role"] == "investigator"


def test_existing_user_promoted_when_listed_as_admin(client, monkeypatch):
    assert client.get("/users/me", headers=_h("late")).json()["role"] == "viewer"
    monkeypatch.setenv("ADMIN_EMAILS", "admin@example.com,late@example.com")
    assert client.get("/users/me", headers=_h("late")).json()["role"] == "admin"


def test_update_display_name(client):
    r = client.patch("/users/me", json={"display_name": "  Lead Analyst "}, headers=_h(VIEWER))
    assert r.status_code == 200
    assert r.json()["display_name"] == "Lead Analyst"

    r = client.patch("/users/me", json={"display_name": ""}, headers=_h(VIEWER))
    assert r.status_code == 422


def test_admin_manages_roles(client):
    viewer_id = client.get("/users/me", headers=_h(VIEWER)).json()["id"]

    r = client.patch(f"/users/{viewer_id}/role", json={"role": "investigator"}, headers=_h(ADMIN))
    assert r.status_code == 200, r.text
    assert r.json()["role"] == "investigator"

    users = client.get("/users/", headers=_h(ADMIN)).json()
    assert {u["email"] for u in users} == {"admin@example.com", "viewer@example.com"}

    logs = client.get("/activity-logs/", params={"entity_type": "user"}, headers=_h(ADMIN)).json()
    assert logs[0]["action"] == "role_change"
    assert logs[0]["details"] == {"email": "viewer@example.com", "from": "viewer", "to": "investigator"}


def test_role_management_is_admin_only(client):
    viewer_id = client.get("/users/me", headers=_h(VIEWER)).json()["id"]
    assert client.get("/users/", headers=_h(INVESTIGATOR)).status_code == 403
    r = client.patch(f"/users/{viewer_id}/role", json={"role": "admin"}, headers=_h(INVESTIGATOR))
    assert r.status_code == 403


def test_admin_cannot_demote_self(client):
    admin_id = client.get("/users/me", headers=_h(ADMIN)).json()["id"]
    r = client.patch(f"/users/{admin_id}/role", json={"role": "viewer"}, headers=_h(ADMIN))
    assert r.status_code == 400


def test_role_change_rejects_unknown_role(client):
    viewer_id = client.get("/users/me", headers=_h(VIEWER)).json()["id"]
    r = client.patch(f"/users/{viewer_id}/role", json={"role": "owner"}, headers=_h(ADMIN))
    assert r.status_code == 422
