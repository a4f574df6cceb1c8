from datetime import datetime, UTC

from tests.helpers import _h, create_case, ADMIN, INVESTIGATOR, VIEWER


def test_dashboard_empty(client):
    stats = client.get("/dashboard/stats", headers=_h(VIEWER)).json()
    assert stats["total_cases"] == 0
    assert stats["completion_rate"] == 0
    assert stats["case_types"] == []
    assert stats["monthly_trend"] == []


def test_dashboard_stats(client):
    a = create_case(client, case_type="data_breach", victim={"name": "Acme"}, evidence=[{"file_name": "a.log"}])
    create_case(client, case_type="data_breach", suspects=[{"name": "J. Doe"}], actions=[{"template_id": "1"}])
    create_case(client, case_type="fraud")
    create_case(client, case_type="malware")
    client.patch(f"/cases/{a['id']}/status", json={"status": "closed"}, headers=_h(INVESTIGATOR))

    stats = client.get("/dashboard/stats", headers=_h(VIEWER)).json()
    assert stats["total_cases"] == 4
    assert stats["open_cases"] == 3
    assert stats["closed_cases"] == 1
    assert stats["completion_rate"] == 25
    assert stats["total_victims"] == 1
    assert stats["total_suspects"] == 1
    assert stats["total_evidence"] == 1
    assert stats["total_actions"] == 1
    assert stats["completed_actions"] == 0
    assert {c["name"]: c["value"] for c in stats["case_types"]} == {"data breach": 2, "fraud": 1, "malware": 1}
    assert stats["monthly_trend"] == [{"month": datetime.now(UTC).strftime("%Y-%m"), "cases": 4}]


def test_activity_log_records_changes(client):
    victim = client.post("/victims/", json={"name": "Acme"}, headers=_h(INVESTIGATOR)).json()
    case = create_case(client, victim_id=victim["id"])
    client.patch(f"/cases/{case['id']}/status", json={"status": "closed"}, headers=_h(INVESTIGATOR))

    logs = client.get("/activity-logs/", headers=_h(ADMIN)).json()
    assert [entry["action"] for entry in logs] == ["status_change", "create", "create"]
    assert logs[0]["details"] == {"from": "open", "to": "closed"}

    victim_logs = client.get(
        "/activity-logs/", params={"entity_type": "victim", "entity_id": victim["id"]}, headers=_h(ADMIN)
    ).json()
    assert len(victim_logs) == 1
    assert victim_logs[0]["details"] == {"name": "Acme"}


def test_activity_log_is_admin_only(client):
    assert client.get("/activity-logs/", headers=_h(INVESTIGATOR)).status_code == 403


def test_dashboard_completion_rate_rounds_half_up(client):
    cases = [create_case(client, case_type="fraud") for _ in range(8)]
    client.patch(f"/cases/{cases[0]['id']}/status", json={"status": "closed"}, headers=_h(INVESTIGATOR))

    stats = client.get("/dashboard/stats", headers=_h(VIEWER)).json()
    assert stats["total_cases"] == 8
    assert stats["closed_cases"] == 1
    assert stats["completion_rate"] == 13


def test_profile_update_is_logged(client):
    me = client.patch("/users/me", json={"display_name": "Lead Analyst"}, headers=_h(VIEWER)).json()

    logs = client.get(
        "/activity-logs/", params={"entity_type": "user", "entity_id": me["id"]}, headers=_h(ADMIN)
    ).json()
    assert [entry["action"] for entry in logs] == ["update"]
    assert logs[0]["user_id"] == me["id"]
    assert logs[0]["details"] == {"display_name": "Lead Analyst"}
