import re

from tests.helpers import _h, create_case, ADMIN, INVESTIGATOR, VIEWER

CASE_NUMBER_RE = re.compile(r"^CASE-\d{8}-\d{6}-[A-Z]{2}\d{3}-\d{3}$")


def test_form_defaults(client):
    r = client.get("/cases/new", headers=_h(INVESTIGATOR))
    assert r.status_code == 200
    body = r.json()
    assert CASE_NUMBER_RE.match(body["case_number"])
    assert [t["id"] for t in body["action_templates"]] == ["1", "2", "3", "4", "5"]
    assert client.get("/cases/new", headers=_h(VIEWER)).status_code == 403


def test_composite_create_assembles_case(client):
    case = create_case(
        client,
        case_type="malware",
        victim={"name": "Acme Ltd", "contact": "soc@acme.test"},
        suspects=[
            {"name": "J. Doe", "involvement_level": "primary", "relationship_to_case": "Former admin"},
            {"name": "   "},
        ],
        evidence=[
            {"file_name": "server.log", "file_size": 2048},
            {"file_name": "capture.pcap", "evidence_type": "other"},
            {"file_name": "photo.jpg", "mime_type": "image/jpeg"},
        ],
        actions=[{"template_id": "1"}, {"template_id": "5"}, {"action_type": "Interview staff"}],
    )

    assert CASE_NUMBER_RE.match(case["case_number"])
    assert case["status"] == "open"
    assert case["victim"]["name"] == "Acme Ltd"
    assert case["victim_id"] == case["victim"]["id"]

    assert len(case["suspects"]) == 1
    suspect = case["suspects"][0]
    assert suspect["name"] == "J. Doe"
    assert suspect["involvement_level"] == "primary"
    assert suspect["relationship_to_case"] == "Former admin"

    numbers = [e["evidence_number"] for e in case["evidence"]]
    assert numbers == [f"{case['case_number']}-E00{i}" for i in (1, 2, 3)]
    assert [e["evidence_type"] for e in case["evidence"]] == ["log", "other", "image"]

    assert {a["action_type"] for a in case["forensic_actions"]} == {
        "Evidence Collection",
        "Reporting",
        "Interview staff",
    }
    assert case["total_actions"] == 3
    assert case["completed_actions"] == 0
    assert case["progress"] == 0


def test_create_links_existing_suspect_once(client):
    suspect_id = client.post("/suspects/", json={"name": "R. Roe"}, headers=_h(INVESTIGATOR)).json()["id"]
    case = create_case(
        client,
        suspects=[{"suspect_id": suspect_id}, {"suspect_id": suspect_id, "involvement_level": "witness"}],
    )
    assert [s["id"] for s in case["suspects"]] == [suspect_id]
    assert case["suspects"][0]["involvement_level"] == "unknown"


def test_create_with_existing_victim(client):
    victim_id = client.post("/victims/", json={"name": "Globex"}, headers=_h(INVESTIGATOR)).json()["id"]
    case = create_case(client, victim_id=victim_id)
    assert case["victim"]["name"] == "Globex"


def test_blank_inline_victim_is_ignored(client):
    case = create_case(client, victim={"name": " "})
    assert case["victim"] is None
    assert client.get("/victims/", headers=_h(VIEWER)).json() == []


def test_create_rejects_both_victim_sources(client):
    victim_id = client.post("/victims/", json={"name": "Globex"}, headers=_h(INVESTIGATOR)).json()["id"]
    r = client.post(
        "/cases/",
        json={
            "case_type": "fraud",
            "incident_date": "2024-01-01",
            "summary": "x",
            "victim_id": victim_id,
            "victim": {"name": "Other"},
        },
        headers=_h(INVESTIGATOR),
    )
    assert r.status_code == 422


def test_duplicate_case_number_conflicts(client):
    create_case(client, case_number="CASE-MANUAL-001")
    r = client.post(
        "/cases/",
        json={"case_type": "fraud", "incident_date": "2024-01-01", "summary": "x", "case_number": "CASE-MANUAL-001"},
        headers=_h(INVESTIGATOR),
    )
    assert r.status_code == 409


def test_failed_submission_writes_nothing(client):
    r = client.post(
        "/cases/",
        json={
            "case_type": "fraud",
            "incident_date": "2024-01-01",
            "summary": "x",
            "victim": {"name": "Should not persist"},
            "actions": [{"template_id": "99"}],
        },
        headers=_h(INVESTIGATOR),
    )
    assert r.status_code == 422
    assert client.get("/cases/", headers=_h(VIEWER)).json() == []
    assert client.get("/victims/", headers=_h(VIEWER)).json() == []


def test_unknown_victim_id_is_not_found(client):
    r = client.post(
        "/cases/",
        json={
            "case_type": "fraud",
            "incident_date": "2024-01-01",
            "summary": "x",
            "victim_id": "5b0a3c8e-8d5e-4d1a-9a53-2d7b8f1f0c11",
        },
        headers=_h(INVESTIGATOR),
    )
    assert r.status_code == 404


def test_viewer_cannot_create(client):
    r = client.post(
        "/cases/",
        json={"case_type": "fraud", "incident_date": "2024-01-01", "summary": "x"},
        headers=_h(VIEWER),
    )
    assert r.status_code == 403


def test_list_cases_newest_first_with_victim_name(client):
    first = create_case(client, victim={"name": "Acme"}, case_type="fraud")
    second = create_case(client, case_type="malware")

    rows = client.get("/cases/", headers=_h(VIEWER)).json()
    assert [c["id"] for c in rows] == [second["id"], first["id"]]
    assert rows[1]["victim_name"] == "Acme"
    assert rows[0]["victim_name"] is None

    filtered = client.get("/cases/", params={"case_type": "fraud"}, headers=_h(VIEWER)).json()
    assert [c["id"] for c in filtered] == [first["id"]]


def test_status_change_and_filter(client):
    case = create_case(client)
    r = client.patch(f"/cases/{case['id']}/status", json={"status": "in_progress"}, headers=_h(INVESTIGATOR))
    assert r.status_code == 200
    assert r.json()["status"] == "in_progress"

    rows = client.get("/cases/", params={"status": "in_progress"}, headers=_h(VIEWER)).json()
    assert [c["id"] for c in rows] == [case["id"]]

    r = client.patch(f"/cases/{case['id']}/status", json={"status": "reopened"}, headers=_h(INVESTIGATOR))
    assert r.status_code == 422


def test_edit_updates_fields_and_syncs_actions(client):
    case = create_case(client, actions=[{"template_id": "1"}, {"template_id": "2"}])
    first = next(a for a in case["forensic_actions"] if a["template_id"] == "1")
    client.patch(f"/forensic-actions/{first['id']}", json={"is_completed": True}, headers=_h(INVESTIGATOR))

    r = client.put(
        f"/cases/{case['id']}",
        json={
            "summary": "Updated summary",
            "case_type": "data_breach",
            "case_number": "CASE-IGNORED",
            "actions": [{"template_id": "1"}, {"template_id": "3"}],
        },
        headers=_h(INVESTIGATOR),
    )
    assert r.status_code == 200, r.text
    detail = r.json()
    assert detail["summary"] == "Updated summary"
    assert detail["case_type"] == "data_breach"
    assert detail["case_number"] == case["case_number"]

    by_template = {a["template_id"]: a for a in detail["forensic_actions"]}
    assert set(by_template) == {"1", "3"}
    assert by_template["1"]["id"] == first["id"]
    assert by_template["1"]["is_completed"] is True
    assert by_template["3"]["is_completed"] is False
    assert detail["progress"] == 50


def test_edit_replaces_suspects_and_syncs_evidence(client):
    case = create_case(
        client,
        suspects=[{"name": "Old Suspect"}],
        evidence=[{"file_name": "disk.img"}, {"file_name": "auth.log"}],
    )
    keep, drop = case["evidence"]

    r = client.put(
        f"/cases/{case['id']}",
        json={
            "suspects": [{"name": "New Suspect", "involvement_level": "secondary"}],
            "evidence": [
                {"id": keep["id"], "description": "Imaged with write blocker"},
                {"file_name": "host.dmp"},
            ],
        },
        headers=_h(INVESTIGATOR),
    )
    assert r.status_code == 200, r.text
    detail = r.json()

    assert [s["name"] for s in detail["suspects"]] == ["New Suspect"]
    # the unlinked suspect record itself survives
    names = {s["name"] for s in client.get("/suspects/", headers=_h(VIEWER)).json()}
    assert names == {"Old Suspect", "New Suspect"}

    evidence = {e["id"]: e for e in detail["evidence"]}
    assert drop["id"] not in evidence
    assert evidence[keep["id"]]["description"] == "Imaged with write blocker"
    assert evidence[keep["id"]]["evidence_number"] == keep["evidence_number"]
    added = [e for e in detail["evidence"] if e["id"] != keep["id"]]
    assert len(added) == 1
    assert added[0]["evidence_type"] == "memory_dump"


def test_edit_leaves_omitted_lists_alone(client):
    case = create_case(client, suspects=[{"name": "Kept"}], actions=[{"template_id": "2"}])
    r = client.put(f"/cases/{case['id']}", json={"summary": "Only the summary"}, headers=_h(INVESTIGATOR))
    detail = r.json()
    assert [s["name"] for s in detail["suspects"]] == ["Kept"]
    assert detail["total_actions"] == 1


def test_edit_rejects_foreign_evidence_id(client):
    other = create_case(client, evidence=[{"file_name": "a.bin"}])
    case = create_case(client)
    r = client.put(
        f"/cases/{case['id']}",
        json={"evidence": [{"id": other["evidence"][0]["id"]}]},
        headers=_h(INVESTIGATOR),
    )
    assert r.status_code == 404


def test_delete_case_is_admin_only_and_keeps_people(client):
    case = create_case(
        client,
        victim={"name": "Acme"},
        suspects=[{"name": "J. Doe"}],
        evidence=[{"file_name": "x.bin"}],
        actions=[{"template_id": "1"}],
    )
    assert client.delete(f"/cases/{case['id']}", headers=_h(INVESTIGATOR)).status_code == 403
    assert client.delete(f"/cases/{case['id']}", headers=_h(ADMIN)).status_code == 204

    assert client.get(f"/cases/{case['id']}", headers=_h(VIEWER)).status_code == 404
    assert client.get("/evidence/", headers=_h(VIEWER)).json() == []
    assert client.get("/forensic-actions/", headers=_h(VIEWER)).json() == []
    assert len(client.get("/victims/", headers=_h(VIEWER)).json()) == 1
    assert len(client.get("/suspects/", headers=_h(VIEWER)).json()) == 1


def test_missing_case(client):
    r = client.get("/cases/5b0a3c8e-8d5e-4d1a-9a53-2d7b8f1f0c11", headers=_h(VIEWER))
    assert r.status_code == 404
