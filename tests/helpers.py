"""Shared request helpers for API tests."""

ADMIN = "admin"
INVESTIGATOR = "investigator"
VIEWER = "viewer"


def _h(user: str):
    return {"x-auth-request-user": user, "x-auth-request-email": f"{user}@example.com"}


def create_case(client, headers=None, **overrides):
    payload = {
        "case_type": "cybercrime",
        "incident_date": "2024-03-01",
        "summary": "Phishing campaign against finance staff",
    }
    payload.update(overrides)
    r = client.post("/cases/", json=payload, headers=headers or _h(INVESTIGATOR))
    assert r.status_code == 201, r.text
    return r.json()
