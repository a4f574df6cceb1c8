from datetime import date
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError

from casebook.db.repositories import cases as case_repo, forensic_actions as action_repo
from casebook.services.case_assembly import compute_progress, percent_of


def _action(done):
    return SimpleNamespace(is_completed=done)


@pytest.mark.parametrize(
    "part,total,expected",
    [
        (0, 0, 0),
        (0, 4, 0),
        (1, 8, 13),
        (3, 8, 38),
        (1, 3, 33),
        (2, 3, 67),
        (1, 2, 50),
        (8, 8, 100),
    ],
)
def test_percent_of_rounds_halves_up(part, total, expected):
    assert percent_of(part, total) == expected


def test_compute_progress_counts_completed_actions():
    actions = [_action(True)] + [_action(False)] * 7
    assert compute_progress(actions) == (8, 1, 13)


def test_compute_progress_empty_checklist():
    assert compute_progress([]) == (0, 0, 0)


def test_action_status_check_rejects_unknown_status(db):
    case = case_repo.create_case(
        db,
        case_number="CASE-20240101-000000-AB000-002",
        case_type="fraud",
        incident_date=date(2024, 1, 1),
        summary="Invoice fraud",
    )
    action = action_repo.create_action(db, case_id=case.id, action_type="Disk imaging", description="Image the disk")
    assert action.status == "pending"

    action.status = "skipped"
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()
