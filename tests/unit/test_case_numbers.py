import random
import re
from datetime import date, datetime

import pytest

from casebook.db.repositories import cases as case_repo
from casebook.services.case_numbers import (
    CaseNumberExhaustedError,
    generate_case_number,
    generate_unique_case_number,
)

CASE_NUMBER_RE = re.compile(r"^CASE-\d{8}-\d{6}-[A-Z]{2}\d{3}-\d{3}$")


def _store_case(db, case_number):
    return case_repo.create_case(
        db,
        case_number=case_number,
        case_type="fraud",
        incident_date=date(2024, 1, 2),
        summary="Invoice fraud",
    )


def test_generate_case_number_format():
    now = datetime(2024, 1, 31, 14, 25, 1, 42_000)
    number = generate_case_number(now=now, rng=random.Random(7))
    assert CASE_NUMBER_RE.match(number)
    assert number.startswith("CASE-20240131-142501-")
    # letters are followed by the millisecond
    assert number.split("-")[3][2:] == "042"


def test_generate_case_number_uses_current_time():
    assert CASE_NUMBER_RE.match(generate_case_number())


def test_unique_case_number_skips_taken_candidates(db):
    _store_case(db, "CASE-TAKEN-1")
    _store_case(db, "CASE-TAKEN-2")
    candidates = iter(["CASE-TAKEN-1", "CASE-TAKEN-2", "CASE-FREE-3"])

    number = generate_unique_case_number(db, generator=lambda: next(candidates))

    assert number == "CASE-FREE-3"


def test_unique_case_number_gives_up_after_max_attempts(db):
    _store_case(db, "CASE-TAKEN")
    calls = []

    def taken():
        calls.append(1)
        return "CASE-TAKEN"

    with pytest.raises(CaseNumberExhaustedError) as exc:
        generate_unique_case_number(db, max_attempts=3, generator=taken)
    assert exc.value.attempts == 3
    assert len(calls) == 3


def test_unique_case_number_attempts_from_env(db, monkeypatch):
    monkeypatch.setenv("CASE_NUMBER_MAX_ATTEMPTS", "2")
    _store_case(db, "CASE-TAKEN")
    with pytest.raises(CaseNumberExhaustedError) as exc:
        generate_unique_case_number(db, generator=lambda: "CASE-TAKEN")
    assert exc.value.attempts == 2
