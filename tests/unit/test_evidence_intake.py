from datetime import date

import pytest

from casebook.db import schemas
from casebook.db.repositories import cases as case_repo, evidence as evidence_repo
from casebook.services.evidence_intake import (
    add_evidence,
    detect_evidence_type,
    next_evidence_number,
)


@pytest.mark.parametrize("mime_type,file_name,expected", [
    ("image/png", "screenshot.png", "image"),
    ("video/mp4", "cctv.mp4", "video"),
    ("application/pdf", "contract.pdf", "document"),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", "memo.docx", "document"),
    ("text/plain", "auth.log", "document"),
    (None, "auth.log", "log"),
    ("application/octet-stream", "syslog-archive.tar", "log"),
    (None, "host.dmp", "memory_dump"),
    (None, "memory-image.raw", "memory_dump"),
    (None, "traffic.pcap", "network_capture"),
    (None, "network-dump.bin", "network_capture"),
    ("application/zip", "bundle.zip", "file"),
    (None, None, "file"),
])
def test_detect_evidence_type(mime_type, file_name, expected):
    assert detect_evidence_type(mime_type, file_name) == expected


@pytest.fixture
def case(db):
    return case_repo.create_case(
        db,
        case_number="CASE-20240101-000000-AB000-001",
        case_type="malware",
        incident_date=date(2024, 1, 1),
        summary="Trojan on workstation",
    )


def test_next_evidence_number_starts_at_one(db, case):
    assert next_evidence_number(db, case) == "CASE-20240101-000000-AB000-001-E001"


def test_next_evidence_number_skips_numbers_in_use(db, case):
    for number in ("E001", "E003"):
        evidence_repo.create_evidence(
            db,
            case_id=case.id,
            evidence_number=f"{case.case_number}-{number}",
            evidence_type="file",
            fields=schemas.EvidenceFields(),
        )
    # two rows exist, E003 is taken, so the sequence moves on
    assert next_evidence_number(db, case) == f"{case.case_number}-E004"


def test_add_evidence_detects_type_when_missing(db, case):
    evidence = add_evidence(
        db,
        case,
        schemas.EvidenceCreate(file_name="capture.pcap", file_size=512),
    )
    assert evidence.evidence_type == "network_capture"
    assert evidence.evidence_number == f"{case.case_number}-E001"
    assert evidence.collection_date is not None


def test_add_evidence_keeps_explicit_type(db, case):
    evidence = add_evidence(
        db,
        case,
        schemas.EvidenceCreate(file_name="capture.pcap", evidence_type="other"),
    )
    assert evidence.evidence_type == "other"
