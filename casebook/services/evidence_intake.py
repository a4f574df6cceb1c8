"""
Evidence intake: type detection, numbering and creation.

Evidence numbers extend the owning case number (``<case_number>-E001``).
The next number starts after the case's current evidence count and moves
forward past numbers that are still in use.
"""
from __future__ import annotations

import logging
import uuid
from typing import Optional

from sqlalchemy.orm import Session

from casebook.db import models, schemas
from casebook.db.repositories import evidence as evidence_repo
from casebook.utils.choices import EvidenceTypeEnum

logger = logging.getLogger(__name__)


def detect_evidence_type(mime_type: Optional[str], file_name: Optional[str]) -> str:
    """Guess an evidence type from a MIME type and file name.

    MIME rules win over file name rules; unmatched input is a plain ``file``.
    """
    mime = (mime_type or "").lower()
    name = (file_name or "").lower()
    extension = name.rsplit(".", 1)[-1] if "." in name else ""

    if mime.startswith("image/"):
        return EvidenceTypeEnum.image.value
    if mime.startswith("video/"):
        return EvidenceTypeEnum.video.value
    if mime == "application/pdf" or "document" in mime or "text" in mime:
        return EvidenceTypeEnum.document.value
    if extension == "log" or "log" in name:
        return EvidenceTypeEnum.log.value
    if extension == "dmp" or "memory" in name:
        return EvidenceTypeEnum.memory_dump.value
    if extension == "pcap" or "network" in name:
        return EvidenceTypeEnum.network_capture.value
    return EvidenceTypeEnum.file.value


def format_evidence_number(case_number: str, sequence: int) -> str:
    return f"{case_number}-E{sequence:03d}"


def next_evidence_number(db: Session, case: models.Case) -> str:
    sequence = evidence_repo.count_case_evidence(db, case.id) + 1
    candidate = format_evidence_number(case.case_number, sequence)
    while evidence_repo.evidence_number_exists(db, candidate):
        sequence += 1
        candidate = format_evidence_number(case.case_number, sequence)
    return candidate


def add_evidence(
    db: Session,
    case: models.Case,
    payload: schemas.EvidenceCreate,
    *,
    collected_by: Optional[uuid.UUID] = None,
    commit: bool = True,
) -> models.Evidence:
    if payload.evidence_type is not None:
        evidence_type = payload.evidence_type.value
    else:
        evidence_type = detect_evidence_type(payload.mime_type, payload.file_name)
    evidence_number = next_evidence_number(db, case)
    logger.debug("Registering %s as %s", evidence_number, evidence_type)
    return evidence_repo.create_evidence(
        db,
        case_id=case.id,
        evidence_number=evidence_number,
        evidence_type=evidence_type,
        fields=payload,
        collected_by=collected_by,
        commit=commit,
    )
