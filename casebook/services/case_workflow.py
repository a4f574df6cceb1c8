"""
Composite case submission.

The case form carries the case itself plus an optional victim, suspects,
evidence drafts and checked checklist items. Creation and editing each
write every row in a single transaction: nothing is committed until all
parts are in place, and any failure rolls the whole submission back.
"""
from __future__ import annotations

import logging
import uuid
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from casebook.db import models, schemas
from casebook.db.repositories import (
    cases as case_repo,
    evidence as evidence_repo,
    forensic_actions as action_repo,
    suspects as suspect_repo,
    victims as victim_repo,
)
from casebook.services.action_templates import action_key, resolve_action
from casebook.services.case_numbers import generate_unique_case_number
from casebook.services.evidence_intake import add_evidence

logger = logging.getLogger(__name__)

_EDITABLE_CASE_FIELDS = ("case_type", "incident_date", "summary", "assigned_to")


class CaseNumberConflictError(ValueError):
    def __init__(self, case_number: str):
        super().__init__(f"Case number {case_number} is already in use")
        self.case_number = case_number


class RelatedRecordNotFoundError(LookupError):
    """A referenced victim, suspect or evidence row does not exist."""

    def __init__(self, entity_type: str, entity_id: uuid.UUID):
        super().__init__(f"{entity_type.capitalize()} {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


def create_case(db: Session, payload: schemas.CaseCreate, created_by: Optional[uuid.UUID] = None) -> models.Case:
    try:
        if payload.case_number:
            if case_repo.case_number_exists(db, payload.case_number):
                raise CaseNumberConflictError(payload.case_number)
            case_number = payload.case_number
        else:
            case_number = generate_unique_case_number(db)

        victim_id = _resolve_victim(db, payload, created_by)

        db_case = case_repo.create_case(
            db,
            case_number=case_number,
            case_type=payload.case_type.value,
            incident_date=payload.incident_date,
            summary=payload.summary,
            status=payload.status.value,
            victim_id=victim_id,
            assigned_to=payload.assigned_to,
            created_by=created_by,
            commit=False,
        )
        _link_suspects(db, db_case, payload.suspects, created_by)
        for draft in payload.evidence:
            add_evidence(db, db_case, draft, collected_by=created_by, commit=False)
        _sync_actions(db, db_case, payload.actions, existing=[])

        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_case)
    logger.info("Created case %s", db_case.case_number)
    return db_case


def update_case(
    db: Session,
    db_case: models.Case,
    payload: schemas.CaseUpdate,
    user_id: Optional[uuid.UUID] = None,
) -> models.Case:
    """Apply the edit form to an existing case.

    Only lists present in the payload are synchronised; omitted lists leave
    the related rows untouched.
    """
    changes = payload.model_dump(exclude_unset=True)
    try:
        for field in _EDITABLE_CASE_FIELDS:
            if field not in changes:
                continue
            value = changes[field]
            if value is None and field != "assigned_to":
                continue
            setattr(db_case, field, getattr(value, "value", value))

        if payload.suspects is not None:
            suspect_repo.unlink_all_suspects(db, db_case.id)
            _link_suspects(db, db_case, payload.suspects, user_id)
        if payload.actions is not None:
            existing = action_repo.get_case_actions(db, db_case.id)
            _sync_actions(db, db_case, payload.actions, existing=existing, remove_missing=True)
        if payload.evidence is not None:
            _sync_evidence(db, db_case, payload.evidence, user_id)

        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_case)
    return db_case


def _resolve_victim(db: Session, payload: schemas.CaseCreate, created_by: Optional[uuid.UUID]) -> Optional[uuid.UUID]:
    if payload.victim_id is not None:
        if victim_repo.get_victim(db, payload.victim_id) is None:
            raise RelatedRecordNotFoundError("victim", payload.victim_id)
        return payload.victim_id
    if payload.victim is None or not payload.victim.name.strip():
        return None
    victim = schemas.VictimCreate(**payload.victim.model_dump())
    return victim_repo.create_victim(db, victim, created_by, commit=False).id


def _link_suspects(
    db: Session,
    db_case: models.Case,
    entries: Iterable[schemas.CaseSuspectInput],
    created_by: Optional[uuid.UUID],
) -> None:
    linked = set()
    for entry in entries:
        if entry.suspect_id is not None:
            if suspect_repo.get_suspect(db, entry.suspect_id) is None:
                raise RelatedRecordNotFoundError("suspect", entry.suspect_id)
            suspect_id = entry.suspect_id
        elif entry.name.strip():
            suspect = schemas.SuspectCreate(
                **entry.model_dump(exclude={"suspect_id", "involvement_level", "relationship_to_case"})
            )
            suspect_id = suspect_repo.create_suspect(db, suspect, created_by, commit=False).id
        else:
            continue
        if suspect_id in linked:
            continue
        suspect_repo.link_suspect(
            db,
            case_id=db_case.id,
            suspect_id=suspect_id,
            involvement_level=entry.involvement_level.value,
            relationship_to_case=(entry.relationship_to_case or "").strip() or None,
        )
        linked.add(suspect_id)


def _sync_actions(
    db: Session,
    db_case: models.Case,
    selections: Iterable[schemas.ActionSelection],
    *,
    existing: list,
    remove_missing: bool = False,
) -> None:
    current = {action_key(a.template_id, a.action_type): a for a in existing}
    wanted = set()
    for selection in selections:
        template_id, action_type, description = resolve_action(selection)
        key = action_key(template_id, action_type)
        if key in wanted:
            continue
        wanted.add(key)
        if key in current:
            continue
        action_repo.create_action(
            db,
            case_id=db_case.id,
            template_id=template_id,
            action_type=action_type,
            description=description,
            commit=False,
        )
    if remove_missing:
        for key, action in current.items():
            if key not in wanted:
                action_repo.delete_action(db, action.id, commit=False)


def _sync_evidence(
    db: Session,
    db_case: models.Case,
    drafts: Iterable[schemas.EvidenceDraft],
    user_id: Optional[uuid.UUID],
) -> None:
    current = {e.id: e for e in evidence_repo.get_case_evidence(db, db_case.id)}
    kept = set()
    new_drafts = []
    for draft in drafts:
        if draft.id is None:
            new_drafts.append(draft)
            continue
        if draft.id not in current:
            raise RelatedRecordNotFoundError("evidence", draft.id)
        changes = draft.model_dump(exclude_unset=True, exclude={"id", "mime_type"})
        evidence_repo.update_evidence(db, draft.id, schemas.EvidenceUpdate(**changes), commit=False)
        kept.add(draft.id)
    for evidence_id in current:
        if evidence_id not in kept:
            evidence_repo.delete_evidence(db, evidence_id, commit=False)
    for draft in new_drafts:
        add_evidence(db, db_case, draft, collected_by=user_id, commit=False)
