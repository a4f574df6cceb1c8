"""
Denormalized case view.

The detail screen shows a case with its victim, linked suspects, evidence
and checklist. Each part is fetched with its own query and stitched
together here.
"""
from __future__ import annotations

from typing import Sequence

from sqlalchemy.orm import Session

from casebook.db import models, schemas
from casebook.db.repositories import (
    evidence as evidence_repo,
    forensic_actions as action_repo,
    suspects as suspect_repo,
    victims as victim_repo,
)


def percent_of(part: int, total: int) -> int:
    """Whole-number percentage, rounding halves up (1 of 8 is 13)."""
    if not total:
        return 0
    return (200 * part + total) // (2 * total)


def compute_progress(actions: Sequence) -> tuple[int, int, int]:
    """Return (total, completed, percent) for a checklist."""
    total = len(actions)
    completed = sum(1 for a in actions if a.is_completed)
    percent = percent_of(completed, total)
    return total, completed, percent


def assemble_case(db: Session, case: models.Case) -> schemas.CaseDetail:
    victim = None
    if case.victim_id is not None:
        db_victim = victim_repo.get_victim(db, case.victim_id)
        if db_victim is not None:
            victim = schemas.Victim.model_validate(db_victim)

    suspects = []
    for link, suspect in suspect_repo.get_case_suspect_rows(db, case.id):
        data = schemas.Suspect.model_validate(suspect).model_dump()
        suspects.append(
            schemas.CaseSuspect(
                **data,
                involvement_level=link.involvement_level,
                relationship_to_case=link.relationship_to_case,
            )
        )

    evidence = [schemas.Evidence.model_validate(e) for e in evidence_repo.get_case_evidence(db, case.id)]
    actions = [schemas.ForensicAction.model_validate(a) for a in action_repo.get_case_actions(db, case.id)]
    total, completed, percent = compute_progress(actions)

    return schemas.CaseDetail(
        **schemas.Case.model_validate(case).model_dump(),
        victim=victim,
        suspects=suspects,
        evidence=evidence,
        forensic_actions=actions,
        total_actions=total,
        completed_actions=completed,
        progress=percent,
    )
