"""
Dashboard aggregates.

Only numbers are produced here; charts are drawn by the client.
"""
from __future__ import annotations

from collections import Counter

from sqlalchemy import func
from sqlalchemy.orm import Session

from casebook.db import models, schemas
from casebook.db.repositories import (
    cases as case_repo,
    evidence as evidence_repo,
    forensic_actions as action_repo,
    suspects as suspect_repo,
    victims as victim_repo,
)
from casebook.services.case_assembly import percent_of
from casebook.utils.choices import CaseStatusEnum

TREND_MONTHS = 6


def _case_type_counts(db: Session) -> list[schemas.CaseTypeCount]:
    rows = (
        db.query(models.Case.case_type, func.count(models.Case.id))
        .group_by(models.Case.case_type)
        .order_by(models.Case.case_type)
        .all()
    )
    return [schemas.CaseTypeCount(name=case_type.replace("_", " "), value=count) for case_type, count in rows]


def _monthly_trend(db: Session) -> list[schemas.MonthlyTrendPoint]:
    # Bucketed in Python so the query stays portable between PostgreSQL and SQLite
    months = Counter(
        created_at.strftime("%Y-%m")
        for (created_at,) in db.query(models.Case.created_at).all()
        if created_at is not None
    )
    recent = sorted(months)[-TREND_MONTHS:]
    return [schemas.MonthlyTrendPoint(month=m, cases=months[m]) for m in recent]


def compute_stats(db: Session) -> schemas.DashboardStats:
    by_status = case_repo.count_cases_by_status(db)
    total_cases = sum(by_status.values())
    closed = by_status.get(CaseStatusEnum.closed.value, 0)
    total_actions, completed_actions = action_repo.count_actions(db)
    return schemas.DashboardStats(
        total_cases=total_cases,
        open_cases=by_status.get(CaseStatusEnum.open.value, 0),
        in_progress_cases=by_status.get(CaseStatusEnum.in_progress.value, 0),
        closed_cases=closed,
        archived_cases=by_status.get(CaseStatusEnum.archived.value, 0),
        total_victims=victim_repo.count_victims(db),
        total_suspects=suspect_repo.count_suspects(db),
        total_evidence=evidence_repo.count_evidence(db),
        total_actions=total_actions,
        completed_actions=completed_actions,
        completion_rate=percent_of(closed, total_cases),
        case_types=_case_type_counts(db),
        monthly_trend=_monthly_trend(db),
    )
