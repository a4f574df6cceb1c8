"""
Dashboard API endpoint.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from casebook.db.database import get_db
from casebook.db import schemas
from casebook.api.deps import get_current_user_context
from casebook.services import compute_stats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=schemas.DashboardStats)
def dashboard_stats(
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    return compute_stats(db)
