from typing import List
from pydantic import BaseModel


class CaseTypeCount(BaseModel):
    name: str
    value: int


class MonthlyTrendPoint(BaseModel):
    month: str
    cases: int


class DashboardStats(BaseModel):
    total_cases: int = 0
    open_cases: int = 0
    in_progress_cases: int = 0
    closed_cases: int = 0
    archived_cases: int = 0
    total_victims: int = 0
    total_suspects: int = 0
    total_evidence: int = 0
    total_actions: int = 0
    completed_actions: int = 0
    completion_rate: int = 0
    case_types: List[CaseTypeCount] = []
    monthly_trend: List[MonthlyTrendPoint] = []
