"""
Domain-split Pydantic schemas.

Re-exports every request/response model so routers can use
`schemas.CaseCreate`, `schemas.Evidence`, and so on.
"""

from .users import UserBase, User, UserProfileUpdate, UserRoleUpdate
from .victims import VictimBase, VictimCreate, VictimUpdate, Victim, CaseVictimInput
from .suspects import (
    SuspectBase,
    SuspectCreate,
    SuspectUpdate,
    Suspect,
    CaseSuspectInput,
    CaseSuspect,
)
from .evidence import (
    EvidenceFields,
    EvidenceCreate,
    EvidenceDraft,
    EvidenceUpdate,
    Evidence,
    EvidenceListItem,
)
from .forensic_actions import (
    ActionTemplate,
    ActionSelection,
    ForensicActionCreate,
    ForensicActionToggle,
    ForensicAction,
    ForensicActionListItem,
)
from .cases import (
    CaseBase,
    CaseCreate,
    CaseUpdate,
    CaseStatusUpdate,
    Case,
    CaseListItem,
    CaseDetail,
    CaseFormDefaults,
)
from .activity import ActivityLogBase, ActivityLogCreate, ActivityLog
from .dashboard import CaseTypeCount, MonthlyTrendPoint, DashboardStats

__all__ = [
    # Users
    "UserBase",
    "User",
    "UserProfileUpdate",
    "UserRoleUpdate",
    # Victims
    "VictimBase",
    "VictimCreate",
    "VictimUpdate",
    "Victim",
    "CaseVictimInput",
    # Suspects
    "SuspectBase",
    "SuspectCreate",
    "SuspectUpdate",
    "Suspect",
    "CaseSuspectInput",
    "CaseSuspect",
    # Evidence
    "EvidenceFields",
    "EvidenceCreate",
    "EvidenceDraft",
    "EvidenceUpdate",
    "Evidence",
    "EvidenceListItem",
    # Forensic actions
    "ActionTemplate",
    "ActionSelection",
    "ForensicActionCreate",
    "ForensicActionToggle",
    "ForensicAction",
    "ForensicActionListItem",
    # Cases
    "CaseBase",
    "CaseCreate",
    "CaseUpdate",
    "CaseStatusUpdate",
    "Case",
    "CaseListItem",
    "CaseDetail",
    "CaseFormDefaults",
    # Activity
    "ActivityLogBase",
    "ActivityLogCreate",
    "ActivityLog",
    # Dashboard
    "CaseTypeCount",
    "MonthlyTrendPoint",
    "DashboardStats",
]
