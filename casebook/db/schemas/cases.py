import uuid
from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from casebook.utils.choices import CaseStatusEnum, CaseTypeEnum
from ._validators import required_text, optional_text
from .victims import Victim, CaseVictimInput
from .suspects import CaseSuspect, CaseSuspectInput
from .evidence import Evidence, EvidenceDraft
from .forensic_actions import ForensicAction, ActionSelection, ActionTemplate


class CaseBase(BaseModel):
    case_type: CaseTypeEnum
    incident_date: date
    summary: str
    assigned_to: Optional[uuid.UUID] = None


class CaseCreate(CaseBase):
    case_number: Optional[str] = None
    status: CaseStatusEnum = CaseStatusEnum.open
    victim_id: Optional[uuid.UUID] = None
    victim: Optional[CaseVictimInput] = None
    suspects: List[CaseSuspectInput] = []
    evidence: List[EvidenceDraft] = []
    actions: List[ActionSelection] = []

    @field_validator("summary")
    @classmethod
    def _summary_required(cls, v: str):
        return required_text(v, "summary")

    @field_validator("case_number")
    @classmethod
    def _blank_case_number(cls, v):
        return optional_text(v)

    @model_validator(mode="after")
    def _one_victim_source(self):
        if self.victim_id is not None and self.victim is not None:
            raise ValueError("Provide either victim_id or victim, not both")
        return self


class CaseUpdate(BaseModel):
    """Edit form payload. case_number and victim are read-only once a case exists."""
    case_type: Optional[CaseTypeEnum] = None
    incident_date: Optional[date] = None
    summary: Optional[str] = None
    assigned_to: Optional[uuid.UUID] = None
    suspects: Optional[List[CaseSuspectInput]] = None
    evidence: Optional[List[EvidenceDraft]] = None
    actions: Optional[List[ActionSelection]] = None

    @field_validator("summary")
    @classmethod
    def _summary_not_blank(cls, v):
        return None if v is None else required_text(v, "summary")


class CaseStatusUpdate(BaseModel):
    status: CaseStatusEnum


class Case(CaseBase):
    id: uuid.UUID
    case_number: str
    status: CaseStatusEnum
    victim_id: Optional[uuid.UUID] = None
    created_by: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CaseListItem(Case):
    victim_name: Optional[str] = None


class CaseDetail(Case):
    victim: Optional[Victim] = None
    suspects: List[CaseSuspect] = []
    evidence: List[Evidence] = []
    forensic_actions: List[ForensicAction] = []
    total_actions: int = 0
    completed_actions: int = 0
    progress: int = 0


class CaseFormDefaults(BaseModel):
    case_number: str
    action_templates: List[ActionTemplate]
