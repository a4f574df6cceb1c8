import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from casebook.utils.choices import SuspectStatusEnum, InvolvementLevelEnum
from ._validators import required_text, optional_text


class SuspectBase(BaseModel):
    name: str
    contact: Optional[str] = None
    address: Optional[str] = None
    identification_number: Optional[str] = None
    status: SuspectStatusEnum = SuspectStatusEnum.suspect
    notes: Optional[str] = None


class SuspectCreate(SuspectBase):
    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str):
        return required_text(v, "name")

    @field_validator("contact", "address", "identification_number", "notes")
    @classmethod
    def _blank_to_none(cls, v):
        return optional_text(v)


class SuspectUpdate(BaseModel):
    name: Optional[str] = None
    contact: Optional[str] = None
    address: Optional[str] = None
    identification_number: Optional[str] = None
    status: Optional[SuspectStatusEnum] = None
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v):
        return None if v is None else required_text(v, "name")


class Suspect(SuspectBase):
    id: uuid.UUID
    created_by: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CaseSuspectInput(BaseModel):
    """A suspect row on the case form: link an existing suspect or describe a new one."""
    suspect_id: Optional[uuid.UUID] = None
    name: str = ""
    contact: Optional[str] = None
    address: Optional[str] = None
    identification_number: Optional[str] = None
    status: SuspectStatusEnum = SuspectStatusEnum.suspect
    notes: Optional[str] = None
    involvement_level: InvolvementLevelEnum = InvolvementLevelEnum.unknown
    relationship_to_case: Optional[str] = None


class CaseSuspect(Suspect):
    """Suspect as seen from one case, with the link attributes flattened in."""
    involvement_level: InvolvementLevelEnum
    relationship_to_case: Optional[str] = None
