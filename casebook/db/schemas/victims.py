import uuid
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from ._validators import required_text, optional_text


class VictimBase(BaseModel):
    name: str
    contact: Optional[str] = None
    location: Optional[str] = None
    address: Optional[str] = None
    report_date: Optional[date] = None
    description: Optional[str] = None


class VictimCreate(VictimBase):
    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str):
        return required_text(v, "name")

    @field_validator("contact", "location", "address", "description")
    @classmethod
    def _blank_to_none(cls, v):
        return optional_text(v)


class VictimUpdate(BaseModel):
    name: Optional[str] = None
    contact: Optional[str] = None
    location: Optional[str] = None
    address: Optional[str] = None
    report_date: Optional[date] = None
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v):
        return None if v is None else required_text(v, "name")


class Victim(VictimBase):
    id: uuid.UUID
    report_date: date
    created_by: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CaseVictimInput(VictimBase):
    """Victim entered inline on the case form; a blank name means "none"."""
    name: str = ""
