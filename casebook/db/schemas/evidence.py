import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from casebook.utils.choices import EvidenceTypeEnum
from ._validators import optional_text, sha256_hex


class EvidenceFields(BaseModel):
    file_name: Optional[str] = None
    description: Optional[str] = None
    file_size: Optional[int] = Field(default=None, ge=0)
    file_hash_sha256: Optional[str] = None
    storage_location: Optional[str] = None
    collection_date: Optional[datetime] = None

    @field_validator("file_hash_sha256")
    @classmethod
    def _validate_hash(cls, v):
        return sha256_hex(v)

    @field_validator("file_name", "description", "storage_location")
    @classmethod
    def _blank_to_none(cls, v):
        return optional_text(v)


class EvidenceCreate(EvidenceFields):
    # Detected from mime_type/file_name when omitted
    evidence_type: Optional[EvidenceTypeEnum] = None
    mime_type: Optional[str] = None


class EvidenceDraft(EvidenceCreate):
    """Evidence row on the case form; rows carrying an id update existing evidence."""
    id: Optional[uuid.UUID] = None


class EvidenceUpdate(EvidenceFields):
    evidence_type: Optional[EvidenceTypeEnum] = None


class Evidence(BaseModel):
    id: uuid.UUID
    case_id: uuid.UUID
    evidence_number: str
    evidence_type: EvidenceTypeEnum
    file_name: Optional[str] = None
    description: Optional[str] = None
    file_size: Optional[int] = None
    file_hash_sha256: Optional[str] = None
    storage_location: Optional[str] = None
    collected_by: Optional[uuid.UUID] = None
    collection_date: datetime
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class EvidenceListItem(Evidence):
    case_number: Optional[str] = None
