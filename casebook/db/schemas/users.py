import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict, field_validator
from casebook.utils.role_permissions import RoleEnum


class UserBase(BaseModel):
    email: str
    display_name: str | None = None


class User(UserBase):
    id: uuid.UUID
    role: RoleEnum
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class UserProfileUpdate(BaseModel):
    display_name: str | None = None

    @field_validator("display_name")
    @classmethod
    def _validate_display_name(cls, v):
        if v is None:
            return v
        s = v.strip()
        if len(s) == 0 or len(s) > 80:
            raise ValueError("display_name must be 1..80 characters")
        return s


class UserRoleUpdate(BaseModel):
    role: RoleEnum
