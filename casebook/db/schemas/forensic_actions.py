import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, model_validator

from ._validators import optional_text


class ActionTemplate(BaseModel):
    id: str
    action_type: str
    description: str
    is_default: bool


class ActionSelection(BaseModel):
    """A checked checklist item: a template reference or a custom action."""
    template_id: Optional[str] = None
    action_type: Optional[str] = None
    description: Optional[str] = None

    @model_validator(mode="after")
    def _template_or_custom(self):
        self.template_id = optional_text(self.template_id)
        self.action_type = optional_text(self.action_type)
        self.description = optional_text(self.description)
        if not self.template_id and not self.action_type:
            raise ValueError("Either template_id or action_type is required")
        return self


class ForensicActionCreate(ActionSelection):
    pass


class ForensicActionToggle(BaseModel):
    is_completed: bool


class ForensicAction(BaseModel):
    id: uuid.UUID
    case_id: uuid.UUID
    template_id: Optional[str] = None
    action_type: str
    description: str
    status: str
    is_completed: bool
    completed_at: Optional[datetime] = None
    performed_by: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ForensicActionListItem(ForensicAction):
    case_number: Optional[str] = None
