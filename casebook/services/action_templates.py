"""
Fixed forensic action checklist.

Templates are static; cases store copies of the chosen template's
action_type/description along with its id.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from casebook.db import schemas

ACTION_TEMPLATES: Tuple[schemas.ActionTemplate, ...] = (
    schemas.ActionTemplate(
        id="1",
        action_type="Evidence Collection",
        description="Collect all digital evidence",
        is_default=True,
    ),
    schemas.ActionTemplate(
        id="2",
        action_type="Log Analysis",
        description="Analyse system logs for suspicious activity",
        is_default=True,
    ),
    schemas.ActionTemplate(
        id="3",
        action_type="Data Recovery",
        description="Attempt to recover deleted or corrupted data",
        is_default=False,
    ),
    schemas.ActionTemplate(
        id="4",
        action_type="Malware Analysis",
        description="Identify and analyse any malware found",
        is_default=False,
    ),
    schemas.ActionTemplate(
        id="5",
        action_type="Reporting",
        description="Write a complete report of the investigation findings",
        is_default=True,
    ),
)

_TEMPLATES_BY_ID = {t.id: t for t in ACTION_TEMPLATES}


class UnknownTemplateError(ValueError):
    def __init__(self, template_id: str):
        super().__init__(f"Unknown action template: {template_id}")
        self.template_id = template_id


def list_templates() -> List[schemas.ActionTemplate]:
    return list(ACTION_TEMPLATES)


def get_template(template_id: str) -> Optional[schemas.ActionTemplate]:
    return _TEMPLATES_BY_ID.get(template_id)


def resolve_action(selection: schemas.ActionSelection) -> Tuple[Optional[str], str, str]:
    """Return (template_id, action_type, description) for a checklist selection.

    Template selections fall back to the template's text; custom selections
    reuse action_type as the description when none is given.
    """
    if selection.template_id:
        template = get_template(selection.template_id)
        if template is None:
            raise UnknownTemplateError(selection.template_id)
        return (
            template.id,
            selection.action_type or template.action_type,
            selection.description or template.description,
        )
    return None, selection.action_type, selection.description or selection.action_type


def action_key(template_id: Optional[str], action_type: str) -> Tuple[str, str]:
    """Identity of a checklist item within one case."""
    if template_id:
        return ("template", template_id)
    return ("custom", action_type.strip().lower())
