"""Business logic services package with public service helpers."""

from .case_numbers import (
    CaseNumberExhaustedError,
    generate_case_number,
    generate_unique_case_number,
)
from .evidence_intake import (
    add_evidence,
    detect_evidence_type,
    next_evidence_number,
)
from .action_templates import (
    ACTION_TEMPLATES,
    UnknownTemplateError,
    get_template,
    list_templates,
    resolve_action,
)
from .case_assembly import assemble_case, compute_progress, percent_of
from .case_workflow import (
    CaseNumberConflictError,
    RelatedRecordNotFoundError,
    create_case,
    update_case,
)
from .dashboard import compute_stats

__all__ = [
    "ACTION_TEMPLATES",
    "CaseNumberConflictError",
    "CaseNumberExhaustedError",
    "RelatedRecordNotFoundError",
    "UnknownTemplateError",
    "add_evidence",
    "assemble_case",
    "compute_progress",
    "compute_stats",
    "create_case",
    "detect_evidence_type",
    "generate_case_number",
    "generate_unique_case_number",
    "get_template",
    "list_templates",
    "next_evidence_number",
    "percent_of",
    "resolve_action",
    "update_case",
]
