"""
Enumerated field values shared by models, schemas and routers.

Centralized definitions for the status and type columns so that CHECK
constraints, Pydantic validation and query filters agree on one list.
"""

from typing import FrozenSet
from enum import Enum


class CaseStatusEnum(str, Enum):
    """Lifecycle status of an investigation case."""
    open = "open"
    in_progress = "in_progress"
    closed = "closed"
    archived = "archived"


class CaseTypeEnum(str, Enum):
    cybercrime = "cybercrime"
    data_breach = "data_breach"
    malware = "malware"
    fraud = "fraud"
    intellectual_property = "intellectual_property"
    other = "other"


class EvidenceTypeEnum(str, Enum):
    file = "file"
    image = "image"
    video = "video"
    document = "document"
    log = "log"
    network_capture = "network_capture"
    memory_dump = "memory_dump"
    other = "other"


class SuspectStatusEnum(str, Enum):
    suspect = "suspect"
    person_of_interest = "person_of_interest"
    charged = "charged"
    cleared = "cleared"


class InvolvementLevelEnum(str, Enum):
    primary = "primary"
    secondary = "secondary"
    witness = "witness"
    unknown = "unknown"


ACTION_STATUS_PENDING = "pending"
ACTION_STATUS_COMPLETED = "completed"

CASE_STATUSES: FrozenSet[str] = frozenset(e.value for e in CaseStatusEnum)
CASE_TYPES: FrozenSet[str] = frozenset(e.value for e in CaseTypeEnum)
EVIDENCE_TYPES: FrozenSet[str] = frozenset(e.value for e in EvidenceTypeEnum)
SUSPECT_STATUSES: FrozenSet[str] = frozenset(e.value for e in SuspectStatusEnum)
INVOLVEMENT_LEVELS: FrozenSet[str] = frozenset(e.value for e in InvolvementLevelEnum)
ACTION_STATUSES: FrozenSet[str] = frozenset({ACTION_STATUS_PENDING, ACTION_STATUS_COMPLETED})


def check_in(column: str, values) -> str:
    """Render a CHECK constraint expression restricting ``column`` to ``values``."""
    quoted = ",".join(f"'{v}'" for v in sorted(values))
    return f"{column} in ({quoted})"
