"""
Case number generation.

Numbers look like ``CASE-20240131-142501-QK042-817``: generation date and
time, two random letters fused with the millisecond, and a random
three-digit suffix. Uniqueness is enforced by the database; generation
only draws candidates until one is not taken.
"""
from __future__ import annotations

import logging
import random
import string
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.orm import Session

from casebook.db.repositories import cases as case_repo
from casebook.utils.runtime import case_number_max_attempts

logger = logging.getLogger(__name__)

CASE_NUMBER_PREFIX = "CASE"


class CaseNumberExhaustedError(RuntimeError):
    """Raised when every drawn candidate was already taken."""

    def __init__(self, attempts: int):
        super().__init__(f"Could not generate an unused case number after {attempts} attempts")
        self.attempts = attempts


def generate_case_number(now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> str:
    now = now or datetime.now()
    rng = rng or random
    letters = "".join(rng.choice(string.ascii_uppercase) for _ in range(2))
    millis = f"{now.microsecond // 1000:03d}"
    suffix = f"{rng.randrange(1000):03d}"
    return (
        f"{CASE_NUMBER_PREFIX}-{now:%Y%m%d}-{now:%H%M%S}-"
        f"{letters}{millis}-{suffix}"
    )


def generate_unique_case_number(
    db: Session,
    *,
    max_attempts: Optional[int] = None,
    generator: Callable[[], str] = generate_case_number,
) -> str:
    """Draw candidates until one is unused, checking each with one query.

    Raises:
        CaseNumberExhaustedError: after ``max_attempts`` taken candidates
    """
    attempts = max_attempts or case_number_max_attempts()
    for attempt in range(1, attempts + 1):
        candidate = generator()
        if not case_repo.case_number_exists(db, candidate):
            return candidate
        logger.info("Case number %s already taken (attempt %d/%d)", candidate, attempt, attempts)
    raise CaseNumberExhaustedError(attempts)
