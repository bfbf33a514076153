"""Registration Rules — validates a submission and normalizes it into a DonorRecord.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Checks return a ValidationError on violation, None on success
    - validate_registration chains all checks, first error wins
    - Presence checks only: whitespace-only values count as present

Design Decisions:
    - Return errors (not raise): the service decides when to raise, tests assert
      on values without pytest.raises (ADR: ExMA Functional Core)
    - Compact JSON for organs: byte-identical to what the web form's backend always stored
"""

import json

from app.core.domain_types import DonorRecord
from app.core.errors import (
    ValidationError, MISSING_FIELDS_MESSAGE, MISSING_BLOOD_GROUP_MESSAGE,
)
from app.core.repository_protocols import RegistrationLike

REQUIRED_FIELDS = ("full_name", "email", "phone", "city")


def check_required_fields(submission: RegistrationLike) -> ValidationError | None:
    """Rule 1: full name, email, phone and city must be present and non-empty."""
    for name in REQUIRED_FIELDS:
        if not getattr(submission, name):
            return ValidationError(MISSING_FIELDS_MESSAGE, field=name)
    return None


def check_blood_group(submission: RegistrationLike) -> ValidationError | None:
    """Rule 2: blood donors must state their blood group."""
    if submission.is_blood_donor and not submission.blood_group:
        return ValidationError(MISSING_BLOOD_GROUP_MESSAGE, field="blood_group")
    return None


def validate_registration(submission: RegistrationLike) -> ValidationError | None:
    """Chain all registration checks. Returns first error or None."""
    return (
        check_required_fields(submission)
        or check_blood_group(submission)
    )


def encode_organs(organs: list[str] | None) -> str:
    """Serialize pledged organs as a JSON array, preserving order."""
    return json.dumps(
        list(organs or []), separators=(",", ":"), ensure_ascii=False,
    )


def build_donor_record(submission: RegistrationLike) -> DonorRecord:
    """Normalize a validated submission into the row to insert."""
    return DonorRecord(
        full_name=submission.full_name,
        email=submission.email,
        phone=submission.phone,
        city=submission.city,
        blood_group=submission.blood_group or None,
        is_blood_donor=bool(submission.is_blood_donor),
        is_organ_donor=bool(submission.is_organ_donor),
        organs_to_donate=encode_organs(submission.organs),
    )
