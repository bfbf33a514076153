"""Domain Types — the stored donor record and the typed outcome of inserting one.

Invariants:
    - DonorRecord is the normalized row: blood_group is None or non-empty,
      organs_to_donate is already JSON text
    - InsertOutcome is exhaustive: Inserted | DuplicateKey | OtherFailure

Design Decisions:
    - Outcome dataclasses over exceptions at the storage boundary: the repository
      classifies driver errors, the service only pattern-matches (ADR: no driver codes in handlers)
"""

from dataclasses import dataclass
from typing import NewType


DonorId = NewType("DonorId", int)


@dataclass(frozen=True)
class DonorRecord:
    """One row of the donors table, ready to insert."""
    full_name: str
    email: str
    phone: str
    city: str
    blood_group: str | None
    is_blood_donor: bool
    is_organ_donor: bool
    organs_to_donate: str


# ─── Insert Outcomes ─────────────────────────────────────────────

@dataclass(frozen=True)
class Inserted:
    donor_id: DonorId


@dataclass(frozen=True)
class DuplicateKey:
    field: str = "email"


@dataclass(frozen=True)
class OtherFailure:
    cause: Exception


InsertOutcome = Inserted | DuplicateKey | OtherFailure
