"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes (ADR: ExMA anti-pattern)
    - RegistrationLike keeps core free of the pydantic schema while still typed
"""

from typing import Protocol

from app.core.domain_types import DonorRecord, InsertOutcome


class RegistrationLike(Protocol):
    """Structural contract for a parsed registration submission."""
    full_name: str | None
    email: str | None
    phone: str | None
    city: str | None
    blood_group: str | None
    is_blood_donor: bool | None
    is_organ_donor: bool | None
    organs: list[str] | None


class DonorRepository(Protocol):
    """Contract for donor persistence, implemented by shell."""
    async def insert(self, record: DonorRecord) -> InsertOutcome: ...
