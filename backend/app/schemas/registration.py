"""Registration Schemas — Pydantic models for the register endpoint.

Invariants:
    - Wire names are camelCase (fullName, isBloodDonor, ...), attributes snake_case
    - Every request field is optional: presence rules live in core/enforce_registration.py
    - Type mismatches (e.g. organs not a list of strings) fail here, before any rule runs

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule for all fields
    - populate_by_name: tests and services may build models with snake_case names
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DonorRegistration(BaseModel):
    """Donor registration form submission."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    city: str | None = None
    blood_group: str | None = None
    is_blood_donor: bool | None = None
    is_organ_donor: bool | None = None
    organs: list[str] | None = None


class RegistrationResponse(BaseModel):
    """Successful registration, serialized as {message, donorId}."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    donor_id: int = Field(gt=0)


class HealthResponse(BaseModel):
    message: str
