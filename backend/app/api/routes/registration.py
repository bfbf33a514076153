"""Donor Registration — POST /api/register.

Invariants:
    - 201 {message, donorId} on success
    - 400 / 409 / 500 raised as DonorRegistryError and rendered by the global handlers
    - The request's pooled session is released by get_db on every exit path
    - An empty or null body is an empty submission (rule failure, not a schema error)

Design Decisions:
    - Route only wires dependencies; rules and outcome mapping live in services/
"""

from fastapi import APIRouter, Depends, status

from app.core.repository_protocols import DonorRepository
from app.infrastructure.donor_repository import get_donor_repository
from app.schemas.registration import DonorRegistration, RegistrationResponse
from app.services.handle_registration import register_donor

router = APIRouter(prefix="/api", tags=["registration"])

SUCCESS_MESSAGE = "Registration successful!"


@router.post(
    "/register", response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: DonorRegistration | None = None,
    repository: DonorRepository = Depends(get_donor_repository),
):
    """Register a blood and/or organ donor."""
    donor_id = await register_donor(body or DonorRegistration(), repository)
    return RegistrationResponse(message=SUCCESS_MESSAGE, donor_id=donor_id)
