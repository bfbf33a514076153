"""Registration Handler — validates, normalizes and stores one donor.

Invariants:
    - Validation runs before any storage access; a rejected submission touches nothing
    - Every InsertOutcome maps to exactly one result: donor id, ConflictError, StorageError
    - StorageError is chained to the driver exception for the error handler's log

Design Decisions:
    - Repository passed in (DonorRepository protocol): routes inject the SQL one,
      tests inject fakes
    - No retry on OtherFailure: the insert is not idempotent
"""

import logging

from app.core.domain_types import DonorId, Inserted, DuplicateKey, OtherFailure
from app.core.enforce_registration import validate_registration, build_donor_record
from app.core.errors import ConflictError, StorageError
from app.core.repository_protocols import DonorRepository, RegistrationLike

logger = logging.getLogger(__name__)


async def register_donor(
    submission: RegistrationLike, repository: DonorRepository,
) -> DonorId:
    """Register a donor and return the id the database assigned."""
    error = validate_registration(submission)
    if error:
        raise error

    record = build_donor_record(submission)
    outcome = await repository.insert(record)

    match outcome:
        case Inserted(donor_id=donor_id):
            logger.info(
                f"New donor registered with ID: {donor_id}",
                extra={"donor_id": donor_id},
            )
            return donor_id
        case DuplicateKey(field=field):
            raise ConflictError(field)
        case OtherFailure(cause=cause):
            raise StorageError("insert") from cause
