"""Donor Repository — inserts donor rows and classifies what the database said.

Invariants:
    - insert() never raises for database failures; it returns an InsertOutcome
    - Any failed insert is rolled back before returning, so nothing is persisted
    - DuplicateKey only when the violated key is the email uniqueness constraint;
      every other integrity error is OtherFailure

Design Decisions:
    - Driver error codes inspected here and nowhere else (ADR: typed outcome at the
      storage boundary, handlers never match strings)
    - Recognizes MySQL (1062 ER_DUP_ENTRY), PostgreSQL (SQLSTATE 23505) and SQLite
      (test database) unique violations
"""

import logging
from dataclasses import asdict

from fastapi import Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    DonorId, DonorRecord, InsertOutcome, Inserted, DuplicateKey, OtherFailure,
)
from app.infrastructure.database import get_db
from app.models.donor import Donor

logger = logging.getLogger(__name__)

MYSQL_DUP_ENTRY = 1062
UNIQUE_VIOLATION_SQLSTATE = "23505"

_KEY_MARKERS = ("for key", "unique constraint failed:", "unique constraint")


def _violated_key(message: str) -> str:
    """Text naming the violated key, lower-cased; empty if not recognizable."""
    lowered = message.lower()
    for marker in _KEY_MARKERS:
        if marker in lowered:
            return lowered.rsplit(marker, 1)[1]
    return ""


def is_duplicate_email(exc: IntegrityError) -> bool:
    """True if the integrity error is the email uniqueness constraint."""
    orig = exc.orig
    args = getattr(orig, "args", None) or ()
    code = args[0] if args else None
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    message = str(orig)
    is_unique_violation = (
        code == MYSQL_DUP_ENTRY
        or sqlstate == UNIQUE_VIOLATION_SQLSTATE
        or "unique constraint failed" in message.lower()
    )
    return is_unique_violation and "email" in _violated_key(message)


class SqlDonorRepository:
    """DonorRepository backed by an AsyncSession from the pool."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert(self, record: DonorRecord) -> InsertOutcome:
        donor = Donor(**asdict(record))
        self._db.add(donor)
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            if is_duplicate_email(e):
                return DuplicateKey(field="email")
            return OtherFailure(e)
        except SQLAlchemyError as e:
            await self._db.rollback()
            return OtherFailure(e)
        return Inserted(DonorId(donor.id))


async def get_donor_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlDonorRepository:
    """FastAPI dependency: repository bound to this request's session."""
    return SqlDonorRepository(db)
