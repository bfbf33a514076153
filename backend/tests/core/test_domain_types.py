"""Domain Types — verifies the donor record and insert outcome types.

Tests:
    - DonorId wraps int
    - Outcomes are frozen and pattern-matchable
"""

import dataclasses

import pytest

from app.core.domain_types import (
    DonorId, DonorRecord, Inserted, DuplicateKey, OtherFailure,
)


def _describe(outcome) -> str:
    match outcome:
        case Inserted(donor_id=donor_id):
            return f"inserted {donor_id}"
        case DuplicateKey(field=field):
            return f"duplicate {field}"
        case OtherFailure():
            return "failed"


def test_donor_id_wraps_int():
    assert DonorId(7) == 7


def test_outcomes_match_by_type():
    assert _describe(Inserted(DonorId(3))) == "inserted 3"
    assert _describe(DuplicateKey()) == "duplicate email"
    assert _describe(OtherFailure(RuntimeError("x"))) == "failed"


def test_donor_record_is_frozen():
    record = DonorRecord(
        full_name="Ana Khan", email="ana@example.com", phone="555-0100",
        city="Lahore", blood_group=None, is_blood_donor=False,
        is_organ_donor=True, organs_to_donate='["Kidney"]',
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.email = "other@example.com"
