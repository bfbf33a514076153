"""Registration Rules — tests for pure submission validation and normalization.

Tests cover:
    - check_required_fields rejects missing or empty name/email/phone/city
    - check_blood_group requires a blood group only for blood donors
    - validate_registration chains checks, first error wins
    - build_donor_record nulls empty blood groups and encodes organs as JSON
"""

import json

import pytest

from app.core.enforce_registration import (
    check_required_fields,
    check_blood_group,
    validate_registration,
    build_donor_record,
    encode_organs,
)
from app.core.errors import (
    ValidationError, MISSING_FIELDS_MESSAGE, MISSING_BLOOD_GROUP_MESSAGE,
)
from app.schemas.registration import DonorRegistration


def _make_submission(**overrides) -> DonorRegistration:
    """Helper: a complete, valid blood-donor submission."""
    fields = {
        "full_name": "Ana Khan",
        "email": "ana@example.com",
        "phone": "555-0100",
        "city": "Lahore",
        "blood_group": "O+",
        "is_blood_donor": True,
        "is_organ_donor": False,
        "organs": [],
    }
    fields.update(overrides)
    return DonorRegistration(**fields)


# ─── check_required_fields ───────────────────────────────────────

@pytest.mark.parametrize("field", ["full_name", "email", "phone", "city"])
@pytest.mark.parametrize("value", [None, ""])
def test_required_field_missing_or_empty_is_rejected(field, value):
    error = check_required_fields(_make_submission(**{field: value}))
    assert isinstance(error, ValidationError)
    assert error.message == MISSING_FIELDS_MESSAGE
    assert error.field == field
    assert error.http_status == 400


def test_required_fields_present_passes():
    assert check_required_fields(_make_submission()) is None


def test_whitespace_counts_as_present():
    assert check_required_fields(_make_submission(city="  ")) is None


# ─── check_blood_group ───────────────────────────────────────────

@pytest.mark.parametrize("blood_group", [None, ""])
def test_blood_donor_without_blood_group_is_rejected(blood_group):
    error = check_blood_group(_make_submission(blood_group=blood_group))
    assert error is not None
    assert error.message == MISSING_BLOOD_GROUP_MESSAGE
    assert error.field == "blood_group"


@pytest.mark.parametrize("is_blood_donor", [False, None])
def test_non_blood_donor_may_omit_blood_group(is_blood_donor):
    submission = _make_submission(is_blood_donor=is_blood_donor, blood_group="")
    assert check_blood_group(submission) is None


# ─── validate_registration ───────────────────────────────────────

def test_missing_fields_reported_before_missing_blood_group():
    submission = _make_submission(full_name="", blood_group="")
    error = validate_registration(submission)
    assert error.message == MISSING_FIELDS_MESSAGE


def test_valid_submission_has_no_error():
    assert validate_registration(_make_submission()) is None


def test_empty_submission_fails_required_fields():
    error = validate_registration(DonorRegistration())
    assert error.message == MISSING_FIELDS_MESSAGE
    assert error.field == "full_name"


# ─── build_donor_record ──────────────────────────────────────────

def test_empty_blood_group_stored_as_none():
    record = build_donor_record(
        _make_submission(is_blood_donor=False, blood_group=""),
    )
    assert record.blood_group is None


def test_blood_group_kept_for_organ_only_donor_when_given():
    record = build_donor_record(
        _make_submission(is_blood_donor=False, is_organ_donor=True, blood_group="AB-"),
    )
    assert record.blood_group == "AB-"


def test_absent_flags_stored_as_false():
    record = build_donor_record(
        _make_submission(is_blood_donor=None, is_organ_donor=None),
    )
    assert record.is_blood_donor is False
    assert record.is_organ_donor is False


def test_organs_encoded_in_submitted_order():
    organs = ["Kidney", "Liver", "Cornea"]
    record = build_donor_record(_make_submission(organs=organs))
    assert record.organs_to_donate == '["Kidney","Liver","Cornea"]'
    assert json.loads(record.organs_to_donate) == organs


def test_absent_organs_encoded_as_empty_array():
    assert encode_organs(None) == "[]"
    assert encode_organs([]) == "[]"


def test_non_ascii_organ_names_are_kept():
    assert encode_organs(["گردہ"]) == '["گردہ"]'
