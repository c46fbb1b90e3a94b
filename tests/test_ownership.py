# tests/test_ownership.py
import pytest

from errors import ForbiddenError, NotFoundError, ValidationError
from services.ownership import DenialReason, validate_owner_accommodation


def test_owner_of_accommodation_passes(db, users, make_accommodation):
    accommodation = make_accommodation(owner_id=1)

    check = validate_owner_accommodation(db, 1, accommodation.id)

    assert check.ok
    assert check.user.id == 1
    assert check.accommodation.id == accommodation.id


@pytest.mark.parametrize("user_id, accommodation_id", [(None, 1), (0, 1), (1, None)])
def test_missing_identifiers(db, user_id, accommodation_id):
    check = validate_owner_accommodation(db, user_id, accommodation_id)

    assert not check.ok
    assert check.rejection.reason == DenialReason.INVALID_IDENTIFIERS
    assert check.rejection.status_code == 400
    assert check.rejection.message == "Missing or invalid userId/accommodationId"


def test_unknown_user_and_wrong_role_share_response_but_not_reason(db, users, make_accommodation):
    accommodation = make_accommodation(owner_id=1)

    unknown = validate_owner_accommodation(db, 999, accommodation.id)
    tenant = validate_owner_accommodation(db, 2, accommodation.id)

    for check in (unknown, tenant):
        assert check.rejection.status_code == 403
        assert check.rejection.message == "Forbidden: Not an OWNER or user not found"
    assert unknown.rejection.reason == DenialReason.USER_NOT_FOUND
    assert tenant.rejection.reason == DenialReason.USER_NOT_OWNER


def test_unknown_accommodation(db, users):
    check = validate_owner_accommodation(db, 1, 42)

    assert check.rejection.reason == DenialReason.ACCOMMODATION_NOT_FOUND
    assert check.rejection.status_code == 404
    assert check.rejection.message == "Accommodation not found"


def test_owner_of_another_accommodation_is_refused(db, users, make_accommodation):
    accommodation = make_accommodation(owner_id=3)

    check = validate_owner_accommodation(db, 1, accommodation.id)

    assert check.rejection.reason == DenialReason.NOT_ACCOMMODATION_OWNER
    assert check.rejection.status_code == 403
    assert check.rejection.message == "Forbidden: You do not own this accommodation"
    assert check.accommodation is None


@pytest.mark.parametrize(
    "user_id, expected",
    [(None, ValidationError), (2, ForbiddenError), (1, NotFoundError)],
)
def test_rejection_converts_to_matching_error(db, users, user_id, expected):
    check = validate_owner_accommodation(db, user_id, 42)

    error = check.rejection.to_error()

    assert isinstance(error, expected)
    assert error.status_code == check.rejection.status_code
    assert error.reason == check.rejection.reason.value
