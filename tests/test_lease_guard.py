# tests/test_lease_guard.py
from services.lease_guard import check_mutation_eligibility, has_active_lease
from services.ownership import DenialReason


def test_available_without_lease_is_eligible(db, users, make_accommodation):
    accommodation = make_accommodation()

    assert check_mutation_eligibility(db, accommodation, "update") is None


def test_inactive_leases_do_not_block(db, users, make_accommodation, add_lease):
    accommodation = make_accommodation()
    add_lease(accommodation.id, active=False)

    assert not has_active_lease(db, accommodation.id)
    assert check_mutation_eligibility(db, accommodation, "delete") is None


def test_unavailable_accommodation_is_refused(db, users, make_accommodation):
    accommodation = make_accommodation(availability=False)

    rejection = check_mutation_eligibility(db, accommodation, "update")

    assert rejection.reason == DenialReason.NOT_AVAILABLE
    assert rejection.status_code == 400
    assert rejection.message == "Accommodation is not available and cannot be updated"


def test_unavailability_is_reported_before_lease_state(db, users, make_accommodation, add_lease):
    accommodation = make_accommodation(availability=False)
    add_lease(accommodation.id, active=True)

    rejection = check_mutation_eligibility(db, accommodation, "delete")

    assert rejection.message == "Accommodation is not available and cannot be deleted"


def test_active_lease_is_refused(db, users, make_accommodation, add_lease):
    accommodation = make_accommodation()
    add_lease(accommodation.id, active=True)

    rejection = check_mutation_eligibility(db, accommodation, "delete")

    assert rejection.reason == DenialReason.ACTIVE_LEASE
    assert rejection.status_code == 400
    assert rejection.message == "Cannot delete accommodation with active lease"


def test_lease_on_another_accommodation_does_not_block(db, users, make_accommodation, add_lease):
    accommodation = make_accommodation()
    other = make_accommodation()
    add_lease(other.id, active=True)

    assert check_mutation_eligibility(db, accommodation, "update") is None
