# services/__init__.py
from .access_service import AccessGate, GateMode
from .accommodation_service import AccommodationService
from .lease_guard import check_mutation_eligibility, has_active_lease
from .ownership import (
     DenialReason,
     OwnershipCheck,
     Rejection,
     validate_owner_accommodation,
)

__all__ = [
     "AccessGate",
     "GateMode",
     "AccommodationService",
     "check_mutation_eligibility",
     "has_active_lease",
     "DenialReason",
     "OwnershipCheck",
     "Rejection",
     "validate_owner_accommodation",
]
