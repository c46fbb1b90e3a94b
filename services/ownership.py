# services/ownership.py
"""
Ownership Validator - resolves the requesting user and the target
accommodation, and checks that the user is an OWNER who owns it.

The validator never raises for a failed check: it returns an OwnershipCheck
whose ``rejection`` carries the reason, HTTP status and message. Callers turn
the rejection into an ApiError with ``rejection.to_error()``.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import status
from sqlalchemy.orm import Session

from errors import ApiError, error_for_status
from models import Accommodation, User

logger = logging.getLogger(__name__)


class DenialReason(str, enum.Enum):
     """Distinct causes behind a rejected request, even where the response is shared."""
     INVALID_IDENTIFIERS = "invalid_identifiers"
     USER_NOT_FOUND = "user_not_found"
     USER_NOT_OWNER = "user_not_owner"
     ACCOMMODATION_NOT_FOUND = "accommodation_not_found"
     NOT_ACCOMMODATION_OWNER = "not_accommodation_owner"
     NOT_AVAILABLE = "not_available"
     ACTIVE_LEASE = "active_lease"


@dataclass(frozen=True)
class Rejection:
     reason: DenialReason
     status_code: int
     message: str

     def to_error(self) -> ApiError:
          return error_for_status(self.status_code, self.message, reason=self.reason.value)


@dataclass(frozen=True)
class OwnershipCheck:
     user: Optional[User] = None
     accommodation: Optional[Accommodation] = None
     rejection: Optional[Rejection] = None

     @property
     def ok(self) -> bool:
          return self.rejection is None


OWNER_FORBIDDEN_MESSAGE = "Forbidden: Not an OWNER or user not found"


def _reject(reason: DenialReason, status_code: int, message: str) -> OwnershipCheck:
     return OwnershipCheck(rejection=Rejection(reason, status_code, message))


def validate_owner_accommodation(
     db: Session,
     user_id: Optional[int],
     accommodation_id: Optional[int],
) -> OwnershipCheck:
     """
     Check that ``user_id`` is an OWNER and owns ``accommodation_id``.

     Checks run in order and stop at the first failure:
     identifiers (400), user exists and is OWNER (403),
     accommodation exists (404), accommodation belongs to the user (403).
     """
     if not user_id or accommodation_id is None:
          return _reject(
               DenialReason.INVALID_IDENTIFIERS,
               status.HTTP_400_BAD_REQUEST,
               "Missing or invalid userId/accommodationId",
          )

     user = db.query(User).filter(User.id == user_id).first()
     if user is None:
          return _reject(DenialReason.USER_NOT_FOUND, status.HTTP_403_FORBIDDEN, OWNER_FORBIDDEN_MESSAGE)
     if not user.is_owner:
          return _reject(DenialReason.USER_NOT_OWNER, status.HTTP_403_FORBIDDEN, OWNER_FORBIDDEN_MESSAGE)

     accommodation = db.query(Accommodation).filter(Accommodation.id == accommodation_id).first()
     if accommodation is None:
          return _reject(
               DenialReason.ACCOMMODATION_NOT_FOUND,
               status.HTTP_404_NOT_FOUND,
               "Accommodation not found",
          )

     if accommodation.owner_id != user_id:
          logger.info("User %s tried to modify accommodation %s owned by %s",
                      user_id, accommodation_id, accommodation.owner_id)
          return _reject(
               DenialReason.NOT_ACCOMMODATION_OWNER,
               status.HTTP_403_FORBIDDEN,
               "Forbidden: You do not own this accommodation",
          )

     return OwnershipCheck(user=user, accommodation=accommodation)
