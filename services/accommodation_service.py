# services/accommodation_service.py
"""
Accommodation Service - business logic behind the accommodation endpoints.

Each mutation runs the same pipeline, one step after the other:
ownership validation -> lease-state guard -> a single persistence change.
A failed step raises the matching ApiError; nothing after it runs.
"""
import logging
from typing import Any, List, Optional

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.orm import Session

from errors import ForbiddenError, NotFoundError, ValidationError
from models import Accommodation, Event, Lease, User
from schemas.accommodation import AccommodationCreate, AccommodationUpdate
from services.lease_guard import check_mutation_eligibility
from services.ownership import validate_owner_accommodation

logger = logging.getLogger(__name__)

# Model attribute -> name used on the wire
_WIRE_NAMES = {"description": "desc", "owner_id": "ownerId"}


class AccommodationService:
     """Service class for accommodation-related business logic."""

     @staticmethod
     def create_accommodation(db: Session, data: AccommodationCreate) -> Accommodation:
          """
          Create an accommodation for an OWNER.

          Args:
               db: SQLAlchemy database session
               data: Parsed request body

          Returns:
               Created Accommodation object

          Raises:
               ValidationError: a required field is missing
               NotFoundError: the owner does not exist
               ForbiddenError: the owner's role is not OWNER
          """
          if data.missing_fields():
               raise ValidationError("Missing required fields")

          owner = db.query(User).filter(User.id == data.owner_id).first()
          if not owner:
               raise NotFoundError("User not found")

          if not owner.is_owner:
               raise ForbiddenError("Only owners can create accommodations")

          accommodation = Accommodation(
               name=data.name,
               type=data.type,
               description=data.description,
               address=data.address,
               availability=data.availability,
               owner_id=data.owner_id,
          )

          db.add(accommodation)
          db.commit()
          db.refresh(accommodation)

          logger.info("Accommodation %s created for owner %s", accommodation.id, owner.id)
          return accommodation

     @staticmethod
     def list_owner_accommodations(
          db: Session,
          user_id: int,
          available: Optional[bool] = None
     ) -> List[Accommodation]:
          """
          List the accommodations of an OWNER, optionally filtered by availability.

          Raises:
               ForbiddenError: the user does not exist or is not an OWNER
          """
          user = db.query(User).filter(User.id == user_id).first()

          if not user:
               raise ForbiddenError("Forbidden: User not found")

          if not user.is_owner:
               raise ForbiddenError("Forbidden: Not an OWNER")

          query = db.query(Accommodation).filter(Accommodation.owner_id == user_id)

          if available is not None:
               query = query.filter(Accommodation.availability == available)

          return query.order_by(Accommodation.id).all()

     @staticmethod
     def update_accommodation(
          db: Session,
          user_id: Optional[int],
          accommodation_id: Optional[int],
          body: Any
     ) -> Accommodation:
          """
          Apply a partial update to an accommodation owned by ``user_id``.

          The body is only looked at once ownership and lease state have been
          checked. Absent fields are left untouched; explicit nulls are refused.

          Raises:
               ApiError: from the ownership or lease-state checks
               ValidationError: the body is malformed or nulls a field
          """
          accommodation = AccommodationService._authorize_mutation(db, user_id, accommodation_id, "update")

          if body is not None and not isinstance(body, dict):
               raise ValidationError("Invalid request body", details="Expected a JSON object")

          try:
               patch = AccommodationUpdate.model_validate(body or {})
          except SchemaValidationError as exc:
               raise ValidationError(
                    "Invalid request body",
                    details=exc.errors(include_url=False, include_context=False, include_input=False),
               )

          null_fields = patch.null_fields()
          if null_fields:
               field = sorted(null_fields)[0]
               raise ValidationError(f"Field cannot be null: {_WIRE_NAMES.get(field, field)}")

          for field, value in patch.changes().items():
               setattr(accommodation, field, value)

          db.commit()
          db.refresh(accommodation)

          logger.info("Accommodation %s updated by owner %s", accommodation.id, user_id)
          return accommodation

     @staticmethod
     def delete_accommodation(
          db: Session,
          user_id: Optional[int],
          accommodation_id: Optional[int]
     ) -> None:
          """
          Delete an accommodation owned by ``user_id`` together with its
          events and leases (events first, then leases, then the row itself).

          Raises:
               ApiError: from the ownership or lease-state checks
          """
          accommodation = AccommodationService._authorize_mutation(db, user_id, accommodation_id, "delete")

          db.query(Event).filter(Event.accommodation_id == accommodation.id).delete()
          db.query(Lease).filter(Lease.accommodation_id == accommodation.id).delete()
          db.query(Accommodation).filter(Accommodation.id == accommodation.id).delete()
          db.commit()

          logger.info("Accommodation %s and related data deleted by owner %s", accommodation_id, user_id)

     @staticmethod
     def _authorize_mutation(
          db: Session,
          user_id: Optional[int],
          accommodation_id: Optional[int],
          action: str
     ) -> Accommodation:
          """Ownership check, then lease-state check. Returns the accommodation when both pass."""
          check = validate_owner_accommodation(db, user_id, accommodation_id)
          if not check.ok:
               raise check.rejection.to_error()

          rejection = check_mutation_eligibility(db, check.accommodation, action)
          if rejection is not None:
               raise rejection.to_error()

          return check.accommodation
