# routers/accommodations.py
"""
Accommodation API routes.

Every endpoint is guarded by a capability check (see dependencies.py):
- POST   /create       setHouse
- GET    /read         getHouse
- PUT    /update/{id}  updateHouse   (owner given by the ``user-id`` header)
- DELETE /delete/{id}  deleteHouse   (owner given by the ``user-id`` header)

Validation failures come back with their own status and message. Any other
exception is logged and answered with a generic 500.
"""
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Header, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import require_access
from errors import ApiError, InternalError, ValidationError
from schemas.accommodation import (
     AccommodationCreate,
     AccommodationResponse,
     AccommodationUpdateResponse,
     ErrorResponse,
     MessageResponse,
)
from services.accommodation_service import AccommodationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["accommodations"])

_ERROR_RESPONSES = {
     code: {"model": ErrorResponse}
     for code in (400, 401, 403, 404, 500)
}


def _parse_int(value: Optional[str]) -> Optional[int]:
     """Parse an identifier from a header, path or query string; None if it is not a number."""
     if value is None:
          return None
     try:
          return int(value.strip())
     except (TypeError, ValueError):
          return None


@router.post(
     "/create",
     response_model=AccommodationResponse,
     status_code=status.HTTP_201_CREATED,
     responses=_ERROR_RESPONSES,
     dependencies=[Depends(require_access("setHouse"))],
     summary="Create an accommodation"
)
def create_accommodation(
     data: Optional[AccommodationCreate] = None,
     db: Session = Depends(get_session),
):
     """
     Create an accommodation for an OWNER.

     - **name**, **type**, **desc**, **address**: non-empty strings
     - **availability**: boolean
     - **ownerId**: ID of a user with role OWNER
     """
     try:
          accommodation = AccommodationService.create_accommodation(db, data or AccommodationCreate())
     except ApiError:
          raise
     except Exception:
          logger.exception("Error creating accommodation")
          raise InternalError("Error creating accommodation")

     return AccommodationResponse.model_validate(accommodation)


@router.get(
     "/read",
     response_model=List[AccommodationResponse],
     responses=_ERROR_RESPONSES,
     dependencies=[Depends(require_access("getHouse"))],
     summary="List an owner's accommodations"
)
def read_accommodations(
     user_id: Optional[str] = Query(None, alias="userId", description="ID of the owner"),
     available: Optional[str] = Query(None, description="Filter by availability: true or false"),
     db: Session = Depends(get_session),
):
     """
     List the accommodations owned by **userId**, optionally filtered by
     **available** (``true`` / ``false``). Returns an empty list when nothing matches.
     """
     if not user_id:
          raise ValidationError("Missing userId")

     if available is not None and available not in ("true", "false"):
          raise ValidationError("Invalid value for available. Must be true or false.")

     owner_id = _parse_int(user_id)
     if owner_id is None:
          raise ValidationError("Invalid userId")

     try:
          accommodations = AccommodationService.list_owner_accommodations(
               db,
               owner_id,
               None if available is None else available == "true",
          )
     except ApiError:
          raise
     except Exception:
          logger.exception("Error listing accommodations for user %s", user_id)
          raise InternalError("Internal Server Error")

     return [AccommodationResponse.model_validate(a) for a in accommodations]


@router.put(
     "/update/{accommodation_id}",
     response_model=AccommodationUpdateResponse,
     responses=_ERROR_RESPONSES,
     dependencies=[Depends(require_access("updateHouse"))],
     summary="Update an accommodation"
)
def update_accommodation(
     accommodation_id: str,
     user_id: Optional[str] = Header(None, alias="user-id"),
     body: Any = Body(
          None,
          examples=[{"name": "New Name", "desc": "New Description", "availability": False}],
     ),
     db: Session = Depends(get_session),
):
     """
     Patch any of **name**, **type**, **address**, **desc**, **availability**.

     Only the owner (``user-id`` header) may update, and only while the
     accommodation is available and has no active lease.
     """
     try:
          accommodation = AccommodationService.update_accommodation(
               db,
               _parse_int(user_id),
               _parse_int(accommodation_id),
               body,
          )
     except ApiError:
          raise
     except Exception:
          logger.exception("Error updating accommodation %s", accommodation_id)
          raise InternalError("Internal Server Error")

     return AccommodationUpdateResponse(
          message="Accommodation updated successfully",
          updated_accommodation=AccommodationResponse.model_validate(accommodation),
     )


@router.delete(
     "/delete/{accommodation_id}",
     response_model=MessageResponse,
     responses=_ERROR_RESPONSES,
     dependencies=[Depends(require_access("deleteHouse"))],
     summary="Delete an accommodation and its related data"
)
def delete_accommodation(
     accommodation_id: str,
     user_id: Optional[str] = Header(None, alias="user-id"),
     db: Session = Depends(get_session),
):
     """
     Delete an accommodation with its events and leases.

     Only the owner (``user-id`` header) may delete, and only while the
     accommodation is available and has no active lease.
     """
     try:
          AccommodationService.delete_accommodation(
               db,
               _parse_int(user_id),
               _parse_int(accommodation_id),
          )
     except ApiError:
          raise
     except Exception:
          logger.exception("Error deleting accommodation %s", accommodation_id)
          raise InternalError("Internal Server Error")

     return MessageResponse(message="Accommodation and related data deleted successfully")
