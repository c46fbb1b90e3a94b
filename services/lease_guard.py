# services/lease_guard.py
"""
Lease-State Guard - an accommodation may only be updated or deleted while it
is available and has no active lease.

Only call this after the ownership check has passed, so that a caller who
does not own the accommodation learns nothing about its lease state.
"""
from typing import Optional

from fastapi import status
from sqlalchemy.orm import Session

from models import Accommodation, Lease
from services.ownership import DenialReason, Rejection


def has_active_lease(db: Session, accommodation_id: int) -> bool:
     lease = (
          db.query(Lease)
          .filter(Lease.accommodation_id == accommodation_id, Lease.active == True)  # noqa: E712
          .first()
     )
     return lease is not None


def check_mutation_eligibility(
     db: Session,
     accommodation: Accommodation,
     action: str,
) -> Optional[Rejection]:
     """
     Return a Rejection when ``accommodation`` cannot be changed, else None.

     ``action`` is the verb used in the messages ("update" or "delete").
     """
     if not accommodation.availability:
          return Rejection(
               DenialReason.NOT_AVAILABLE,
               status.HTTP_400_BAD_REQUEST,
               f"Accommodation is not available and cannot be {action}d",
          )

     if has_active_lease(db, accommodation.id):
          return Rejection(
               DenialReason.ACTIVE_LEASE,
               status.HTTP_400_BAD_REQUEST,
               f"Cannot {action} accommodation with active lease",
          )

     return None
