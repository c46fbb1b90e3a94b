# models/lease.py
from sqlalchemy import Column, Integer, Boolean, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base


class Lease(Base):
     """
     Lease model - rental agreement between a tenant and an accommodation.
     An active lease blocks updates and deletion of its accommodation.
     """
     __tablename__ = "leases"

     id = Column(Integer, primary_key=True, autoincrement=True)
     accommodation_id = Column(
          Integer,
          ForeignKey("accommodations.id"),
          nullable=False,
          index=True
     )
     tenant_id = Column(Integer, ForeignKey("users.id"), nullable=True)

     # Lease period
     start_date = Column(Date, nullable=True)
     end_date = Column(Date, nullable=True)

     active = Column(Boolean, default=False, nullable=False, index=True)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     accommodation = relationship("Accommodation", back_populates="leases")

     def __repr__(self):
          return f"<Lease(id={self.id}, accommodation_id={self.accommodation_id}, active={self.active})>"
