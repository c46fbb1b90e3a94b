# models/accommodation.py
from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Accommodation(TimestampMixin, Base):
     """
     Accommodation model - a listing (house, apartment, ...) owned by a user
     with role OWNER.
     """
     __tablename__ = "accommodations"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(255), nullable=False)
     type = Column(String(100), nullable=False)  # House, Apartment, Studio...
     description = Column(Text, nullable=False)
     address = Column(String(500), nullable=False)
     availability = Column(Boolean, default=True, nullable=False, index=True)

     owner_id = Column(
          Integer,
          ForeignKey("users.id"),
          nullable=False,
          index=True
     )

     # Relationships
     owner = relationship("User", back_populates="accommodations")
     leases = relationship("Lease", back_populates="accommodation")
     events = relationship("Event", back_populates="accommodation")

     def __repr__(self):
          return f"<Accommodation(id={self.id}, name='{self.name}', owner_id={self.owner_id})>"
