# models/event.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base


class Event(Base):
     """
     Event model - calendar entries (visits, maintenance, check-ins) attached
     to an accommodation. Removed together with their accommodation.
     """
     __tablename__ = "events"

     id = Column(Integer, primary_key=True, autoincrement=True)
     accommodation_id = Column(
          Integer,
          ForeignKey("accommodations.id"),
          nullable=False,
          index=True
     )
     title = Column(String(255), nullable=True)
     description = Column(Text, nullable=True)
     starts_at = Column(DateTime, nullable=True)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     accommodation = relationship("Accommodation", back_populates="events")

     def __repr__(self):
          return f"<Event(id={self.id}, accommodation_id={self.accommodation_id})>"
