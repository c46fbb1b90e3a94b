# models/user.py
import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum, func
from sqlalchemy.orm import relationship
from .base import Base


class UserRole(str, enum.Enum):
     """Enumeration for user roles."""
     OWNER = "OWNER"
     TENANT = "TENANT"
     ADMIN = "ADMIN"


class User(Base):
     """
     User model - accounts managed by the user service.
     This service only reads users to check roles and ownership.
     """
     __tablename__ = "users"

     id = Column(Integer, primary_key=True, autoincrement=True)
     email = Column(String(255), unique=True, nullable=True, index=True)
     first_name = Column(String(100), nullable=True)
     last_name = Column(String(100), nullable=True)
     role = Column(
          Enum(UserRole, name="user_role", create_constraint=True),
          nullable=False,
          index=True
     )
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     accommodations = relationship("Accommodation", back_populates="owner")

     def __repr__(self):
          return f"<User(id={self.id}, role='{self.role.value if self.role else None}')>"

     @property
     def is_owner(self) -> bool:
          return self.role == UserRole.OWNER
