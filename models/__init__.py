# models/__init__.py
from .base import Base
from .user import User, UserRole
from .accommodation import Accommodation
from .lease import Lease
from .event import Event

__all__ = [
     "Base",
     "User",
     "UserRole",
     "Accommodation",
     "Lease",
     "Event",
]
