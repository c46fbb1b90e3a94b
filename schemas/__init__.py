# schemas/__init__.py
from .accommodation import (
     AccommodationCreate,
     AccommodationUpdate,
     AccommodationResponse,
     AccommodationUpdateResponse,
     MessageResponse,
     ErrorResponse,
)

__all__ = [
     "AccommodationCreate",
     "AccommodationUpdate",
     "AccommodationResponse",
     "AccommodationUpdateResponse",
     "MessageResponse",
     "ErrorResponse",
]
