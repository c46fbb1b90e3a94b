# routers/__init__.py
from .accommodations import router as accommodations_router

__all__ = ["accommodations_router"]
