# dependencies.py
"""
FastAPI dependencies shared by the routers.

Usage:
     @router.post("/create", dependencies=[Depends(require_access("setHouse"))])
     def create(...):
          ...
"""
from typing import Callable, Optional

from fastapi import Header, Request

from services.access_service import AccessGate


def get_access_gate(request: Request) -> AccessGate:
     """The AccessGate built at startup (see main.py)."""
     return request.app.state.access_gate


def require_access(right_name: str) -> Callable:
     """
     Build a dependency that checks ``right_name`` with the authorization
     service before the route runs. On failure the route is never called.
     """
     def dependency(
          request: Request,
          authorization: Optional[str] = Header(None),
     ) -> None:
          get_access_gate(request).check(right_name, authorization)

     dependency.__name__ = f"require_{right_name}"
     return dependency
