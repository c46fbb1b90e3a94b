# errors.py
"""
API error types and the handlers that render them.

Every failure leaves the service as a JSON object with an ``error`` field,
plus ``details`` when there is diagnostic information worth returning.
"""
import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
     """Base class for errors that map onto an HTTP status and message."""

     status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

     def __init__(self, message: str, details: Any = None, reason: Optional[str] = None):
          super().__init__(message)
          self.message = message
          self.details = details
          self.reason = reason

     def to_body(self) -> dict:
          body = {"error": self.message}
          if self.details is not None:
               body["details"] = self.details
          return body


class ValidationError(ApiError):
     """Malformed or missing input."""
     status_code = status.HTTP_400_BAD_REQUEST


class UpstreamAuthError(ApiError):
     """Credential missing/malformed, or the authorization service could not be reached."""
     status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ApiError):
     """Wrong role or not the owner of the resource."""
     status_code = status.HTTP_403_FORBIDDEN


class AccessDeniedError(ApiError):
     """The authorization service explicitly refused the capability."""
     status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ApiError):
     status_code = status.HTTP_404_NOT_FOUND


class InternalError(ApiError):
     status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


_ERRORS_BY_STATUS = {
     status.HTTP_400_BAD_REQUEST: ValidationError,
     status.HTTP_401_UNAUTHORIZED: UpstreamAuthError,
     status.HTTP_403_FORBIDDEN: ForbiddenError,
     status.HTTP_404_NOT_FOUND: NotFoundError,
}


def error_for_status(status_code: int, message: str, reason: Optional[str] = None) -> ApiError:
     """Build the ApiError subclass matching an HTTP status code."""
     error_cls = _ERRORS_BY_STATUS.get(status_code, InternalError)
     return error_cls(message, reason=reason)


def register_error_handlers(app: FastAPI) -> None:
     @app.exception_handler(ApiError)
     async def api_error(request: Request, exc: ApiError):
          return JSONResponse(status_code=exc.status_code, content=exc.to_body())

     @app.exception_handler(RequestValidationError)
     async def request_validation_error(request: Request, exc: RequestValidationError):
          return JSONResponse(
               status_code=status.HTTP_400_BAD_REQUEST,
               content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
          )

     @app.exception_handler(StarletteHTTPException)
     async def http_error(request: Request, exc: StarletteHTTPException):
          if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
               return JSONResponse(status_code=404, content={"error": "Route not found"})
          return JSONResponse(
               status_code=exc.status_code,
               content={"error": exc.detail},
               headers=getattr(exc, "headers", None),
          )

     @app.exception_handler(Exception)
     async def unhandled_error(request: Request, exc: Exception):
          logger.exception("Unhandled error on %s %s", request.method, request.url.path)
          return JSONResponse(
               status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
               content={"error": "Internal Server Error"},
          )
