# services/access_service.py
"""
Access Gate - per-request capability check against the external
authorization service.

The gate runs in one of two modes, fixed at startup. AUTH_GATE_ENABLED picks
the mode; when it is unset the gate is enabled whenever AUTH_SERVICE_URL is set.
- ENABLED: every request must carry ``Authorization: Bearer <token>``; the
  token and the capability name are POSTed to ``<base>/access/check`` and any
  2xx answer lets the request through.
- DISABLED: the gate is a no-op and every request proceeds (degrade-open).

A single attempt is made per request; failures are never retried.
"""
import enum
import logging
from typing import Optional

import requests

from config import Settings
from errors import AccessDeniedError, UpstreamAuthError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class GateMode(str, enum.Enum):
     ENABLED = "enabled"
     DISABLED = "disabled"


class AccessGate:
     """Checks capabilities such as ``setHouse`` with the authorization service."""

     def __init__(self, mode: GateMode, service_url: Optional[str] = None, timeout: float = 10):
          if mode == GateMode.ENABLED and not service_url:
               raise ValueError("AUTH_SERVICE_URL must be set when the access gate is enabled")
          self.mode = mode
          self.service_url = (service_url or "").rstrip("/")
          self.timeout = timeout

     @classmethod
     def from_settings(cls, settings: Settings) -> "AccessGate":
          enabled = settings.AUTH_GATE_ENABLED
          if enabled is None:
               # Not set explicitly: a configured service URL turns the gate on
               enabled = bool(settings.AUTH_SERVICE_URL)
          mode = GateMode.ENABLED if enabled else GateMode.DISABLED
          gate = cls(mode, settings.AUTH_SERVICE_URL, settings.AUTH_SERVICE_TIMEOUT)
          if mode == GateMode.DISABLED:
               logger.warning("Access gate is DISABLED: all requests are allowed without a capability check")
          else:
               logger.info("Access gate enabled (service: %s)", gate.service_url)
          return gate

     @property
     def enabled(self) -> bool:
          return self.mode == GateMode.ENABLED

     @property
     def check_url(self) -> str:
          return f"{self.service_url}/access/check"

     @staticmethod
     def extract_token(authorization: Optional[str]) -> str:
          """Return the bearer token, or raise UpstreamAuthError if the header is unusable."""
          if not authorization or not authorization.startswith(BEARER_PREFIX):
               raise UpstreamAuthError("Authorization token missing or malformed")
          token = authorization[len(BEARER_PREFIX):].strip()
          if not token:
               raise UpstreamAuthError("Authorization token missing or malformed")
          return token

     def check(self, right_name: str, authorization: Optional[str]) -> None:
          """
          Verify that the caller holds ``right_name``.

          Raises:
               UpstreamAuthError: header missing/malformed, or the service call failed
               AccessDeniedError: the service answered with a non-2xx status
          """
          if not self.enabled:
               return

          token = self.extract_token(authorization)

          try:
               response = requests.post(
                    self.check_url,
                    json={"token": token, "rightName": right_name},
                    timeout=self.timeout,
               )
          except requests.RequestException as exc:
               logger.warning("Authorization service call failed for %s: %s", right_name, exc)
               raise UpstreamAuthError("Authorization failed", details=str(exc))

          if not 200 <= response.status_code < 300:
               logger.info("Access denied for %s (status %s)", right_name, response.status_code)
               raise AccessDeniedError("Access denied")
