"""
=============================================================================
EXCHANGE LOGGING
=============================================================================

Logging setup for the package and an access-log record for one parsed
request and the response rendered for it.

=============================================================================
LOG FORMATS
=============================================================================

    TEXT (default):
    ┌─────────────────────────────────────────────────────────────────────┐
    │ "GET /api HTTP/1.1" 200 15 0.42ms                                   │
    │  ─────────────────  ─── ── ──────                                   │
    │  Request line       Code Len Duration                               │
    └─────────────────────────────────────────────────────────────────────┘

    JSON (one object per line, keys sorted):
    ┌─────────────────────────────────────────────────────────────────────┐
    │ {"body_length":15,"duration_ms":0.420000,"method":"GET",...}        │
    └─────────────────────────────────────────────────────────────────────┘

The JSON line is produced by JSONValue, so it follows the same rules as
response bodies (sorted keys, six-decimal floats).

=============================================================================
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .config import MessageConfig
from .http.request import HTTPRequest
from .http.response import HTTPResponse
from .json_value import JSONValue


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════
# Namespaced logger for exchange records, so it can be routed separately:
#   logging.getLogger("httpmessage.access").addHandler(file_handler)
# ═══════════════════════════════════════════════════════════════════════════
access_logger = logging.getLogger("httpmessage.access")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: Optional[MessageConfig] = None) -> None:
    """
    Configure logging based on config.

    Validates the config first, so a bad log level fails here rather than
    being silently replaced.
    """
    config = config or MessageConfig()
    config.validate()

    logging.basicConfig(level=config.level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger("httpmessage").setLevel(config.level)


@dataclass
class ExchangeLog:
    """
    Structured log entry for one request/response pair.

    request_complete is False when the request line couldn't be parsed
    and method/uri/version are defaults.
    """

    method: str
    uri: str
    version: str
    request_complete: bool
    status_code: int
    body_length: int
    duration_ms: float

    @classmethod
    def from_exchange(
        cls,
        request: HTTPRequest,
        response: HTTPResponse,
        duration_ms: float = 0.0,
    ) -> "ExchangeLog":
        return cls(
            method=str(request.method),
            uri=request.uri,
            version=str(request.version),
            request_complete=request.request_line_complete,
            status_code=int(response.status),
            body_length=len(response.body),
            duration_ms=duration_ms,
        )

    def to_json(self) -> JSONValue:
        return JSONValue.object({
            "method": self.method,
            "uri": self.uri,
            "version": self.version,
            "request_complete": self.request_complete,
            "status_code": self.status_code,
            "body_length": self.body_length,
            "duration_ms": float(self.duration_ms),
        })

    def to_text(self) -> str:
        return (
            f'"{self.method} {self.uri} {self.version}" {self.status_code} '
            f'{self.body_length} {self.duration_ms:.2f}ms'
        )


def log_exchange(
    request: HTTPRequest,
    response: HTTPResponse,
    duration_ms: float = 0.0,
    config: Optional[MessageConfig] = None,
) -> ExchangeLog:
    """
    Emit one access-log record on the httpmessage.access logger.

    The line format comes from config.log_format ("text" or "json").
    Error responses (4xx/5xx) and requests with an incomplete request line
    are logged at WARNING, everything else at INFO.

    Returns:
        The ExchangeLog that was logged.

    Raises:
        ValueError: If the config doesn't validate.
    """
    config = config or MessageConfig()
    config.validate()

    entry = ExchangeLog.from_exchange(request, response, duration_ms)

    level = logging.INFO
    if entry.status_code >= 400 or not entry.request_complete:
        level = logging.WARNING

    if config.log_format == "json":
        access_logger.log(level, entry.to_json().stringify())
    else:
        access_logger.log(level, entry.to_text())

    return entry
