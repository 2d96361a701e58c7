"""
=============================================================================
HTTPMESSAGE - Minimal HTTP/1.x message model with JSON bodies
=============================================================================

The parsing and rendering core of an HTTP service, with no sockets
attached. A transport reads a complete request, hands the text to
parse_request(), and writes back whatever construct_response() returns.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   transport ──raw text──► parse_request() ──► HTTPRequest           │
    │                                                    │                 │
    │                                         application code             │
    │                                                    │                 │
    │                       JSONValue ──► HTTP_200_OK() ─┘                 │
    │                                          │                           │
    │   transport ◄──raw text── construct_response(HTTPResponse)          │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httpmessage/
    ├── __init__.py          # This file - package exports
    ├── config.py            # MessageConfig dataclass
    ├── json_value.py        # JSONValue tagged union + stringify()
    ├── logging.py           # Logging setup, exchange access log
    └── http/
        ├── methods.py       # Method enum
        ├── status_codes.py  # HTTPStatus enum + reason phrases
        ├── request.py       # Request parsing
        └── response.py      # Response rendering, canned builders

=============================================================================
QUICK START
=============================================================================

    from httpmessage import JSONValue, parse_request, construct_response
    from httpmessage.http import HTTP_200_OK, HTTP_404_NOT_FOUND, Method

    request = parse_request(raw_text)

    if request.method is Method.GET and request.uri == "/health":
        response = HTTP_200_OK(JSONValue.object({"status": "ok"}))
    else:
        response = HTTP_404_NOT_FOUND()

    transport.write(construct_response(response))

=============================================================================
"""

__version__ = "1.0.0"

from .config import MessageConfig
from .json_value import JSONValue, JSONType
from .http import (
    HTTPRequest,
    HTTPResponse,
    HTTPStatus,
    Method,
    Version,
    HTTPParseError,
    parse_request,
    construct_response,
)

__all__ = [
    "MessageConfig",
    "JSONValue",
    "JSONType",
    "HTTPRequest",
    "HTTPResponse",
    "HTTPStatus",
    "Method",
    "Version",
    "HTTPParseError",
    "parse_request",
    "construct_response",
    "__version__",
]
