"""
=============================================================================
HTTP MODULE - Request parsing and response rendering
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │ REQUEST PARSER (request.py)                                         │
    │ ─────────────────────────────────────────────────────────────────── │
    │ Input:   "GET /users HTTP/1.1\r\nHost: ...\r\n\r\n"                 │
    │ Output:  HTTPRequest(method=Method.GET, uri="/users", ...)          │
    └─────────────────────────────────────────────────────────────────────┘

    ┌─────────────────────────────────────────────────────────────────────┐
    │ RESPONSE RENDERER (response.py)                                     │
    │ ─────────────────────────────────────────────────────────────────── │
    │ Input:   HTTP_200_OK(JSONValue.object({"ok": True}))                │
    │ Output:  "HTTP/1.1 200 OK\r\nContent-Type: ...\r\n\r\n{...}"       │
    └─────────────────────────────────────────────────────────────────────┘

    ┌─────────────────────────────────────────────────────────────────────┐
    │ METHODS / STATUS CODES (methods.py, status_codes.py)                │
    │ ─────────────────────────────────────────────────────────────────── │
    │ Method.from_token("GET") → Method.GET                               │
    │ HTTPStatus.NOT_FOUND → 404, phrase="Not Found"                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from .methods import Method
from .request import (
    HTTPRequest,
    RequestParser,
    Version,
    HTTPParseError,
    InvalidVersionError,
    IncompleteRequestLineError,
    parse_request,
)
from .response import (
    HTTPResponse,
    construct_response,
    custom_response,
    HTTP_200_OK,                      # 200 OK
    HTTP_201_CREATED,                 # 201 Created
    HTTP_400_BAD_REQUEST,             # 400 Bad Request
    HTTP_404_NOT_FOUND,               # 404 Not Found
    HTTP_500_INTERNAL_SERVER_ERROR,   # 500 Internal Server Error
)
from .status_codes import HTTPStatus, reason_phrase

__all__ = [
    # Request parsing
    "HTTPRequest",
    "RequestParser",
    "Version",
    "HTTPParseError",
    "InvalidVersionError",
    "IncompleteRequestLineError",
    "parse_request",

    # Response rendering
    "HTTPResponse",
    "construct_response",

    # Canned builders
    "custom_response",
    "HTTP_200_OK",
    "HTTP_201_CREATED",
    "HTTP_400_BAD_REQUEST",
    "HTTP_404_NOT_FOUND",
    "HTTP_500_INTERNAL_SERVER_ERROR",

    # Enums
    "Method",
    "HTTPStatus",
    "reason_phrase",
]
