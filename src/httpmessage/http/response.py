"""
=============================================================================
HTTP RESPONSE RENDERER
=============================================================================

Renders HTTPResponse objects into raw HTTP/1.x response text, and provides
canned builders for JSON responses.

=============================================================================
HTTP RESPONSE ANATOMY
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     HTTP RESPONSE STRUCTURE                         │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │  ┌─ STATUS LINE ──────────────────────────────────────────────────┐ │
    │  │    HTTP/1.1 404 Not Found\r\n                                   │ │
    │  │    ────┬─── ─┬─ ────┬────                                       │ │
    │  │    Version  Code  Phrase                                        │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │  ┌─ HEADERS (ascending name order) ───────────────────────────────┐ │
    │  │    Content-Type: application/json\r\n                           │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │    \r\n                                                              │
    │                                                                      │
    │  ┌─ BODY ─────────────────────────────────────────────────────────┐ │
    │  │    null                                                         │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Headers are written exactly as given. Nothing is added: no Content-Length,
no Date, no Server. Framing is the transport's business.

=============================================================================
CANNED BUILDERS
=============================================================================

    HTTP_200_OK                     → 200 OK
    HTTP_201_CREATED                → 201 Created
    HTTP_400_BAD_REQUEST            → 400 Bad Request
    HTTP_404_NOT_FOUND              → 404 Not Found
    HTTP_500_INTERNAL_SERVER_ERROR  → 500 Internal Server Error
    custom_response(status, ...)    → any status

Each takes an optional JSON body (default null) and optional headers
(default {"Content-Type": "application/json"}) and pins the version to 1.1:

    construct_response(HTTP_404_NOT_FOUND())
    # 'HTTP/1.1 404 Not Found\r\nContent-Type: application/json\r\n\r\nnull'

=============================================================================
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from ..json_value import JSONValue
from .request import Version
from .status_codes import HTTPStatus, reason_phrase


logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


@dataclass
class HTTPResponse:
    """
    Represents an HTTP response to be rendered for the client.

    status may be an HTTPStatus member or any integer; integers outside the
    known set render with the phrase "Unknown Status".
    """

    version: Version = field(default_factory=lambda: Version(1, 1))
    status: Union[HTTPStatus, int] = HTTPStatus.OK
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    @property
    def status_message(self) -> str:
        """Reason phrase for the status code."""
        return reason_phrase(self.status)

    @property
    def status_line(self) -> str:
        """
        Get the HTTP status line (without CRLF).

        Example: "HTTP/1.1 200 OK"
        """
        return f"{self.version} {int(self.status)} {self.status_message}"

    def set_header(self, name: str, value: str) -> "HTTPResponse":
        """Set a response header. Returns self for method chaining."""
        self.headers[name] = value
        return self

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        """Render and encode for a socket.sendall()."""
        return construct_response(self).encode(encoding)


def construct_response(response: HTTPResponse) -> str:
    """
    Render a response into raw HTTP text.

    Args:
        response: The response to render.

    Returns:
        Status line, headers in ascending name order, blank line, body.
    """
    lines = [response.status_line]

    for name, value in sorted(response.headers.items()):
        lines.append(f"{name}: {value}")

    # Empty line separates headers from body
    lines.append("")

    logger.debug("Rendered %s (%d headers)", response.status_line, len(response.headers))
    return "\r\n".join(lines) + "\r\n" + response.body


# =============================================================================
# CANNED BUILDERS
# =============================================================================

JSONBody = Optional[Union[JSONValue, Any]]


def _json_headers(headers: Optional[Dict[str, str]]) -> Dict[str, str]:
    if headers is None:
        return {"Content-Type": JSON_CONTENT_TYPE}
    return dict(headers)


def custom_response(
    status: Union[HTTPStatus, int],
    body: JSONBody = None,
    headers: Optional[Dict[str, str]] = None,
) -> HTTPResponse:
    """
    Create an HTTP/1.1 response with a JSON body.

    Args:
        status: Status code (HTTPStatus or plain int).
        body: JSONValue, or a plain python value converted with
              JSONValue.from_python(). None means JSON null.
        headers: Response headers; defaults to a JSON Content-Type.
                 The mapping is copied.

    Returns:
        HTTPResponse whose body is the stringified JSON.
    """
    return HTTPResponse(
        version=Version(1, 1),
        status=status,
        headers=_json_headers(headers),
        body=JSONValue.from_python(body).stringify(),
    )


def HTTP_200_OK(body: JSONBody = None, headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
    """200 OK with a JSON body."""
    return custom_response(HTTPStatus.OK, body, headers)


def HTTP_201_CREATED(body: JSONBody = None, headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
    """201 Created with a JSON body."""
    return custom_response(HTTPStatus.CREATED, body, headers)


def HTTP_400_BAD_REQUEST(body: JSONBody = None, headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
    """400 Bad Request with a JSON body."""
    return custom_response(HTTPStatus.BAD_REQUEST, body, headers)


def HTTP_404_NOT_FOUND(body: JSONBody = None, headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
    """404 Not Found with a JSON body."""
    return custom_response(HTTPStatus.NOT_FOUND, body, headers)


def HTTP_500_INTERNAL_SERVER_ERROR(body: JSONBody = None, headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
    """500 Internal Server Error with a JSON body."""
    return custom_response(HTTPStatus.INTERNAL_SERVER_ERROR, body, headers)
