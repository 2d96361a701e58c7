"""
=============================================================================
HTTP STATUS CODES
=============================================================================

The status codes this message layer knows by name, with their reason
phrases.

=============================================================================
WHAT THE RENDERER NEEDS
=============================================================================

Every response line carries a numeric code and a reason phrase:

    HTTP/1.1 404 Not Found
             ─── ─────────
              │      │
              │      └── Reason phrase (from _STATUS_PHRASES)
              └───────── Status code (HTTPStatus member or plain int)

    ┌────────┬──────────────────────────────────────────────────────────┐
    │  2xx   │ 200 OK, 201 Created, 202 Accepted, 204 No Content        │
    ├────────┼──────────────────────────────────────────────────────────┤
    │  4xx   │ 400 Bad Request, 401 Unauthorized, 403 Forbidden,        │
    │        │ 404 Not Found, 405 Method Not Allowed                    │
    ├────────┼──────────────────────────────────────────────────────────┤
    │  5xx   │ 500 Internal Server Error, 501 Not Implemented,          │
    │        │ 502 Bad Gateway, 503 Service Unavailable                 │
    └────────┴──────────────────────────────────────────────────────────┘

Any other integer is still renderable: it keeps its numeric code and gets
the phrase "Unknown Status". An unknown code is never an error.

=============================================================================
"""

from enum import IntEnum


UNKNOWN_STATUS_PHRASE = "Unknown Status"


class HTTPStatus(IntEnum):
    """
    HTTP status codes with reason phrases.

    Extends IntEnum, so members compare and format as integers:

        >>> HTTPStatus.NOT_FOUND == 404
        True
        >>> f"{HTTPStatus.NOT_FOUND:d}"
        '404'
        >>> HTTPStatus.NOT_FOUND.phrase
        'Not Found'
    """

    # =========================================================================
    # 2xx SUCCESS
    # =========================================================================
    OK = 200                    # Standard success response
    CREATED = 201               # New resource was created (POST)
    ACCEPTED = 202              # Accepted, processing later
    NO_CONTENT = 204            # Success with no body to return

    # =========================================================================
    # 4xx CLIENT ERRORS
    # =========================================================================
    BAD_REQUEST = 400           # Malformed request syntax
    UNAUTHORIZED = 401          # Authentication required
    FORBIDDEN = 403             # Authenticated but not permitted
    NOT_FOUND = 404             # Resource doesn't exist
    METHOD_NOT_ALLOWED = 405    # Method not supported for resource

    # =========================================================================
    # 5xx SERVER ERRORS
    # =========================================================================
    INTERNAL_SERVER_ERROR = 500 # Unexpected server error (catch-all)
    NOT_IMPLEMENTED = 501       # Server doesn't support this feature
    BAD_GATEWAY = 502           # Invalid response from upstream
    SERVICE_UNAVAILABLE = 503   # Overloaded or in maintenance

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def phrase(self) -> str:
        """Reason phrase used in the response status line."""
        return _STATUS_PHRASES.get(self, UNKNOWN_STATUS_PHRASE)

    @property
    def is_success(self) -> bool:
        """Check if this is a 2xx (success) status code."""
        return 200 <= self < 300

    @property
    def is_client_error(self) -> bool:
        """Check if this is a 4xx (client error) status code."""
        return 400 <= self < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a 5xx (server error) status code."""
        return 500 <= self < 600

    @property
    def is_error(self) -> bool:
        """Check if this is an error status code (4xx or 5xx)."""
        return self >= 400


# =============================================================================
# REASON PHRASES
# =============================================================================

_STATUS_PHRASES = {
    # 2xx Success
    HTTPStatus.OK: "OK",
    HTTPStatus.CREATED: "Created",
    HTTPStatus.ACCEPTED: "Accepted",
    HTTPStatus.NO_CONTENT: "No Content",

    # 4xx Client Errors
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.UNAUTHORIZED: "Unauthorized",
    HTTPStatus.FORBIDDEN: "Forbidden",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method Not Allowed",

    # 5xx Server Errors
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
    HTTPStatus.NOT_IMPLEMENTED: "Not Implemented",
    HTTPStatus.BAD_GATEWAY: "Bad Gateway",
    HTTPStatus.SERVICE_UNAVAILABLE: "Service Unavailable",
}


def reason_phrase(status: int) -> str:
    """
    Get the reason phrase for any status code.

    Works for HTTPStatus members and plain integers alike. Codes outside
    the known set fall back to "Unknown Status".

    Args:
        status: Numeric status code.

    Returns:
        The canonical reason phrase.
    """
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return UNKNOWN_STATUS_PHRASE
