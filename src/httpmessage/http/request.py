"""
=============================================================================
HTTP REQUEST PARSER
=============================================================================

Turns the complete text of an HTTP/1.x request into an HTTPRequest.

=============================================================================
HTTP REQUEST ANATOMY
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     HTTP REQUEST STRUCTURE                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │  ┌─ REQUEST LINE ─────────────────────────────────────────────────┐ │
    │  │                                                                 │ │
    │  │    GET /api/users?page=1 HTTP/1.1\r\n                          │ │
    │  │    ─┬─ ───────┬───────── ────┬───                               │ │
    │  │     │         │              │                                  │ │
    │  │   Method     URI          Version                               │ │
    │  │              (kept verbatim, no path/query split)               │ │
    │  │                                                                 │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │  ┌─ HEADERS ──────────────────────────────────────────────────────┐ │
    │  │    Host: example.com\r\n                                        │ │
    │  │    Content-Type: application/json\r\n                           │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │  ┌─ DELIMITER ────────────────────────────────────────────────────┐ │
    │  │    \r\n            (a line holding only CR)                     │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │  ┌─ BODY ─────────────────────────────────────────────────────────┐ │
    │  │    everything left, byte for byte                               │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
LENIENT BY DEFAULT
=============================================================================

The transport hands us one complete request; the parser's job is to
structure it, not to police it:

    Input problem                     Result
    ────────────────────────────────  ───────────────────────────────────
    Fewer than 3 request-line tokens  defaults kept, request_line_complete
                                      is False (IncompleteRequestLineError
                                      in strict mode)
    Unknown / lowercase method        Method.UNKNOWN
    Version not HTTP/<int>.<int>      InvalidVersionError (a ValueError)
    Header line without ":"           skipped
    Duplicate header                  last one wins
    Missing delimiter line            empty body
    Content-Length mismatch           ignored, body taken as-is

A bad version segment is the only thing that raises in the default mode.
Callers that route requests should check request_line_complete (or that
method is not UNKNOWN) before dispatching.

=============================================================================
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..config import MessageConfig
from .methods import Method


logger = logging.getLogger(__name__)

# str.strip() also removes Unicode spaces; header trimming is ASCII only
_ASCII_WHITESPACE = " \t\n\r\f\v"


class HTTPParseError(Exception):
    """
    Raised when HTTP request parsing fails.

    Carries the HTTP status code a server should answer with, so the
    transport can turn it straight into an error response.
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code  # HTTP status to return


class InvalidVersionError(HTTPParseError, ValueError):
    """The version segment of the request line isn't HTTP/<int>.<int>."""


class IncompleteRequestLineError(HTTPParseError):
    """The request line has fewer than three tokens (strict mode only)."""


@dataclass(frozen=True)
class Version:
    """
    HTTP protocol version.

        >>> str(Version(1, 1))
        'HTTP/1.1'
    """

    major: int = 0
    minor: int = 0

    @classmethod
    def parse(cls, token: str) -> "Version":
        """
        Parse a request-line version token such as "HTTP/1.1".

        The first five characters ("HTTP/") are dropped without being
        checked and the remainder is split on ".". The first two pieces
        must be plain ASCII digits ("1_0", " 1", "-1" and non-ASCII digits
        are rejected); anything after a second dot is ignored.

        Raises:
            InvalidVersionError: Missing dot or non-digit part.
        """
        parts = token[5:].split(".")
        if len(parts) < 2:
            raise InvalidVersionError(f"Invalid HTTP version: {token!r}")

        try:
            major, minor = _ascii_int(parts[0]), _ascii_int(parts[1])
        except ValueError as e:
            raise InvalidVersionError(f"Invalid HTTP version: {token!r}") from e

        return cls(major, minor)

    def __str__(self) -> str:
        return f"HTTP/{self.major}.{self.minor}"


@dataclass
class HTTPRequest:
    """
    Represents a parsed HTTP request.

    =========================================================================
    ATTRIBUTES
    =========================================================================

        method:     Method enum; UNKNOWN for unrecognised tokens

        uri:        Request target exactly as sent
                    "/users?page=1" stays "/users?page=1"

        version:    Version(major, minor)

        headers:    Header name → value. Names keep their original case,
                    values are trimmed, a repeated name keeps the last value

        body:       Everything after the blank line, untouched

        request_line_complete:
                    False when the request line had fewer than three
                    tokens and method/uri/version are just defaults

    =========================================================================
    """

    method: Method = Method.UNKNOWN
    uri: str = ""
    version: Version = field(default_factory=Version)
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""
    request_line_complete: bool = False

    def get_header(self, name: str, default: str = "") -> str:
        """
        Get a header value (exact, case-sensitive lookup).

        Args:
            name: Header name as sent by the client.
            default: Value to return if header not found.
        """
        return self.headers.get(name, default)


class RequestParser:
    """
    Parses raw HTTP request text into HTTPRequest objects.

    ==========================================================================
    PARSER ARCHITECTURE
    ==========================================================================

        Raw request text
              │
              ▼
        ┌───────────────────────────────────────────────────────────────────┐
        │  1. Read first line, split on single spaces                       │
        │     < 3 tokens? → keep defaults (or raise when strict)            │
        │  2. Token 0 → Method, token 1 → uri, token 2 → Version            │
        │  3. Read header lines until a line that is just "\\r"              │
        │     "Name: Value" split on first colon, both sides trimmed        │
        │  4. Rest of the input → body                                      │
        └───────────────────────────────────────────────────────────────────┘
              │
              ▼
        HTTPRequest dataclass

    ==========================================================================
    """

    def __init__(self, config: Optional[MessageConfig] = None):
        """
        Initialize the request parser.

        Args:
            config: Message settings. Only strict_request_line is used here.
        """
        self.config = config or MessageConfig()

    def parse(self, raw: str) -> HTTPRequest:
        """
        Parse a complete raw HTTP request.

        Args:
            raw: Full request text (request line, headers, blank line, body).

        Returns:
            Parsed HTTPRequest object.

        Raises:
            InvalidVersionError: If the version segment isn't numeric.
            IncompleteRequestLineError: Strict mode only, if the request
                line has fewer than three tokens.
        """
        request = HTTPRequest()

        # =====================================================================
        # STEP 1: Request line
        # =====================================================================
        line, pos = _read_line(raw, 0)
        self._parse_request_line((line or "").rstrip("\r"), request)

        # =====================================================================
        # STEP 2: Headers, up to the line that holds only CR
        # =====================================================================
        while True:
            line, pos = _read_line(raw, pos)
            if line is None or line == "\r":
                break
            self._parse_header(line, request.headers)

        # =====================================================================
        # STEP 3: Body - whatever is left, no Content-Length check
        # =====================================================================
        request.body = raw[pos:]

        logger.debug(
            "Parsed %s %s %s (%d headers, %d body chars)",
            request.method, request.uri, request.version,
            len(request.headers), len(request.body),
        )
        return request

    def _parse_request_line(self, line: str, request: HTTPRequest) -> None:
        """
        Fill method, uri and version from the request line.

        Format: METHOD SP REQUEST-URI SP HTTP-VERSION
        """
        parts = _split(line, " ")
        if len(parts) < 3:
            if self.config.strict_request_line:
                raise IncompleteRequestLineError(
                    f"Invalid request line: {line!r}"
                )
            logger.warning(
                "Request line has %d token(s), expected 3: %r", len(parts), line
            )
            return

        request.method = Method.from_token(parts[0])
        if request.method is Method.UNKNOWN:
            logger.debug("Unrecognised method token: %r", parts[0])

        request.uri = parts[1]
        request.version = Version.parse(parts[2])
        request.request_line_complete = True

    @staticmethod
    def _parse_header(line: str, headers: Dict[str, str]) -> None:
        """
        Parse one "Name: Value" line into headers.

        Lines without a colon are skipped. Whitespace (including the line's
        trailing CR) is trimmed from both name and value.
        """
        name, sep, value = line.partition(":")
        if not sep:
            return
        headers[name.strip(_ASCII_WHITESPACE)] = value.strip(_ASCII_WHITESPACE)


# =============================================================================
# LINE HELPERS
# =============================================================================

def _ascii_int(piece: str) -> int:
    """int() restricted to ASCII digits, no sign, spaces or underscores."""
    if not (piece.isascii() and piece.isdigit()):
        raise ValueError(f"Not a version number: {piece!r}")
    return int(piece)


def _read_line(raw: str, pos: int) -> Tuple[Optional[str], int]:
    """
    Read one LF-terminated line starting at pos.

    The LF is consumed but not returned; a CR before it is kept. Returns
    (None, pos) once the input is exhausted.
    """
    if pos >= len(raw):
        return None, pos
    end = raw.find("\n", pos)
    if end == -1:
        return raw[pos:], len(raw)
    return raw[pos:end], end + 1


def _split(text: str, delimiter: str) -> List[str]:
    """
    Split on every delimiter, dropping a single trailing empty piece.

        "GET /foo HTTP/1.1" → ["GET", "/foo", "HTTP/1.1"]
        "GET /foo "         → ["GET", "/foo"]
        "GET  /foo"         → ["GET", "", "/foo"]
        ""                  → []
    """
    if not text:
        return []
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def parse_request(raw: str, strict: bool = False) -> HTTPRequest:
    """
    Convenience function to parse an HTTP request.

    Args:
        raw: Complete raw request text.
        strict: Raise IncompleteRequestLineError instead of returning a
                request with default method/uri/version.

    Returns:
        Parsed HTTPRequest object.
    """
    parser = RequestParser(MessageConfig(strict_request_line=strict))
    return parser.parse(raw)
