"""
HTTP request methods.

The parser maps the first request-line token onto this enum with an exact,
case-sensitive comparison. Tokens it doesn't recognise ("get", "BREW", "")
become Method.UNKNOWN rather than an error, so rejecting them is left to
whatever routes the request.
"""

from enum import Enum


class Method(Enum):
    """HTTP request methods (RFC 7231 + PATCH) plus a catch-all."""

    GET = "GET"            # Retrieve resource
    HEAD = "HEAD"          # GET without body
    POST = "POST"          # Create resource / submit data
    PUT = "PUT"            # Replace resource
    PATCH = "PATCH"        # Partial update
    DELETE = "DELETE"      # Delete resource
    CONNECT = "CONNECT"    # Establish tunnel (HTTPS proxy)
    OPTIONS = "OPTIONS"    # Get allowed methods (CORS preflight)
    TRACE = "TRACE"        # Echo request (debugging)
    UNKNOWN = "UNKNOWN"    # Anything else

    @classmethod
    def from_token(cls, token: str) -> "Method":
        """
        Map a request-line token to a Method.

        Args:
            token: The raw method token, e.g. "GET".

        Returns:
            The matching member, or Method.UNKNOWN.
        """
        return _TOKEN_TO_METHOD.get(token, cls.UNKNOWN)

    def __str__(self) -> str:
        return self.value


_TOKEN_TO_METHOD = {
    method.value: method for method in Method if method is not Method.UNKNOWN
}
