"""
pytest configuration and fixtures.
"""

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpmessage import MessageConfig


@pytest.fixture
def sample_get_request() -> str:
    """Sample HTTP GET request."""
    return (
        "GET /api/users?page=1&limit=10 HTTP/1.1\r\n"
        "Host: localhost:8080\r\n"
        "User-Agent: pytest\r\n"
        "Accept: application/json\r\n"
        "\r\n"
    )


@pytest.fixture
def sample_post_request() -> str:
    """Sample HTTP POST request with JSON body."""
    body = '{"name": "John", "email": "john@example.com"}'
    return (
        "POST /api/users HTTP/1.1\r\n"
        "Host: localhost:8080\r\n"
        "Content-Type: application/json\r\n"
        f"Content-Length: {len(body)}\r\n"
        "\r\n"
    ) + body


@pytest.fixture
def strict_config() -> MessageConfig:
    """Config that rejects incomplete request lines."""
    return MessageConfig(strict_request_line=True)
