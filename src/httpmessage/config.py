"""
=============================================================================
MESSAGE CONFIGURATION
=============================================================================

Settings for the message layer: how strict the request parser is and how
logging is set up.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Values passed in code                                          │
    │      └── MessageConfig(strict_request_line=True)                   │
    │                                                                      │
    │   2. Environment variables, only via MessageConfig.from_env()      │
    │      └── HTTPMESSAGE_STRICT=1                                      │
    │                                                                      │
    │   3. Default values (in this dataclass)                            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Nothing in the package reads the environment by itself; the embedding
transport decides whether to call from_env().

=============================================================================
"""

import logging
import os
from dataclasses import dataclass


LOG_FORMATS = ("text", "json")

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class MessageConfig:
    """
    Configuration for parsing and logging.

    =========================================================================
    CONFIGURATION GROUPS
    =========================================================================

    PARSING
    - strict_request_line

    LOGGING
    - log_level, log_format

    =========================================================================
    """

    # ─────────────────────────────────────────────────────────────────────
    # PARSING
    # ─────────────────────────────────────────────────────────────────────

    strict_request_line: bool = False
    """
    Raise IncompleteRequestLineError when the request line has fewer than
    three tokens. Off by default: such requests come back with default
    method/uri/version and request_line_complete=False.
    """

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "INFO"
    """Logging level for the httpmessage logger (DEBUG, INFO, WARNING...)."""

    log_format: str = "text"
    """
    Exchange log format: 'text' (Apache-style line) or 'json' (one JSON
    object per line).
    """

    @classmethod
    def from_env(cls) -> "MessageConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        HTTPMESSAGE_STRICT       Strict request-line parsing (default: off)
        HTTPMESSAGE_LOG_LEVEL    Logging level (default: INFO)
        HTTPMESSAGE_LOG_FORMAT   text or json (default: text)

        =====================================================================
        """
        return cls(
            strict_request_line=os.getenv("HTTPMESSAGE_STRICT", "").strip().lower()
            in _TRUE_VALUES,
            log_level=os.getenv("HTTPMESSAGE_LOG_LEVEL", "INFO"),
            log_format=os.getenv("HTTPMESSAGE_LOG_FORMAT", "text"),
        )

    @property
    def level(self) -> int:
        """log_level as a logging module constant."""
        return logging.getLevelName(self.log_level.upper())

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: Unknown log level or log format.
        """
        if not isinstance(self.level, int):
            raise ValueError(f"Invalid log_level: {self.log_level}")

        if self.log_format not in LOG_FORMATS:
            raise ValueError(
                f"Invalid log_format: {self.log_format}. "
                f"Must be one of {', '.join(LOG_FORMATS)}."
            )
