"""
Configuration for the Pwned Passwords client.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any

from pwcheck import __version__

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.pwnedpasswords.com"
DEFAULT_TIMEOUT = 10.0


def _default_user_agent() -> str:
    return f"pwcheck/{__version__}"


@dataclass
class CheckerConfig:
    """Settings for breach lookups."""

    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT  # seconds, whole request
    user_agent: str = field(default_factory=_default_user_agent)

    # Ask the API to pad responses with zero-count rows
    add_padding: bool = False

    @classmethod
    def from_env(cls) -> "CheckerConfig":
        """Load configuration from environment variables."""
        timeout_str = os.environ.get("PWCHECK_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if timeout_str:
            try:
                timeout = float(timeout_str)
            except ValueError:
                logger.warning(
                    f"Invalid PWCHECK_TIMEOUT {timeout_str!r}, using {DEFAULT_TIMEOUT}s"
                )
            else:
                if timeout <= 0:
                    logger.warning(
                        f"PWCHECK_TIMEOUT must be positive, using {DEFAULT_TIMEOUT}s"
                    )
                    timeout = DEFAULT_TIMEOUT

        return cls(
            api_url=os.environ.get("PWCHECK_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout=timeout,
            user_agent=os.environ.get("PWCHECK_USER_AGENT") or _default_user_agent(),
            add_padding=os.environ.get("PWCHECK_ADD_PADDING", "").lower() in ("true", "yes", "1"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "api_url": self.api_url,
            "timeout": self.timeout,
            "user_agent": self.user_agent,
            "add_padding": self.add_padding,
        }
