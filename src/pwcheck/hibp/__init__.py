"""
Pwned Passwords integration module.

Provides password breach checking against the Have I Been Pwned
Pwned Passwords range API using k-anonymity.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from pwcheck.hibp.errors import (
    ErrorKind,
    HttpStatusError,
    InputStateError,
    NetworkError,
    ParseError,
    PwnedPasswordsError,
)
from pwcheck.hibp.models import (
    CheckStatus,
    PasswordCheckResult,
    QueryDigest,
    RiskLevel,
)
from pwcheck.hibp.client import (
    PwnedPasswordsClient,
    parse_range_response,
)

__all__ = [
    "PwnedPasswordsClient",
    "parse_range_response",
    "CheckStatus",
    "PasswordCheckResult",
    "QueryDigest",
    "RiskLevel",
    "ErrorKind",
    "PwnedPasswordsError",
    "NetworkError",
    "HttpStatusError",
    "ParseError",
    "InputStateError",
]
