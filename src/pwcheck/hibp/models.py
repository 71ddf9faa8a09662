"""
Data models for Pwned Passwords range lookups.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import hashlib
import string
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from pwcheck.hibp.errors import (
    ErrorKind,
    HttpStatusError,
    InputStateError,
    NetworkError,
    ParseError,
    PwnedPasswordsError,
)

PREFIX_LENGTH = 5
DIGEST_LENGTH = 40

NOT_CHECKED_TEXT = "Not checked yet"
CHECKING_TEXT = "Checking password"


class RiskLevel(str, Enum):
    """Risk level based on password exposure."""

    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class CheckStatus(str, Enum):
    """Where a breach check is in its lifecycle."""

    NOT_CHECKED = "not_checked"
    CHECKING = "checking"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass(frozen=True)
class QueryDigest:
    """Uppercase SHA-1 hex digest split for a k-anonymity range query.

    Only ``prefix`` is ever sent to the API; ``suffix`` is compared locally.
    """

    prefix: str
    suffix: str

    @classmethod
    def from_password(cls, password: str) -> "QueryDigest":
        """Hash a password (UTF-8) and split the digest."""
        digest = hashlib.sha1(password.encode("utf-8")).hexdigest().upper()
        return cls.from_hex(digest)

    @classmethod
    def from_hex(cls, sha1_hash: str) -> "QueryDigest":
        """Split a pre-computed SHA-1 hex digest.

        Raises:
            ValueError: if the value is not 40 hex characters
        """
        sha1_hash = sha1_hash.strip().upper()
        if len(sha1_hash) != DIGEST_LENGTH or not all(c in string.hexdigits for c in sha1_hash):
            raise ValueError("SHA-1 hash must be 40 hexadecimal characters")
        return cls(prefix=sha1_hash[:PREFIX_LENGTH], suffix=sha1_hash[PREFIX_LENGTH:])

    @property
    def full(self) -> str:
        """The full 40 character digest."""
        return self.prefix + self.suffix

    def __repr__(self) -> str:
        # Keep the suffix out of logs and tracebacks
        return f"QueryDigest(prefix={self.prefix!r})"


@dataclass
class PasswordCheckResult:
    """Result of checking a password against Pwned Passwords."""

    status: CheckStatus = CheckStatus.NOT_CHECKED
    # Only set when status is COMPLETE
    occurrences: int | None = None
    checked_at: datetime = field(default_factory=datetime.now)
    error: str | None = None
    error_kind: ErrorKind | None = None
    http_status: int | None = None
    # Never store the actual password!
    hash_prefix: str = ""

    @classmethod
    def not_checked(cls) -> "PasswordCheckResult":
        return cls(status=CheckStatus.NOT_CHECKED)

    @classmethod
    def checking(cls, hash_prefix: str = "") -> "PasswordCheckResult":
        return cls(status=CheckStatus.CHECKING, hash_prefix=hash_prefix)

    @classmethod
    def found(cls, occurrences: int, hash_prefix: str = "") -> "PasswordCheckResult":
        return cls(status=CheckStatus.COMPLETE, occurrences=occurrences, hash_prefix=hash_prefix)

    @classmethod
    def from_error(cls, exc: PwnedPasswordsError, hash_prefix: str = "") -> "PasswordCheckResult":
        """Build a failed result carrying the error text and category."""
        return cls(
            status=CheckStatus.FAILED,
            error=str(exc) or exc.__class__.__name__,
            error_kind=exc.kind,
            http_status=getattr(exc, "status", None),
            hash_prefix=hash_prefix,
        )

    @property
    def is_complete(self) -> bool:
        return self.status == CheckStatus.COMPLETE

    @property
    def is_pwned(self) -> bool:
        """Check if password was found in breaches."""
        return self.is_complete and bool(self.occurrences)

    def require_count(self) -> int:
        """Return the occurrence count or raise if there is none.

        Raises:
            InputStateError: the check has not run or is still running
            PwnedPasswordsError: the check failed (original error kind kept)
        """
        if self.status == CheckStatus.COMPLETE and self.occurrences is not None:
            return self.occurrences
        if self.status == CheckStatus.FAILED:
            message = self.error or "Check failed"
            if self.error_kind == ErrorKind.HTTP_STATUS:
                raise HttpStatusError(self.http_status or 0, message)
            if self.error_kind == ErrorKind.PARSE:
                raise ParseError(message)
            raise NetworkError(message)
        raise InputStateError(self.display_text)

    @property
    def risk_level(self) -> RiskLevel:
        """Determine risk level based on occurrences."""
        occurrences = self.occurrences or 0
        if occurrences == 0:
            return RiskLevel.SAFE
        elif occurrences < 10:
            return RiskLevel.LOW
        elif occurrences < 100:
            return RiskLevel.MEDIUM
        elif occurrences < 10000:
            return RiskLevel.HIGH
        else:
            return RiskLevel.CRITICAL

    @property
    def risk_description(self) -> str:
        """Get human-readable risk description."""
        occurrences = self.occurrences or 0
        descriptions = {
            RiskLevel.SAFE: "This password has not been found in any known data breaches.",
            RiskLevel.LOW: f"This password has been seen {occurrences} times in data breaches. Consider changing it.",
            RiskLevel.MEDIUM: f"This password has been seen {occurrences} times. You should change it.",
            RiskLevel.HIGH: f"This password has been seen {occurrences:,} times! Change it immediately.",
            RiskLevel.CRITICAL: f"This password has been seen {occurrences:,} times! It's extremely common and must be changed.",
        }
        return descriptions[self.risk_level]

    @property
    def display_text(self) -> str:
        """One-line text shown in place of the count."""
        if self.status == CheckStatus.COMPLETE:
            return f"Found {self.occurrences} times"
        if self.status == CheckStatus.FAILED:
            return self.error or "Check failed"
        if self.status == CheckStatus.CHECKING:
            return CHECKING_TEXT
        return NOT_CHECKED_TEXT

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data: dict[str, Any] = {
            "status": self.status.value,
            "occurrences": self.occurrences,
            "checked_at": self.checked_at.isoformat(),
            "hash_prefix": self.hash_prefix,
            "error": self.error,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "http_status": self.http_status,
        }
        if self.is_complete:
            data["is_pwned"] = self.is_pwned
            data["risk_level"] = self.risk_level.value
            data["risk_description"] = self.risk_description
        return data
