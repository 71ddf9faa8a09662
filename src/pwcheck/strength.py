"""
Password strength estimation backed by zxcvbn.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from zxcvbn import zxcvbn

logger = logging.getLogger(__name__)

MAX_SCORE = 4

NO_REASON_TEXT = "No reason provided"
NO_DATA_TEXT = "No data"


class StrengthError(Exception):
    """The password could not be scored."""


@dataclass
class StrengthReport:
    """Strength estimate for a single password."""

    score: int
    warning: str | None = None
    suggestions: list[str] = field(default_factory=list)
    guesses: float = 0
    crack_time: str = ""

    @classmethod
    def from_zxcvbn(cls, result: dict[str, Any]) -> "StrengthReport":
        """Create StrengthReport from a zxcvbn result dict."""
        feedback = result.get("feedback") or {}
        crack_times = result.get("crack_times_display") or {}
        return cls(
            score=int(result.get("score", 0)),
            warning=feedback.get("warning") or None,
            suggestions=list(feedback.get("suggestions") or []),
            guesses=float(result.get("guesses", 0)),
            crack_time=crack_times.get("offline_slow_hashing_1e4_per_second", ""),
        )

    @property
    def fraction(self) -> float:
        """Score scaled to 0.0 - 1.0 for progress bars."""
        return self.score / MAX_SCORE

    def to_text(self) -> str:
        lines = [
            f"Score: {self.score}/{MAX_SCORE}",
            f"Reason: {self.warning or NO_REASON_TEXT}",
            "Suggestions:",
        ]
        lines.extend(self.suggestions)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "score": self.score,
            "warning": self.warning,
            "suggestions": self.suggestions,
            "guesses": self.guesses,
            "crack_time": self.crack_time,
        }


def score_password(password: str, user_inputs: Sequence[str] = ()) -> StrengthReport:
    """Estimate password strength.

    Args:
        password: Password to score (NOT stored or logged)
        user_inputs: Extra words (names, site, email) to penalize

    Raises:
        StrengthError: empty password, or one zxcvbn refuses to score
    """
    if not password:
        raise StrengthError("Zero length password")

    try:
        result = zxcvbn(password, user_inputs=list(user_inputs))
    except ValueError as e:
        # zxcvbn rejects passwords longer than its max_length
        raise StrengthError(str(e)) from e

    report = StrengthReport.from_zxcvbn(result)
    logger.debug(f"Scored password of length {len(password)}: {report.score}/{MAX_SCORE}")
    return report
