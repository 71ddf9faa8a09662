"""
Application state for the interactive password checker.

The state holds no widgets and does no I/O. Messages go in through
``CheckerState.update``; when a breach check is needed the update returns
a ``CheckRequest`` for the caller to run and report back as a
``ResultFetched`` message.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from dataclasses import dataclass, field
from typing import Sequence, Union

from pwcheck.hibp.models import PasswordCheckResult
from pwcheck.strength import NO_DATA_TEXT, StrengthError, StrengthReport, score_password

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PasswordChanged:
    password: str = field(repr=False)


@dataclass(frozen=True)
class CheckDatabase:
    pass


@dataclass(frozen=True)
class ResultFetched:
    sequence: int
    result: PasswordCheckResult


Message = Union[PasswordChanged, CheckDatabase, ResultFetched]


@dataclass(frozen=True)
class CheckRequest:
    """A breach check the caller must run, tagged with its sequence number."""

    sequence: int
    password: str = field(repr=False)


@dataclass
class CheckerState:
    """Password, strength estimate and the latest breach check result."""

    password: str = field(default="", repr=False)
    user_inputs: Sequence[str] = ()
    strength: StrengthReport | None = None
    strength_error: str | None = NO_DATA_TEXT
    breach: PasswordCheckResult = field(default_factory=PasswordCheckResult.not_checked)
    _sequence: int = field(default=0, init=False, repr=False)

    @property
    def sequence(self) -> int:
        """Sequence number of the most recently issued check."""
        return self._sequence

    def update(self, message: Message) -> CheckRequest | None:
        """Apply a message and return a check to run, if any."""
        if isinstance(message, PasswordChanged):
            self._set_password(message.password)
            return None

        if isinstance(message, CheckDatabase):
            self._sequence += 1
            self.breach = PasswordCheckResult.checking()
            return CheckRequest(sequence=self._sequence, password=self.password)

        if isinstance(message, ResultFetched):
            if message.sequence != self._sequence:
                logger.debug(
                    f"Discarding result for check {message.sequence}, "
                    f"latest is {self._sequence}"
                )
                return None
            self.breach = message.result
            return None

        raise TypeError(f"Unknown message: {message!r}")

    def _set_password(self, password: str) -> None:
        self.password = password
        # Any in-flight check now belongs to an old password
        self._sequence += 1
        self.breach = PasswordCheckResult.not_checked()

        try:
            self.strength = score_password(password, self.user_inputs)
            self.strength_error = None
        except StrengthError as e:
            self.strength = None
            self.strength_error = str(e) if password else NO_DATA_TEXT
