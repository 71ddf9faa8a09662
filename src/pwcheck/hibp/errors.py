"""
Exceptions raised by the Pwned Passwords client.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed or unavailable breach check."""
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    PARSE = "parse"
    INPUT_STATE = "input_state"


class PwnedPasswordsError(Exception):
    """Base class for breach check failures."""

    kind: ErrorKind = ErrorKind.NETWORK


class NetworkError(PwnedPasswordsError):
    """Connection, DNS or TLS failure, or a request timeout."""

    kind = ErrorKind.NETWORK


class HttpStatusError(PwnedPasswordsError):
    """The API answered with a non-success status."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status


class ParseError(PwnedPasswordsError):
    """The range response body is not in SUFFIX:COUNT form."""

    kind = ErrorKind.PARSE


class InputStateError(PwnedPasswordsError):
    """No count exists yet (not checked, or check still running)."""

    kind = ErrorKind.INPUT_STATE
