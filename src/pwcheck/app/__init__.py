"""
Interactive password checker application.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from pwcheck.app.state import (
    CheckDatabase,
    CheckerState,
    CheckRequest,
    PasswordChanged,
    ResultFetched,
)
from pwcheck.app.shell import CheckerShell, render_state

__all__ = [
    "CheckerState",
    "CheckRequest",
    "PasswordChanged",
    "CheckDatabase",
    "ResultFetched",
    "CheckerShell",
    "render_state",
]
