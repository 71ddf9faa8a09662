"""
Terminal front end for the interactive password checker.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging

import click
from rich.console import Console, Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.text import Text

from pwcheck.app.state import (
    CheckDatabase,
    CheckerState,
    CheckRequest,
    Message,
    PasswordChanged,
    ResultFetched,
)
from pwcheck.config import CheckerConfig
from pwcheck.hibp.client import PwnedPasswordsClient
from pwcheck.hibp.errors import PwnedPasswordsError
from pwcheck.hibp.models import CheckStatus, PasswordCheckResult

logger = logging.getLogger(__name__)

TITLE = "Password Checker 2000"

PROMPT = "Password (empty line checks breaches, Ctrl-D quits)"

SCORE_COLORS = ["red", "red", "orange3", "yellow", "green"]


def render_state(state: CheckerState) -> Panel:
    """Build the panel shown after every state change."""
    if state.strength is not None:
        score = state.strength.score
        bar = ProgressBar(
            total=1.0,
            completed=state.strength.fraction,
            complete_style=SCORE_COLORS[score],
        )
        strength_text = Text(state.strength.to_text())
    else:
        bar = ProgressBar(total=1.0, completed=0)
        strength_text = Text(state.strength_error or "", style="dim")

    breach = state.breach
    if breach.status == CheckStatus.COMPLETE:
        style = "red" if breach.is_pwned else "green"
    elif breach.status == CheckStatus.FAILED:
        style = "bold red"
    else:
        style = "dim"
    breach_text = Text(breach.display_text, style=style)

    return Panel(
        Group(bar, strength_text, Text(""), breach_text),
        title=TITLE,
    )


class CheckerShell:
    """Interactive loop that feeds user input into a CheckerState.

    Breach checks run as tasks on the event loop while the prompt waits
    for the next line in a worker thread, so input stays editable while
    a request is in flight.
    """

    def __init__(
        self,
        config: CheckerConfig | None = None,
        console: Console | None = None,
        user_inputs: tuple[str, ...] = (),
    ):
        self.config = config or CheckerConfig.from_env()
        self.console = console or Console()
        self.state = CheckerState(user_inputs=user_inputs)
        self._client: PwnedPasswordsClient | None = None
        self._tasks: set[asyncio.Task] = set()

    def dispatch(self, message: Message) -> None:
        """Apply a message, start any requested check, and redraw."""
        request = self.state.update(message)
        if request is not None:
            self._start_check(request)
        self.console.print(render_state(self.state))

    def _start_check(self, request: CheckRequest) -> None:
        task = asyncio.get_running_loop().create_task(self._run_check(request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run_check(self, request: CheckRequest) -> None:
        if self._client is None:
            result = PasswordCheckResult(status=CheckStatus.FAILED, error="Checker is not running")
        else:
            try:
                result = await self._client.check_password(request.password)
            except PwnedPasswordsError as e:
                result = PasswordCheckResult.from_error(e)
            except Exception as e:
                logger.exception("Breach check failed unexpectedly")
                result = PasswordCheckResult(
                    status=CheckStatus.FAILED,
                    error=f"Check failed: {e}",
                )
        self.dispatch(ResultFetched(request.sequence, result))

    def _prompt(self) -> str | None:
        try:
            return click.prompt(PROMPT, default="", show_default=False, hide_input=True)
        except click.Abort:
            return None

    async def run(self) -> None:
        """Run until the user quits."""
        self.console.print(render_state(self.state))
        async with PwnedPasswordsClient(self.config) as client:
            self._client = client
            try:
                while True:
                    line = await asyncio.to_thread(self._prompt)
                    if line is None:
                        break
                    if line:
                        self.dispatch(PasswordChanged(line))
                    else:
                        self.dispatch(CheckDatabase())
            finally:
                for task in list(self._tasks):
                    task.cancel()
                if self._tasks:
                    await asyncio.gather(*self._tasks, return_exceptions=True)
                self._client = None
