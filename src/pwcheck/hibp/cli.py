"""
CLI commands for Pwned Passwords checks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from pwcheck.config import CheckerConfig
from pwcheck.hibp.client import PwnedPasswordsClient
from pwcheck.hibp.models import PasswordCheckResult, QueryDigest, RiskLevel

console = Console()
err_console = Console(stderr=True)


def risk_color(risk: RiskLevel) -> str:
    """Get color for risk level."""
    colors = {
        RiskLevel.SAFE: "green",
        RiskLevel.LOW: "yellow",
        RiskLevel.MEDIUM: "orange3",
        RiskLevel.HIGH: "red",
        RiskLevel.CRITICAL: "bold red",
    }
    return colors.get(risk, "white")


def run_check(
    config: CheckerConfig,
    password: str | None = None,
    digest: QueryDigest | None = None,
    show_progress: bool = True,
) -> PasswordCheckResult:
    """Run one breach check to completion from synchronous code."""
    async def _check():
        async with PwnedPasswordsClient(config) as client:
            if digest is not None:
                return await client.check_password_hash(digest.full)
            return await client.check_password(password or "")

    if not show_progress:
        return asyncio.run(_check())

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Checking password...", total=None)
        return asyncio.run(_check())


def _parse_hash(ctx: click.Context, param: click.Parameter, value: str | None) -> QueryDigest | None:
    if value is None:
        return None
    try:
        return QueryDigest.from_hex(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


@click.group()
@click.pass_context
def hibp(ctx: click.Context) -> None:
    """Have I Been Pwned - password breach checks.

    Password checks use k-anonymity: only the first 5 characters of the
    SHA-1 hash are sent to the API. No API key is needed.
    """
    ctx.ensure_object(dict)
    ctx.obj.setdefault("console", console)
    if "config" not in ctx.obj:
        ctx.obj["config"] = CheckerConfig.from_env()


@hibp.command("password")
@click.option("--password", "-p", help="Password to check (or prompts securely)")
@click.option("--hash", "password_hash", callback=_parse_hash, help="SHA-1 hash to check instead")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def check_password(
    ctx: click.Context,
    password: str | None,
    password_hash: QueryDigest | None,
    json_output: bool,
) -> None:
    """Check if a password has been exposed in data breaches.

    Uses k-anonymity - only the first 5 characters of the SHA-1 hash
    are sent to the API. Your password never leaves your system.

    Example:
        pwcheck hibp password
        pwcheck hibp password --hash 5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8
    """
    if password is None and password_hash is None:
        password = click.prompt("Password to check", hide_input=True)

    result = run_check(
        ctx.obj["config"],
        password=password,
        digest=password_hash,
        show_progress=not json_output,
    )

    if result.error:
        err_console.print(f"[red]Error: {escape(result.error)}[/red]")
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2, default=str))
        return

    color = risk_color(result.risk_level)

    if not result.is_pwned:
        console.print(Panel(
            f"[green]Good news![/green] This password has NOT been found in any known data breaches.\n\n"
            f"Risk Level: [{color}]{result.risk_level.value.upper()}[/{color}]",
            title="Password Check Result"
        ))
    else:
        console.print(Panel(
            f"[red]Warning![/red] This password has been seen [bold]{result.occurrences:,}[/bold] times in data breaches!\n\n"
            f"Risk Level: [{color}]{result.risk_level.value.upper()}[/{color}]\n\n"
            f"{result.risk_description}",
            title="Password Check Result"
        ))


@hibp.command("config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show the effective Pwned Passwords configuration."""
    config: CheckerConfig = ctx.obj["config"]

    table = Table(title="Pwned Passwords Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Password API URL", escape(config.api_url))
    table.add_row("Timeout", f"{config.timeout:g}s")
    table.add_row("User-Agent", escape(config.user_agent))
    table.add_row(
        "Response Padding",
        "[green]Enabled[/green]" if config.add_padding else "[dim]Disabled[/dim]",
    )

    console.print(table)


def add_hibp_commands(main_cli):
    """Add HIBP commands to main CLI."""
    main_cli.add_command(hibp)
