"""
pwcheck CLI - Main entry point for the command-line interface.
"""

import asyncio
import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from pwcheck import __version__
from pwcheck.config import CheckerConfig
from pwcheck.hibp.cli import add_hibp_commands, run_check
from pwcheck.strength import MAX_SCORE, StrengthError, score_password

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Route log records through rich, DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def _print_count(ctx: click.Context, password: str) -> None:
    config = (ctx.obj or {}).get("config") or CheckerConfig.from_env()
    result = run_check(config, password=password, show_progress=False)

    if result.error:
        click.echo(f"Error: {result.error}", err=True)
        ctx.exit(1)

    click.echo(result.occurrences)


@click.group()
@click.version_option(version=__version__, prog_name="pwcheck")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """pwcheck - Password strength and breach exposure checks

    Scores passwords locally with zxcvbn and looks them up in Have I
    Been Pwned's Pwned Passwords corpus using k-anonymity.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    ctx.obj["config"] = CheckerConfig.from_env()


@main.command("check")
@click.argument("password")
@click.pass_context
def check(ctx: click.Context, password: str) -> None:
    """Print how many times PASSWORD appears in known breaches.

    Example:
        pwcheck check hunter2
    """
    _print_count(ctx, password)


@click.command("pwned-count")
@click.argument("password")
@click.pass_context
def pwned_count(ctx: click.Context, password: str) -> None:
    """Print how many times PASSWORD appears in known breaches."""
    _print_count(ctx, password)


@main.command("strength")
@click.argument("password")
@click.option(
    "--input", "-i", "user_inputs", multiple=True,
    help="Word to penalize, e.g. your name or the site (repeatable)",
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def strength(password: str, user_inputs: tuple[str, ...], json_output: bool) -> None:
    """Estimate the strength of PASSWORD.

    Example:
        pwcheck strength 'correct horse battery staple'
    """
    try:
        report = score_password(password, user_inputs)
    except StrengthError as e:
        raise click.BadParameter(str(e), param_hint="PASSWORD") from e

    if json_output:
        click.echo(json.dumps(report.to_dict(), indent=2))
        return

    body = report.to_text()
    if report.crack_time:
        body += f"\n\nOffline crack time (slow hash): {report.crack_time}"
    console.print(Panel(body, title=f"Strength {report.score}/{MAX_SCORE}"))


@main.command("app")
@click.option(
    "--input", "-i", "user_inputs", multiple=True,
    help="Word to penalize when scoring (repeatable)",
)
@click.pass_context
def app(ctx: click.Context, user_inputs: tuple[str, ...]) -> None:
    """Interactive password checker.

    Type a password to see its strength; press Enter on an empty line to
    look it up in Pwned Passwords. Ctrl-D quits.
    """
    from pwcheck.app.shell import CheckerShell

    shell = CheckerShell(ctx.obj["config"], console=console, user_inputs=user_inputs)
    asyncio.run(shell.run())


add_hibp_commands(main)


if __name__ == "__main__":
    main()
