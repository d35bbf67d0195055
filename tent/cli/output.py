"""CLI output utilities and formatting."""

import click
from colorama import Fore, Style

from tent.core.errors import TentError

# Range allowed for core.abbrev
MIN_ABBREV = 4
MAX_ABBREV = 40

BANNER = f"""
{Fore.YELLOW}╔══════════════════════════════════════╗{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}tent{Style.RESET_ALL}                               {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.WHITE}A tiny content-addressed VCS{Style.RESET_ALL}       {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}╚══════════════════════════════════════╝{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def abbrev_length(config) -> int:
    """Hash abbreviation length from core.abbrev, clamped to MIN_ABBREV..MAX_ABBREV."""
    return min(max(config.get_int('core', 'abbrev', 7), MIN_ABBREV), MAX_ABBREV)


def fail(exc: TentError):
    """Report a Tent error and exit with its exit code."""
    click.echo(error(exc.message))
    raise click.exceptions.Exit(exc.exit_code)


def require_repository():
    """Return the enclosing repository, or abort if there is none."""
    from tent.core.repository import Repository

    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a tent repository (run 'tent init' first)"))
        raise click.Abort()
    return repo
