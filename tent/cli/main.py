"""Main CLI entry point for Tent."""

import os

import click
from colorama import init

from tent import __version__
from tent.cli.output import BANNER, fail
from tent.cli.commands import init_cmd, add_cmd, commit_cmd, log_cmd, diff_cmd, config_cmd
from tent.core.config import Config
from tent.core.errors import TentError
from tent.core.repository import Repository
from tent.utils.log import configure_logging

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class TentGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


def resolve_log_level(verbose: bool) -> str:
    """--verbose, then TENT_LOG_LEVEL, then core.loglevel from config."""
    if verbose:
        return 'DEBUG'
    if os.getenv('TENT_LOG_LEVEL'):
        return os.environ['TENT_LOG_LEVEL']
    repo = Repository.find_repository()
    config = repo.config if repo else Config()
    return config.get('core', 'loglevel')


@click.group(cls=TentGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Log debug output to stderr')
def cli(verbose):
    try:
        configure_logging(resolve_log_level(verbose))
    except TentError as e:
        fail(e)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(log_cmd)
cli.add_command(diff_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
