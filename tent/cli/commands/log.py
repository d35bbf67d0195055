"""Log command - show commit history."""

import click
from itertools import islice
from colorama import Fore, Style
from tent.core.errors import TentError
from tent.core.objects import parse_timestamp
from tent.cli.output import warning, fail, abbrev_length, require_repository


def format_timestamp(timestamp):
    """Format an ISO timestamp as a readable local date."""
    try:
        dt = parse_timestamp(timestamp).astimezone()
    except ValueError:
        return timestamp
    return dt.strftime("%a %b %d %H:%M:%S %Y %z")


def display_commit_oneline(commit_hash, commit, abbrev):
    """Display commit in one-line format."""
    summary = commit.message.split('\n')[0]
    click.echo(f"{Fore.YELLOW}{commit_hash[:abbrev]}{Style.RESET_ALL} {summary}")


def display_commit_full(commit_hash, commit, abbrev):
    """Display commit with message, date and files."""
    click.echo(f"{Fore.YELLOW}commit {commit_hash}{Style.RESET_ALL}")
    
    if commit.parent:
        click.echo(f"Parent:    {commit.parent}")
    
    click.echo(f"Date:      {format_timestamp(commit.timestamp)}")
    
    click.echo()
    for line in commit.message.split('\n'):
        click.echo(f"    {line}")
    click.echo()
    
    click.echo("Files:")
    for entry in commit.files:
        click.echo(f"    {entry.path} ({entry.hash[:abbrev]})")
    click.echo()


@click.command('log')
@click.option('-n', '--max-count', type=int, help='Limit number of commits to show')
@click.option('--oneline', is_flag=True, help='Show commits in one-line format')
@click.argument('commit', required=False)
def log_cmd(max_count, oneline, commit):
    """
    Show commit logs.
    
    Displays commit history from HEAD (or the given commit) back to the
    first commit.
    
    Examples:
        tent log                    # Show all commits from HEAD
        tent log -n 10              # Show last 10 commits
        tent log --oneline          # Show compact one-line format
        tent log a1b2c3d            # Show history from specific commit
    """
    repo = require_repository()
    abbrev = abbrev_length(repo.config)
    
    try:
        history = repo.log(commit)
        if max_count is not None:
            history = islice(history, max(max_count, 0))
        
        shown = 0
        for commit_hash, commit_obj in history:
            if oneline:
                display_commit_oneline(commit_hash, commit_obj, abbrev)
            else:
                display_commit_full(commit_hash, commit_obj, abbrev)
            shown += 1
    except TentError as e:
        fail(e)
    
    if shown == 0 and max_count is None:
        click.echo(warning("No commits yet"))
