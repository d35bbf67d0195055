"""Commit command - create a commit from staged changes."""

import click
from tent.core.errors import TentError
from tent.cli.output import success, error, info, warning, fail, abbrev_length, require_repository


@click.command('commit')
@click.argument('message', required=False)
@click.option('-m', '--message', 'message_opt', help='Commit message')
def commit_cmd(message, message_opt):
    """
    Record the staged files as a new commit.
    
    The new commit's parent is the current HEAD. Afterwards HEAD points
    to the new commit and the staging area is empty. Committing with
    nothing staged records an empty commit.
    
    Examples:
        tent commit "Initial commit"
        tent commit -m "Add feature"
    """
    if message is not None and message_opt is not None:
        raise click.UsageError("Give the commit message either as an argument or with -m, not both")
    message = message if message is not None else message_opt
    if message is None:
        click.echo(error("Commit message required: tent commit <message>"))
        raise click.Abort()
    
    repo = require_repository()
    
    try:
        commit_hash = repo.commit(message)
        commit = repo.graph.read_commit(commit_hash)
    except TentError as e:
        fail(e)
    
    abbrev = abbrev_length(repo.config)
    
    staged = len(commit.files)
    parent = commit.parent
    
    if staged == 0:
        click.echo(warning("Nothing was staged; recorded an empty commit"))
    click.echo(success(f"Committed successfully: {commit_hash}"))
    click.echo(info(f"Message: {message}"))
    click.echo(info(f"Parent: {parent[:abbrev]}" if parent else "(root commit)"))
    click.echo(info(f"Files: {staged}"))
