"""Diff command - show what a commit changed relative to its parent."""

import click
from tent.core.errors import TentError
from tent.cli.output import info, fail, require_repository


@click.command('diff')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.option('-c', '--content', 'show_content', is_flag=True,
              help='Print the full content of each file before its changes')
@click.argument('commit')
def diff_cmd(no_color, show_content, commit):
    """
    Show the changes introduced by a commit.
    
    Each file in the commit is compared with the same path in the parent
    commit. Files missing from the parent are reported as new; files of
    the first commit have nothing to compare against.
    
    Examples:
        tent diff HEAD
        tent diff a1b2c3d
        tent diff --no-color a1b2c3d
        tent diff --content HEAD
    """
    repo = require_repository()
    use_color = not no_color and repo.config.get_bool('color', 'ui', True)
    
    try:
        changes = repo.show_commit_diff(commit)
    except TentError as e:
        fail(e)
    
    if not changes:
        click.echo(info("No files in this commit"))
        return
    
    click.echo(repo.diff.format_changes(changes, color=use_color, show_content=show_content))
