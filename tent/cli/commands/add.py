"""Add command - stage files for commit."""

import click
from pathlib import Path
from tent.core.errors import TentError
from tent.cli.output import success, info, fail, require_repository


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.
    
    Stage files for the next commit. Modified files must be added
    again to stage the new changes. Adding the same file twice stages
    it twice.
    
    Examples:
        tent add file.txt
        tent add a.txt b.txt
    """
    repo = require_repository()
    
    for path_arg in paths:
        path = Path(path_arg)
        if not path.is_absolute():
            path = Path.cwd() / path
        
        try:
            entry = repo.add(path)
        except TentError as e:
            fail(e)
        
        click.echo(info(entry.hash))
        click.echo(success(f"Added file: {entry.path}"))
