"""Initialize a new Tent repository."""

import click
from pathlib import Path
from tent.core.errors import TentError
from tent.core.repository import Repository
from tent.cli.output import success, error, info, fail


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Tent repository.
    
    Creates a .tent directory with the object store, HEAD, index and
    config. Running it again on an existing repository changes nothing.
    
    Examples:
        tent init                    # Initialize in current directory
        tent init my-project         # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()
    repo = Repository(repo_path)
    existed = repo.is_initialized()
    
    try:
        if not repo_path.exists():
            repo_path.mkdir(parents=True)
            click.echo(info(f"Created directory {repo_path}"))
        repo.init()
    except OSError as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()
    except TentError as e:
        fail(e)
    
    if existed:
        click.echo(info(f"Reinitialized existing Tent repository in {repo.tent_dir}"))
        return
    
    click.echo(success(f"Initialized empty Tent repository in {repo.tent_dir}"))
    click.echo(info("You can now start tracking files with:"))
    click.echo(info("  tent add <file>"))
    click.echo(info("  tent commit <message>"))
