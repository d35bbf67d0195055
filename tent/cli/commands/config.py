"""Config command - manage repository configuration."""

import click
from tent.core.config import Config, split_key
from tent.core.errors import TentError
from tent.core.repository import Repository
from tent.cli.output import success, error, info, fail


def _config_for(is_global):
    if is_global:
        return Config()
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a tent repository (use --global for global config)"))
        raise click.Abort()
    return repo.config


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.
    
    Examples:
        tent config set color.ui false
        tent config set --global core.abbrev 10
    """
    config = _config_for(is_global)
    section, option = split_key(key)
    
    try:
        config.set(section, option, value, global_config=is_global)
    except TentError as e:
        fail(e)
    
    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Get global config only')
def config_get(key, is_global):
    """
    Get a config value.
    
    Examples:
        tent config get color.ui
        tent config get core.abbrev
    """
    repo = None if is_global else Repository.find_repository()
    config = repo.config if repo else Config()
    section, option = split_key(key)
    
    value = config.get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.
    
    Examples:
        tent config list
        tent config list --global
    """
    repo = None if is_global else Repository.find_repository()
    config = repo.config if repo else Config()
    values = config.list_all(global_only=is_global)
    
    if not values:
        click.echo(info("No configuration set"))
        return
    
    for key, value in sorted(values.items()):
        click.echo(f"{key}={value}")
