"""CLI commands for Tent."""

from tent.cli.commands.init import init_cmd
from tent.cli.commands.add import add_cmd
from tent.cli.commands.commit import commit_cmd
from tent.cli.commands.log import log_cmd
from tent.cli.commands.diff import diff_cmd
from tent.cli.commands.config import config_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'log_cmd', 'diff_cmd', 'config_cmd']
