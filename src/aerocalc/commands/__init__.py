"""Command-line entry points."""

import logging
from pathlib import Path

import click

from aerocalc.config import Config

config_option = click.option(
    '-c',
    '--config',
    'config_file',
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help='TOML configuration file to overlay on the defaults.',
)

verbose_option = click.option(
    '-v', '--verbose', is_flag=True, help='Enable debug logging.'
)


def setup(config_file: str | Path | None, verbose: bool) -> Config:
    """Configure logging and load the global configuration for a command."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    Config.reset()
    return Config.load(config_file)
