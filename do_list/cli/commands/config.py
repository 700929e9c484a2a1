"""Configuration management commands for Do List."""

import json

import click

from ..helpers import fail, get_project_context
from ...services.exceptions import DoListError
from ...utils.config_manager import ConfigManager


@click.group()
def config():
    """Manage task list configuration"""
    pass


@config.command()
def show():
    """Display current configuration"""
    config_manager = ConfigManager(get_project_context())

    current = config_manager.get_config()
    click.echo("Configuration:")
    click.echo(json.dumps(current.model_dump(mode='json'), indent=2))


@config.command(name='set')
@click.argument('key')
@click.argument('value')
def set_value(key, value):
    """Set a configuration value"""
    config_manager = ConfigManager(get_project_context())

    try:
        updated = config_manager.update(key, value)
    except DoListError as e:
        fail(e)

    click.echo(f"Set {key} = {updated.model_dump(mode='json')[key]}")


@config.command()
def reset():
    """Reset configuration to defaults"""
    config_manager = ConfigManager(get_project_context())

    try:
        config_manager.reset()
    except DoListError as e:
        fail(e)

    click.echo("Configuration reset to defaults")
