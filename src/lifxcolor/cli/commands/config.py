"""
Config command group.

Commands:
    - config show                              # Display configuration
    - config set --default-kelvin N ...        # Update configuration
    - config reset                             # Restore defaults
"""

import logging
from typing import Optional

import click
from pydantic import ValidationError

from lifxcolor.cli.output import fail, get_config
from lifxcolor.exceptions import wrap_config_error
from lifxcolor.models import AppConfig
from lifxcolor.models.config import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def _save(ctx: click.Context, config: AppConfig) -> None:
    path = ctx.obj.get("config_path") or DEFAULT_CONFIG_PATH
    try:
        config.save(path)
    except OSError as e:
        fail(e)
    click.echo(f"Saved configuration to {path}")


@click.group()
def config():
    """Configure lifxcolor defaults."""
    pass


@config.command('show')
@click.pass_context
def show(ctx):
    """Display the current configuration."""
    current = get_config(ctx)
    for field, value in current.model_dump().items():
        click.echo(f"{field}: {value}")


@config.command('set')
@click.option('--default-kelvin', '-k', type=int, default=None,
              help='Kelvin used when a command does not specify one (2500-10000)')
@click.option('--output-format', '-f', type=click.Choice(['text', 'json'], case_sensitive=False),
              default=None, help='Default output format')
@click.pass_context
def set_config(ctx, default_kelvin: Optional[int], output_format: Optional[str]):
    """Update configuration values and save."""
    updates = {}
    if default_kelvin is not None:
        updates["default_kelvin"] = default_kelvin
    if output_format is not None:
        updates["output_format"] = output_format.lower()

    if not updates:
        raise click.UsageError("Nothing to set. Pass at least one option.")

    current = get_config(ctx)
    path = ctx.obj.get("config_path") or DEFAULT_CONFIG_PATH
    try:
        updated = AppConfig.model_validate({**current.model_dump(), **updates})
    except ValidationError as e:
        fail(wrap_config_error(e, path))

    logger.info(f"Updating config {path}: {updates}")

    _save(ctx, updated)


@config.command('reset')
@click.confirmation_option(prompt='Reset configuration to defaults?')
@click.pass_context
def reset(ctx):
    """Restore the default configuration."""
    _save(ctx, AppConfig())
