"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from lifxcolor import __version__

from .commands import compare, config, convert, named

logger = logging.getLogger(__name__)

_handler: Optional[logging.Handler] = None


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    global _handler

    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins for file logging
    if log_file:
        level = getattr(logging, log_level.upper())

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if debug and not log_file:
        log_file = Path.cwd() / "lifxcolor-debug.log"

    if log_file:
        # Keeps last 5 files, max 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    else:
        # stdout carries command output
        handler = logging.StreamHandler()

    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)
        _handler.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _handler = handler

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="lifxcolor")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file path (default: ~/.lifxcolor/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./lifxcolor-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    LIFX color tool - convert colors to the HSBK wire encoding.

    \b
    Examples:
      # RGB to HSBK
      lifxcolor convert rgb 255 128 0

      # Negative hues wrap around (use -- before negative numbers)
      lifxcolor convert hsb -- -10 1 1

      # Decode a wire record
      lifxcolor convert wire 32767 65535 65535 3500

      # Named preset as JSON
      lifxcolor named orange --format json

      # Approximate comparison
      lifxcolor compare 10 0.5 0.5 10.1 0.5 0.5
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(convert)
cli.add_command(named)
cli.add_command(compare)
cli.add_command(config)

if __name__ == "__main__":
    cli()
