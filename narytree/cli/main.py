"""
CLI entry point for Narytree.

Provides command-line access to tree construction, proof generation and
proof verification over blocks given as arguments.
"""

import sys
from pathlib import Path
from typing import Optional

import click

from narytree._version import __version__
from narytree.config.settings import get_default_config_path, load_config
from narytree.exceptions import ConfigurationError
from narytree.logging_config import get_logger, setup_logging
from narytree.cli.context import CLIContext, pass_context


@click.group()
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help=f'Path to configuration file (default: {get_default_config_path()})',
)
@click.option(
    '--log-level',
    '-l',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    default=None,
    help='Set logging level (overrides configuration)',
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose output',
)
@click.version_option(version=__version__, prog_name='narytree')
@pass_context
def cli(ctx: CLIContext, config: Optional[Path], log_level: Optional[str], verbose: bool):
    """
    Narytree - N-ary Merkle trees with membership proofs.

    Build a tree over blocks, print proofs for a leaf, and verify a block
    against a root hash.
    """
    ctx.verbose = verbose
    ctx.config_path = str(config) if config else None

    # Configuration loading may log before the configured level is known
    setup_logging(level=log_level or "WARNING", json_format=False)

    try:
        ctx.config = load_config(ctx.config_path)
    except ConfigurationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)

    effective_log_level = log_level.upper() if log_level else ctx.config.logging.level
    log_file = Path(ctx.config.logging.file) if ctx.config.logging.file else None

    try:
        setup_logging(
            level=effective_log_level,
            log_file=log_file,
            json_format=ctx.config.logging.format == "json",
        )
    except OSError as e:
        click.echo(f"Error: Failed to set up logging: {e}", err=True)
        sys.exit(1)

    if verbose:
        logger = get_logger("cli")
        logger.info(f"Loaded configuration from: {ctx.config_path or 'defaults'}")
        logger.info(f"Log level: {effective_log_level}")


# Import and register tree commands
from narytree.cli.merkle import prove_command, root_command, verify_command
cli.add_command(root_command, name='root')
cli.add_command(prove_command, name='prove')
cli.add_command(verify_command, name='verify')


def main():
    cli()


if __name__ == '__main__':
    main()
