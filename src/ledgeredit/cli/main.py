#!/usr/bin/env python3
"""
Main CLI Entry Point for the Ledger Account Editor

Provides the unified command-line interface for loading, reviewing and
editing a plaintext ledger.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    ledgeredit - Plaintext Ledger Account Editor

    Keeps a raw ledger and its structured view in sync while you change the
    account of individual postings.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["LEDGEREDIT_ENV"] = config_env

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("ledgeredit").setLevel(logging.DEBUG)

    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e))

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"State file: {config.store_file}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from ledgeredit import __author__, __version__

    click.echo(f"ledgeredit v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  State File: {config_obj.store_file}")
    click.echo(f"  Amount Column: {config_obj.editor.amount_column}")
    click.echo(f"  Minimum Gap: {config_obj.editor.min_gap}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


# Import command groups
from .accounts import accounts  # noqa: E402
from .ledger import ledger  # noqa: E402

main.add_command(ledger)
main.add_command(accounts)


if __name__ == "__main__":
    main()
