"""Main CLI entry point with configuration options"""

import sys

import click

from netshare.cli import commands
from netshare.config import NetshareConfig
from netshare.exceptions import ConfigurationException
from netshare.utils.logger import get_logger, setup_logging
from netshare.version import version_string

LOG = get_logger(__name__)


@click.group()
@click.version_option(version=version_string(), prog_name='netshare-meta')
@click.option('--config', help='Configuration file path')
@click.option('--root', help='Volume root directory (overrides config)')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                                case_sensitive=False),
              help='Log level')
@click.option('--json-logs', is_flag=True,
              help='Emit logs as JSON')
@click.pass_context
def cli(ctx, config, root, log_level, json_logs):
    """Inspect netshare volume metadata"""
    ctx.ensure_object(dict)

    try:
        netshare_config = NetshareConfig.load_config(config)
    except ConfigurationException as e:
        click.echo(f"Error loading config file: {e}", err=True)
        sys.exit(1)

    # Override with CLI arguments
    if root:
        netshare_config.root = root
    if log_level:
        netshare_config.log_level = log_level.upper()
    if json_logs:
        netshare_config.log_json = True

    try:
        netshare_config.validate()
    except ConfigurationException as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)

    setup_logging(netshare_config.log_level, netshare_config.log_format,
                  netshare_config.log_json)

    ctx.obj['config'] = netshare_config


@cli.command('list')
@click.option('--format', '-f',
              type=click.Choice(['table', 'json'], case_sensitive=False),
              default='table',
              help='Output format')
@click.pass_context
def list_cmd(ctx, format):
    """
    List all volumes recorded in the metadata directory

    Examples:
      netshare-meta list
      netshare-meta list --format json
    """
    commands.list_volumes(ctx.obj['config'], format.lower())


@cli.command()
@click.argument('name')
@click.option('--format', '-f',
              type=click.Choice(['text', 'json'], case_sensitive=False),
              default='text',
              help='Output format')
@click.pass_context
def show(ctx, name, format):
    """
    Show the recorded options of a volume

    Examples:
      netshare-meta show share1
      netshare-meta show tenantA/share1 --format json
    """
    commands.show_volume(ctx.obj['config'], name, format.lower())


@cli.command()
@click.pass_context
def sweep(ctx):
    """
    Remove empty directories left under the metadata directory

    Example:
      netshare-meta sweep
    """
    commands.sweep(ctx.obj['config'])


@cli.command()
@click.argument('name')
@click.pass_context
def path(ctx, name):
    """
    Print the host directory of a volume

    Example:
      netshare-meta path tenantA/share1
    """
    commands.show_path(ctx.obj['config'], name)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
