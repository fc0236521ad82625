"""CLI command implementations"""

import json
import sys

import click
from tabulate import tabulate

from netshare.config import NetshareConfig
from netshare.drivers import MountRegistry
from netshare.drivers.mounts import mountpoint
from netshare.utils.logger import get_logger
from netshare.utils.validators import validate_volume_name

LOG = get_logger(__name__)


def _open_registry(config: NetshareConfig) -> MountRegistry:
    LOG.debug(f"Opening registry at {config.root}")
    return MountRegistry.from_config(config)


def list_volumes(config: NetshareConfig, format: str = 'table'):
    """List every volume recorded in the metadata directory"""
    registry = _open_registry(config)
    volumes = registry.get_volumes()

    if format == 'json':
        data = []
        for volume in volumes:
            item = volume.to_dict()
            item['Options'] = registry.get_options(volume.name)
            data.append(item)
        click.echo(json.dumps(data, indent=2))
        return

    if not volumes:
        click.echo("No volumes found")
        return

    rows = []
    for volume in volumes:
        opts = registry.get_options(volume.name)
        rows.append([
            volume.name,
            volume.mountpoint,
            ', '.join(f"{k}={v}" for k, v in sorted(opts.items()))
        ])

    click.echo(tabulate(rows, headers=['Name', 'Mountpoint', 'Options']))
    click.echo(f"\nTotal: {len(volumes)} volumes")


def show_volume(config: NetshareConfig, name: str, format: str = 'text'):
    """Show the recorded options of one volume"""
    registry = _open_registry(config)

    mount = registry.get_mount(name)
    if mount is None:
        click.echo(f"Volume not found: {name}", err=True)
        sys.exit(1)

    if format == 'json':
        click.echo(json.dumps({
            'Name': mount.name,
            'Mountpoint': mount.hostdir,
            'Managed': mount.managed,
            'Options': mount.opts
        }, indent=2))
        return

    click.echo(f"Name:       {mount.name}")
    click.echo(f"Mountpoint: {mount.hostdir}")
    click.echo(f"Managed:    {mount.managed}")
    if mount.opts:
        click.echo(tabulate(sorted(mount.opts.items()), headers=['Option', 'Value']))


def sweep(config: NetshareConfig):
    """Remove empty directories under the metadata directory"""
    registry = _open_registry(config)
    removed = registry.store.prune_empty_dirs()

    for path in removed:
        click.echo(f"Removed {path}")
    click.echo(f"Pruned {len(removed)} empty directories")


def show_path(config: NetshareConfig, name: str):
    """Print the host directory a volume is mounted at"""
    if not validate_volume_name(name):
        click.echo(f"Invalid volume name: {name}", err=True)
        sys.exit(1)

    click.echo(mountpoint(config.root, name))
