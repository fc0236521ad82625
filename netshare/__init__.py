"""
netshare volume metadata core

Bookkeeping layer of a network-share volume plugin: tracks which shares
a container host has mounted, with what options, and how many
containers reference each mount. Managed volumes are mirrored to disk as
one JSON file per volume so they survive driver restarts.

Example:
    >>> from netshare import MountRegistry
    >>>
    >>> registry = MountRegistry('/var/lib/docker-volumes/netshare')
    >>> mount = registry.create('tenantA/share1', {'share': 'nas:/export/a'})
    >>> registry.add('tenantA/share1')
    >>> registry.count('tenantA/share1')
    1
"""

from .drivers import (
    MetadataStore,
    MountRegistry
)

from .models import (
    Mount,
    Volume,
    SHARE_OPT,
    CREATE_OPT
)

from .exceptions import (
    NetshareException,
    VolumeInUseException,
    InvalidVolumeNameException,
    MetadataWriteError,
    ConfigurationException
)

from .config import NetshareConfig

__version__ = '1.0.0'

__all__ = [
    # Core
    'MetadataStore',
    'MountRegistry',

    # Models
    'Mount',
    'Volume',
    'SHARE_OPT',
    'CREATE_OPT',

    # Exceptions
    'NetshareException',
    'VolumeInUseException',
    'InvalidVolumeNameException',
    'MetadataWriteError',
    'ConfigurationException',

    # Config
    'NetshareConfig',

    # Version
    '__version__',
]


def get_version():
    """Get the current version of the package."""
    return __version__
