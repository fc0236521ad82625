"""In-memory mount registry with reference counting"""

import os
import threading
from typing import Dict, List, Optional

from netshare.drivers.mount_store import MetadataStore
from netshare.models import Mount, Volume
from netshare.utils.logger import get_logger
from netshare.utils.validators import parse_bool, validate_volume_name
from netshare.exceptions import VolumeInUseException, InvalidVolumeNameException

LOG = get_logger(__name__)

META_DIR = '.meta'


def mountpoint(root: str, name: str) -> str:
    """Host directory for a volume: <root>/<name>, normalized"""
    return os.path.normpath(os.path.join(os.path.abspath(root), name.lstrip('/')))


class MountRegistry:
    """
    Tracks known volumes, their options and live connection counts.

    Volumes created with options are "managed" and always have a
    metadata file; volumes registered implicitly on first use are
    "unmanaged" and never get one. Every public method holds a single
    re-entrant lock for its whole duration, so callers may share one
    instance between threads.
    """

    def __init__(self, root: str, meta_dir: str = META_DIR):
        self.root = os.path.abspath(root)
        self.meta_path = os.path.join(self.root, meta_dir)
        self.store = MetadataStore(self.meta_path)
        self._mounts: Dict[str, Mount] = {}
        self._lock = threading.RLock()

        self._rehydrate()

    @classmethod
    def from_config(cls, config) -> 'MountRegistry':
        """Build a registry from a NetshareConfig"""
        return cls(config.root, meta_dir=config.meta_dir)

    def _rehydrate(self):
        with self._lock:
            for name, opts in self.store.load().items():
                self._mounts[name] = Mount(
                    name=name,
                    hostdir=self.mountpoint(name),
                    connections=0,
                    opts=opts,
                    managed=True
                )
            LOG.info(f"Loaded {len(self._mounts)} volumes from {self.meta_path}")

    def mountpoint(self, name: str) -> str:
        return mountpoint(self.root, name)

    def _check_name(self, name: str):
        if not validate_volume_name(name):
            raise InvalidVolumeNameException(f"Invalid volume name: {name!r}")

    def __len__(self):
        with self._lock:
            return len(self._mounts)

    def __contains__(self, name):
        return self.has_mount(name)

    def get_mount(self, name: str) -> Optional[Mount]:
        """Snapshot of a mount record, or None"""
        with self._lock:
            mount = self._mounts.get(name)
            return mount.copy() if mount else None

    def has_mount(self, name: str) -> bool:
        with self._lock:
            return name in self._mounts

    def has_options(self, name: str) -> bool:
        with self._lock:
            mount = self._mounts.get(name)
            return mount is not None and bool(mount.opts)

    def has_option(self, name: str, key: str) -> bool:
        with self._lock:
            return self.has_options(name) and key in self._mounts[name].opts

    def get_options(self, name: str) -> Dict[str, str]:
        """Options of a volume (a copy); empty when absent"""
        with self._lock:
            if self.has_options(name):
                return dict(self._mounts[name].opts)
            return {}

    def get_option(self, name: str, key: str) -> str:
        with self._lock:
            if self.has_option(name, key):
                return self._mounts[name].opts[key]
            return ''

    def get_option_as_bool(self, name: str, key: str) -> bool:
        return parse_bool(self.get_option(name, key))

    def is_active_mount(self, name: str) -> bool:
        with self._lock:
            mount = self._mounts.get(name)
            return mount is not None and mount.active

    def count(self, name: str) -> int:
        with self._lock:
            mount = self._mounts.get(name)
            return mount.connections if mount else 0

    def add(self, name: str):
        """
        Register a volume on first use, or take another reference to it.

        Raises:
            InvalidVolumeNameException: If the name is empty or not a relative path
        """
        self._check_name(name)
        with self._lock:
            if name in self._mounts:
                self.increment(name)
            else:
                LOG.debug(f"Registering un-managed volume: {name}")
                self._mounts[name] = Mount(
                    name=name,
                    hostdir=self.mountpoint(name),
                    connections=1,
                    managed=False
                )

    def create(self, name: str, opts: Dict[str, str]) -> Mount:
        """
        Create a managed volume, or update the options of an active one.

        Returns a snapshot of the resulting record.

        For an inactive or absent volume the options are persisted and
        the record becomes managed with no connections. For an active
        volume only the options change; they are re-persisted when the
        record is managed.

        Raises:
            InvalidVolumeNameException: If the name is empty or not a relative path
            MetadataWriteError: If the options cannot be persisted (fatal)
        """
        self._check_name(name)
        opts = dict(opts or {})
        with self._lock:
            mount = self._mounts.get(name)
            if mount is not None and mount.active:
                LOG.debug(f"Updating options of active volume: {name}")
                if mount.managed:
                    self.store.save(name, opts)
                mount.opts = opts
                return mount.copy()

            self.store.save(name, opts)

            mount = Mount(
                name=name,
                hostdir=self.mountpoint(name),
                connections=0,
                opts=opts,
                managed=True
            )
            self._mounts[name] = mount
            LOG.debug(f"Created managed volume: {name}")
            return mount.copy()

    def increment(self, name: str) -> int:
        """Add a connection; returns the new count, or 0 when absent"""
        with self._lock:
            mount = self._mounts.get(name)
            if mount is None:
                return 0
            mount.connections += 1
            return mount.connections

    def decrement(self, name: str) -> int:
        """Drop a connection, never going below zero"""
        with self._lock:
            mount = self._mounts.get(name)
            if mount is not None and mount.connections > 0:
                mount.connections -= 1
            return 0

    def delete(self, name: str):
        """
        Forget a volume and remove its metadata file.

        Deleting an absent volume is a no-op.

        Raises:
            VolumeInUseException: If the volume still has connections
        """
        with self._lock:
            LOG.debug(f"Delete volume: {name}, connections: {self.count(name)}")
            mount = self._mounts.get(name)
            if mount is None:
                return
            if mount.connections >= 1:
                raise VolumeInUseException(name, mount.connections)

            del self._mounts[name]
            self.store.delete(name)

    def delete_if_not_managed(self, name: str):
        """Delete a volume only when it is present, inactive and un-managed"""
        with self._lock:
            mount = self._mounts.get(name)
            if mount is not None and not mount.active and not mount.managed:
                LOG.info(f"Removing un-managed volume: {name}")
                self.delete(name)

    def get_volumes(self) -> List[Volume]:
        """All known volumes in registration order"""
        with self._lock:
            return [Volume(name=m.name, mountpoint=m.hostdir) for m in self._mounts.values()]
