"""Volume bookkeeping drivers package"""

from netshare.drivers.mount_store import MetadataStore
from netshare.drivers.mounts import MountRegistry

__all__ = ['MetadataStore', 'MountRegistry']
