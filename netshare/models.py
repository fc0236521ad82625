"""Data schemas for mount records and volume descriptors"""

from typing import Dict, Any
from dataclasses import dataclass, field, asdict, replace


SHARE_OPT = 'share'
CREATE_OPT = 'create'


@dataclass
class Mount:
    """In-memory bookkeeping entry for a volume"""
    name: str
    hostdir: str
    connections: int = 0
    opts: Dict[str, str] = field(default_factory=dict)
    managed: bool = False

    @property
    def active(self) -> bool:
        return self.connections > 0

    def copy(self) -> 'Mount':
        return replace(self, opts=dict(self.opts))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Volume:
    """Volume descriptor handed to the plugin RPC layer"""
    name: str
    mountpoint: str

    def to_dict(self) -> Dict[str, Any]:
        return {'Name': self.name, 'Mountpoint': self.mountpoint}
