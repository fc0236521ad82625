"""Custom exceptions for netshare"""


class NetshareException(Exception):
    """Base exception for netshare"""
    pass


class VolumeInUseException(NetshareException):
    """Exception raised when deleting a volume that still has connections"""

    def __init__(self, name: str, connections: int):
        super().__init__("Volume is currently in use")
        self.name = name
        self.connections = connections


class InvalidVolumeNameException(NetshareException):
    """Exception raised when a volume name cannot be mapped under the metadata root"""
    pass


class MetadataWriteError(NetshareException):
    """
    Exception raised when a metadata file cannot be persisted.

    This is fatal: in-memory state no longer matches the metadata
    directory and the driver must stop serving requests.
    """

    def __init__(self, name: str, path: str, cause: Exception):
        super().__init__(f"Failed to write metadata for volume '{name}' to {path}: {cause}")
        self.name = name
        self.path = path
        self.cause = cause


class ConfigurationException(NetshareException):
    """Exception raised for configuration errors"""
    pass
